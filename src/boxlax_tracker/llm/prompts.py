"""Prompt builder for the post-game goalie coach report."""

from __future__ import annotations

import json
from typing import List, Sequence

from boxlax_tracker.llm.models import ReportTotals, ShotProjection

MAX_REPORT_WORDS = 200


def format_save_percentage(totals: ReportTotals) -> str:
    if totals.total == 0:
        return "0"
    return f"{totals.save_percentage:.1f}"


def build_coach_report_prompt(totals: ReportTotals, shots: Sequence[ShotProjection]) -> str:
    header_lines: List[str] = [
        "You are an expert box lacrosse goalie coach.",
        "Analyze the following shot data from a single game.",
    ]
    context_lines: List[str] = [
        "- Floor Origin X: 0 (Left Boards) to 100 (Right Boards). 50 is center.",
        "- Floor Origin Y: 0 (Center Line) to 100 (Goal Line).",
        "- Goal Placement X: 0 (Left Post) to 100 (Right Post). Goalie's perspective.",
        "- Goal Placement Y: 0 (Top Bar) to 100 (Floor).",
    ]
    stats_lines: List[str] = [
        f"- Total Shots: {totals.total}",
        f"- Saves: {totals.saves}",
        f"- Goals Allowed: {totals.goals}",
        f"- Save Percentage: {format_save_percentage(totals)}%",
    ]
    shot_log = json.dumps([shot.to_dict() for shot in shots], separators=(",", ":"))

    prompt = (
        "\n".join(header_lines)
        + "\n\nData Context:\n"
        + "\n".join(context_lines)
        + "\n\nStats:\n"
        + "\n".join(stats_lines)
        + f"\n\nShot Log (JSON):\n{shot_log}\n\n"
        f'Please provide a concise "Coach\'s Report" (max {MAX_REPORT_WORDS} words) using Markdown.\n'
        "Focus on:\n"
        "1. Weaknesses: Where are goals beating the goalie? (e.g., High Stick Side, 5-hole, Low Glove).\n"
        "2. Origin Trends: Where are shots coming from that result in goals? (e.g., The Point, The Crease).\n"
        "3. Specific advice for the next period/game.\n\n"
        "Tone: Constructive, professional, analytical."
    )
    return prompt
