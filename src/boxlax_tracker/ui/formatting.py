"""Text formatting helpers for history lists and stat readouts."""

from __future__ import annotations

from typing import Dict, Iterable, List

from boxlax_tracker.stats.aggregation import (
    OverallStats,
    PeriodStats,
    SituationalStats,
)
from boxlax_tracker.tracking.models import GameSession


def build_session_label(session: GameSession) -> str:
    """Return a human-friendly label for a history entry."""
    metadata = session.metadata
    date_text = metadata.date.strftime("%Y-%m-%d %H:%M")
    location = metadata.location.strip()
    label = f"vs {metadata.opponent} ({date_text})"
    if location:
        label = f"{label} @ {location}"
    return f"{label} - {session.summary_stats.percentage}% SV"


def format_overall_line(stats: OverallStats) -> str:
    return f"{stats.saves} saves / {stats.total} shots, {stats.goals} goals allowed, {stats.percentage}% SV"


def format_period_rows(rows: Iterable[PeriodStats]) -> List[Dict[str, object]]:
    """Period breakdown shaped for tabular display."""
    return [
        {
            "Period": f"P{row.period}",
            "Shots": row.total,
            "Saves": row.saves,
            "Goals": row.goals,
            "SV%": f"{row.pct}%",
        }
        for row in rows
    ]


def format_situational_lines(stats: SituationalStats) -> List[str]:
    controlled = stats.controlled
    pk = stats.penalty_kill
    return [
        f"Controlled saves: {controlled.controlled_saves} ({controlled.controlled_pct}% of saves)",
        f"Penalty kill: {pk.pk_saves}/{pk.pk_total} saved ({pk.pk_pct}%)",
    ]
