"""Narrative coach report for a recorded game.

The report is a one-way export: shots are projected to rounded coordinates,
sent to the language model and the returned text is handed back as-is. No
failure in this module reaches the caller as an exception; every problem is
logged and turned into a readable message.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol, Sequence, Tuple

from boxlax_tracker.config import Settings, load_settings
from boxlax_tracker.llm.client import OllamaConfig, OllamaLLM
from boxlax_tracker.llm.models import ReportTotals, project_shots
from boxlax_tracker.llm.prompts import build_coach_report_prompt
from boxlax_tracker.stats.aggregation import overall_stats
from boxlax_tracker.tracking.models import ShotEvent

logger = logging.getLogger(__name__)

EMPTY_GAME_MESSAGE = "No shots recorded yet. Record at least one shot to generate a coach's report."
NOT_CONFIGURED_MESSAGE = "AI analysis is not configured. Unable to generate a coach's report."
UNAVAILABLE_MESSAGE = "Analysis unavailable: the coach's report could not be generated due to a network or model error."
NO_ANALYSIS_MESSAGE = "No analysis generated."


class TextGenerator(Protocol):
    def generate(
        self,
        prompt: str,
        *,
        model: Optional[str] = None,
        options: Optional[Dict[str, object]] = None,
    ) -> Tuple[str, str]:
        ...


class _StubLLM:
    def generate(
        self,
        prompt: str,
        *,
        model: Optional[str] = None,
        options: Optional[Dict[str, object]] = None,
    ) -> Tuple[str, str]:
        return (" stub coach report ", model or "stub")


def create_llm_client(settings: Optional[Settings] = None) -> Optional[TextGenerator]:
    """Build the configured text generator, or ``None`` when analysis is disabled."""

    settings = settings or load_settings()
    if settings.llm_disabled:
        return None
    if settings.stub_llm:
        return _StubLLM()
    return OllamaLLM(OllamaConfig.from_settings(settings))


def report_totals(events: Sequence[ShotEvent]) -> ReportTotals:
    stats = overall_stats(events)
    exact = stats.saves / stats.total * 100 if stats.total else 0.0
    return ReportTotals(total=stats.total, saves=stats.saves, goals=stats.goals, save_percentage=exact)


class CoachReportGenerator:
    """Turn a shot list into a short Markdown report from the goalie coach."""

    def __init__(
        self,
        llm: Optional[TextGenerator],
        *,
        model: Optional[str] = None,
        temperature: float = 0.3,
    ) -> None:
        self._llm = llm
        self._model = model
        self._temperature = temperature

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CoachReportGenerator":
        return cls(create_llm_client(settings))

    def build_prompt(self, events: Sequence[ShotEvent]) -> str:
        shots = tuple(events)
        return build_coach_report_prompt(report_totals(shots), project_shots(shots))

    def summarize(self, events: Sequence[ShotEvent]) -> str:
        shots = tuple(events)
        if not shots:
            return EMPTY_GAME_MESSAGE
        if self._llm is None:
            return NOT_CONFIGURED_MESSAGE

        prompt = self.build_prompt(shots)
        try:
            text, model_used = self._llm.generate(
                prompt,
                model=self._model,
                options={"temperature": self._temperature},
            )
        except Exception as exc:
            logger.warning("coach report unavailable: %s", exc)
            return UNAVAILABLE_MESSAGE

        logger.info("coach report generated with %s for %s shots", model_used, len(shots))
        return text.strip() or NO_ANALYSIS_MESSAGE
