"""Save percentage rollups computed from a list of shots.

Every function takes the full shot list and recomputes from scratch. Games
hold tens to a few hundred shots, so there is no caching.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from boxlax_tracker.tracking.geometry import round_half_up
from boxlax_tracker.tracking.models import GameSituation, ShotEvent, ShotOutcome


@dataclass(frozen=True)
class OverallStats:
    total: int
    saves: int
    goals: int
    percentage: int


@dataclass(frozen=True)
class PeriodStats:
    period: int
    total: int
    saves: int
    goals: int
    pct: int


@dataclass(frozen=True)
class ControlledSaveStats:
    controlled_saves: int
    total_saves: int
    controlled_pct: int


@dataclass(frozen=True)
class PenaltyKillStats:
    pk_total: int
    pk_saves: int
    pk_pct: int


@dataclass(frozen=True)
class SituationalStats:
    controlled: ControlledSaveStats
    penalty_kill: PenaltyKillStats


def percentage(part: int, whole: int) -> int:
    """Return ``part / whole`` as a whole-number percentage, or 0 if ``whole`` is 0."""

    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def _count(events: Sequence[ShotEvent], outcome: ShotOutcome) -> int:
    return sum(1 for event in events if event.outcome is outcome)


def overall_stats(events: Iterable[ShotEvent]) -> OverallStats:
    shots = list(events)
    total = len(shots)
    saves = _count(shots, ShotOutcome.SAVE)
    return OverallStats(
        total=total,
        saves=saves,
        goals=_count(shots, ShotOutcome.GOAL),
        percentage=percentage(saves, total),
    )


def per_period_stats(events: Iterable[ShotEvent]) -> List[PeriodStats]:
    """One row per period that has shots, ordered by period number."""

    by_period: Dict[int, List[ShotEvent]] = defaultdict(list)
    for event in events:
        by_period[event.period].append(event)

    rows: List[PeriodStats] = []
    for period in sorted(by_period):
        shots = by_period[period]
        saves = _count(shots, ShotOutcome.SAVE)
        rows.append(
            PeriodStats(
                period=period,
                total=len(shots),
                saves=saves,
                goals=_count(shots, ShotOutcome.GOAL),
                pct=percentage(saves, len(shots)),
            )
        )
    return rows


def controlled_save_stats(events: Iterable[ShotEvent]) -> ControlledSaveStats:
    """Share of all saves where the goalie kept control of the ball."""

    saves = [event for event in events if event.outcome is ShotOutcome.SAVE]
    controlled = sum(1 for event in saves if event.is_controlled)
    return ControlledSaveStats(
        controlled_saves=controlled,
        total_saves=len(saves),
        controlled_pct=percentage(controlled, len(saves)),
    )


def penalty_kill_stats(events: Iterable[ShotEvent]) -> PenaltyKillStats:
    shots = [event for event in events if event.situation is GameSituation.PENALTY_KILL]
    saves = _count(shots, ShotOutcome.SAVE)
    return PenaltyKillStats(pk_total=len(shots), pk_saves=saves, pk_pct=percentage(saves, len(shots)))


def situational_stats(events: Iterable[ShotEvent]) -> SituationalStats:
    shots = list(events)
    return SituationalStats(
        controlled=controlled_save_stats(shots),
        penalty_kill=penalty_kill_stats(shots),
    )
