"""Data structures describing recorded shots and finished games."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from boxlax_tracker.tracking.clock import GameClock
from boxlax_tracker.tracking.geometry import FloorPoint, GoalPoint

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from boxlax_tracker.stats.aggregation import OverallStats
    from boxlax_tracker.tracking.event_log import EventLog

DEFAULT_OPPONENT = "Unknown Opponent"
DEFAULT_LOCATION = "Home Arena"


class ShotOutcome(str, Enum):
    GOAL = "GOAL"
    SAVE = "SAVE"
    # Declared for completeness; the capture flow only records goals and saves.
    MISS = "MISS"


class GameSituation(str, Enum):
    EVEN_STRENGTH = "EV"
    PENALTY_KILL = "PK"
    # Declared for completeness; no input path records power-play shots.
    POWER_PLAY = "PP"


@dataclass(frozen=True)
class ShotEvent:
    """A committed shot. Instances are never modified after commit."""

    id: str
    origin: FloorPoint
    placement: Optional[GoalPoint]
    outcome: ShotOutcome
    situation: GameSituation
    is_rebound: bool
    is_controlled: bool
    period: int
    time_remaining: GameClock
    timestamp: float

    @property
    def is_goal(self) -> bool:
        return self.outcome is ShotOutcome.GOAL

    @property
    def is_save(self) -> bool:
        return self.outcome is ShotOutcome.SAVE


@dataclass(frozen=True)
class GameMetadata:
    """Opponent, venue and start time of a game."""

    opponent: str
    location: str
    date: datetime

    def with_default_opponent(self) -> "GameMetadata":
        """Return a copy with a placeholder opponent if the name is blank."""

        if self.opponent.strip():
            return self
        return GameMetadata(opponent=DEFAULT_OPPONENT, location=self.location, date=self.date)


@dataclass(frozen=True)
class GameSession:
    """A finished game: metadata, frozen event log and a stats snapshot."""

    id: str
    metadata: GameMetadata
    events: "EventLog"
    summary_stats: "OverallStats"
    finalized_at: float
