"""Pydantic records describing the persisted session document."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from boxlax_tracker.stats.aggregation import OverallStats
from boxlax_tracker.tracking.clock import GameClock
from boxlax_tracker.tracking.event_log import EventLog
from boxlax_tracker.tracking.geometry import FloorPoint, GoalPoint
from boxlax_tracker.tracking.models import (
    GameMetadata,
    GameSession,
    GameSituation,
    ShotEvent,
    ShotOutcome,
)

_TIME_PATTERN = r"^\d{2}:\d{2}$"


class PointRecord(BaseModel):
    """Normalised 0-100 coordinates; values outside the range are kept."""

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float


class ShotRecord(BaseModel):
    """Stored form of a committed shot."""

    model_config = ConfigDict(extra="forbid")

    id: str
    origin: PointRecord
    placement: Optional[PointRecord] = None
    result: ShotOutcome
    situation: GameSituation
    is_rebound: bool = False
    is_controlled: bool = False
    period: int = Field(..., ge=1)
    time_remaining: str = Field(..., pattern=_TIME_PATTERN)
    timestamp: float

    @classmethod
    def from_event(cls, event: ShotEvent) -> "ShotRecord":
        placement = event.placement
        return cls(
            id=event.id,
            origin=PointRecord(x=event.origin.x, y=event.origin.y),
            placement=PointRecord(x=placement.x, y=placement.y) if placement is not None else None,
            result=event.outcome,
            situation=event.situation,
            is_rebound=event.is_rebound,
            is_controlled=event.is_controlled,
            period=event.period,
            time_remaining=str(event.time_remaining),
            timestamp=event.timestamp,
        )

    def to_event(self) -> ShotEvent:
        return ShotEvent(
            id=self.id,
            origin=FloorPoint(x=self.origin.x, y=self.origin.y),
            placement=GoalPoint(x=self.placement.x, y=self.placement.y) if self.placement else None,
            outcome=self.result,
            situation=self.situation,
            is_rebound=self.is_rebound,
            is_controlled=self.is_controlled,
            period=self.period,
            time_remaining=GameClock.parse(self.time_remaining),
            timestamp=self.timestamp,
        )


class MetadataRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    opponent: str
    location: str
    date: datetime


class StatsRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total: int = Field(..., ge=0)
    saves: int = Field(..., ge=0)
    goals: int = Field(..., ge=0)
    percentage: int = Field(..., ge=0, le=100)


class SessionRecord(BaseModel):
    """Complete stored game: metadata, shots and the stats snapshot."""

    model_config = ConfigDict(extra="forbid")

    id: str
    metadata: MetadataRecord
    shots: List[ShotRecord] = Field(default_factory=list)
    stats: StatsRecord
    timestamp: float = Field(..., description="Epoch milliseconds when the game was finalized")

    @field_validator("id")
    @classmethod
    def _ensure_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Session id must not be blank")
        return value

    @classmethod
    def from_session(cls, session: GameSession) -> "SessionRecord":
        metadata = session.metadata
        stats = session.summary_stats
        return cls(
            id=session.id,
            metadata=MetadataRecord(opponent=metadata.opponent, location=metadata.location, date=metadata.date),
            shots=[ShotRecord.from_event(event) for event in session.events],
            stats=StatsRecord(
                total=stats.total,
                saves=stats.saves,
                goals=stats.goals,
                percentage=stats.percentage,
            ),
            timestamp=session.finalized_at,
        )

    def to_session(self) -> GameSession:
        return GameSession(
            id=self.id,
            metadata=GameMetadata(
                opponent=self.metadata.opponent,
                location=self.metadata.location,
                date=self.metadata.date,
            ),
            events=EventLog(shot.to_event() for shot in self.shots),
            summary_stats=OverallStats(
                total=self.stats.total,
                saves=self.stats.saves,
                goals=self.stats.goals,
                percentage=self.stats.percentage,
            ),
            finalized_at=self.timestamp,
        )
