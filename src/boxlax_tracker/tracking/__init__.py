"""Shot model, capture state machine and event log."""

from boxlax_tracker.tracking.capture import (
    CaptureContext,
    CaptureState,
    Modifier,
    Modifiers,
)
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

__all__ = [
    "CaptureContext",
    "CaptureState",
    "Modifier",
    "Modifiers",
    "GameClock",
    "EventLog",
    "FloorPoint",
    "GoalPoint",
    "GameMetadata",
    "GameSession",
    "GameSituation",
    "ShotEvent",
    "ShotOutcome",
]
