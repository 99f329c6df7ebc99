"""Recording context for a single game.

``LiveGame`` owns the event log, the capture context, the period counter and
the running game clock while a game is being recorded. Finishing the game
freezes everything into a :class:`GameSession`. A session reopened from
history is wrapped in a read-only ``LiveGame`` so the same object can feed
summary views without allowing new shots.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import Any, Callable, Optional

from boxlax_tracker.errors import InvalidTransitionError, ReadOnlySessionError
from boxlax_tracker.stats.aggregation import OverallStats, overall_stats
from boxlax_tracker.tracking import capture
from boxlax_tracker.tracking.capture import CaptureContext, CaptureState, Modifier
from boxlax_tracker.tracking.clock import DEFAULT_CLOCK, GameClock
from boxlax_tracker.tracking.event_log import EventLog
from boxlax_tracker.tracking.geometry import FloorPoint, GoalPoint
from boxlax_tracker.tracking.models import (
    DEFAULT_LOCATION,
    GameMetadata,
    GameSession,
    ShotEvent,
    ShotOutcome,
)

logger = logging.getLogger(__name__)

MIN_PERIOD = 1
MAX_PERIOD = 4


def _epoch_ms() -> float:
    return time.time() * 1000.0


def _new_id() -> str:
    return uuid.uuid4().hex


class LiveGame:
    """Single-user recording context for one game."""

    def __init__(
        self,
        metadata: GameMetadata,
        *,
        game_id: Optional[str] = None,
        events: Optional[EventLog] = None,
        read_only: bool = False,
        strict: bool = True,
        now: Callable[[], float] = _epoch_ms,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self.id = game_id or id_factory()
        self.metadata = metadata
        self.read_only = read_only
        self.strict = strict
        self.period = MIN_PERIOD
        self.game_clock: GameClock = DEFAULT_CLOCK
        self._events = events if events is not None else EventLog()
        self._context = capture.new_context()
        self._now = now
        self._id_factory = id_factory

    @classmethod
    def new(
        cls,
        opponent: str = "",
        location: str = DEFAULT_LOCATION,
        date: Optional[datetime] = None,
        **kwargs: Any,
    ) -> "LiveGame":
        """Start a game with the setup-screen defaults."""

        start = date or datetime.now().replace(second=0, microsecond=0)
        return cls(GameMetadata(opponent=opponent, location=location, date=start), **kwargs)

    @classmethod
    def from_session(cls, session: GameSession) -> "LiveGame":
        """Open a finished session for viewing only."""

        return cls(session.metadata, game_id=session.id, events=session.events, read_only=True)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def events(self) -> EventLog:
        return self._events

    @property
    def context(self) -> CaptureContext:
        return self._context

    @property
    def state(self) -> CaptureState:
        return self._context.state

    def stats(self) -> OverallStats:
        return overall_stats(self._events)

    # ------------------------------------------------------------------
    # Game setup and running clock
    # ------------------------------------------------------------------

    def confirm_start(self) -> GameMetadata:
        """Apply metadata defaults before the first shot is recorded."""

        self._ensure_writable("confirm_start")
        self.metadata = self.metadata.with_default_opponent()
        return self.metadata

    def increment_period(self) -> int:
        self._ensure_writable("increment_period")
        self.period = min(MAX_PERIOD, self.period + 1)
        return self.period

    def decrement_period(self) -> int:
        self._ensure_writable("decrement_period")
        self.period = max(MIN_PERIOD, self.period - 1)
        return self.period

    # ------------------------------------------------------------------
    # Shot capture
    # ------------------------------------------------------------------

    def tap_floor(self, point: FloorPoint) -> CaptureState:
        return self._apply("select_origin", capture.select_origin, point)

    def tap_goal(self, point: GoalPoint) -> CaptureState:
        return self._apply("select_placement", capture.select_placement, point, self.game_clock)

    def toggle(self, modifier: Modifier) -> CaptureState:
        return self._apply("toggle_modifier", capture.toggle_modifier, modifier)

    def adjust_time(self, unit: str, delta: int) -> CaptureState:
        return self._apply("adjust_time", capture.adjust_time, unit, delta)

    def cancel(self) -> CaptureState:
        return self._apply("cancel", capture.cancel)

    def record(self, outcome: ShotOutcome) -> Optional[ShotEvent]:
        """Commit the pending shot with ``outcome`` and append it to the log."""

        self._ensure_writable("commit")
        try:
            context, event = capture.commit(
                self._context,
                outcome,
                period=self.period,
                now=self._now,
                id_factory=self._id_factory,
            )
        except InvalidTransitionError:
            if self.strict:
                raise
            logger.warning("ignored commit while in state %s", self._context.state.value)
            return None

        self._events = self._events.append(event)
        self._context = context
        self.game_clock = event.time_remaining
        logger.debug("recorded shot %s (%s) in period %s", event.id, event.outcome.value, event.period)
        return event

    def _apply(self, operation: str, func: Callable[..., CaptureContext], *args: object) -> CaptureState:
        self._ensure_writable(operation)
        try:
            self._context = func(self._context, *args)
        except InvalidTransitionError:
            if self.strict:
                raise
            logger.warning("ignored %s while in state %s", operation, self._context.state.value)
        return self._context.state

    def _ensure_writable(self, operation: str) -> None:
        if self.read_only:
            raise ReadOnlySessionError(f"cannot {operation}: session {self.id} is read-only")

    # ------------------------------------------------------------------
    # Finish
    # ------------------------------------------------------------------

    def finalize(self, now: Optional[Callable[[], float]] = None) -> GameSession:
        """Freeze the game into a session with a stats snapshot.

        Any shot still being captured is discarded.
        """

        self._ensure_writable("finalize")
        clock = now or self._now
        session = GameSession(
            id=self.id,
            metadata=self.metadata,
            events=self._events,
            summary_stats=overall_stats(self._events),
            finalized_at=float(clock()),
        )
        self._context = capture.new_context()
        self.read_only = True
        logger.info(
            "finalized game %s vs %s with %s shots", session.id, session.metadata.opponent, len(session.events)
        )
        return session

