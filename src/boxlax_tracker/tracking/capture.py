"""State machine that builds one shot from two taps and a few toggles.

Recording a shot is a three step process: tap the floor where the shot came
from, tap the goal where it went, then adjust modifiers and the clock before
choosing SAVE or GOAL. All in-progress data lives in an immutable
:class:`CaptureContext`; every transition function takes a context and
returns the next one, so callers own the state explicitly.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Tuple

from boxlax_tracker.errors import InvalidTransitionError
from boxlax_tracker.tracking.clock import GameClock
from boxlax_tracker.tracking.geometry import FloorPoint, GoalPoint
from boxlax_tracker.tracking.models import GameSituation, ShotEvent, ShotOutcome

COMMITTABLE_OUTCOMES = frozenset({ShotOutcome.SAVE, ShotOutcome.GOAL})
CLOCK_UNITS = ("min", "sec")


class CaptureState(str, Enum):
    AWAITING_ORIGIN = "awaiting_origin"
    AWAITING_PLACEMENT = "awaiting_placement"
    AWAITING_DETAILS = "awaiting_details"


class Modifier(str, Enum):
    PENALTY_KILL = "penalty_kill"
    REBOUND = "rebound"
    CONTROLLED = "controlled"


@dataclass(frozen=True)
class Modifiers:
    penalty_kill: bool = False
    rebound: bool = False
    controlled: bool = False

    def toggled(self, modifier: Modifier) -> "Modifiers":
        name = Modifier(modifier).value
        return replace(self, **{name: not getattr(self, name)})

    @property
    def situation(self) -> GameSituation:
        return GameSituation.PENALTY_KILL if self.penalty_kill else GameSituation.EVEN_STRENGTH


@dataclass(frozen=True)
class CaptureContext:
    """Everything known about the shot currently being recorded."""

    state: CaptureState = CaptureState.AWAITING_ORIGIN
    pending_origin: Optional[FloorPoint] = None
    pending_placement: Optional[GoalPoint] = None
    candidate_time: Optional[GameClock] = None
    modifiers: Modifiers = Modifiers()


def new_context() -> CaptureContext:
    return CaptureContext()


def _require_state(ctx: CaptureContext, operation: str, *allowed: CaptureState) -> None:
    if ctx.state not in allowed:
        raise InvalidTransitionError(ctx.state, operation)


def select_origin(ctx: CaptureContext, point: FloorPoint) -> CaptureContext:
    _require_state(ctx, "select_origin", CaptureState.AWAITING_ORIGIN)
    if not isinstance(point, FloorPoint):
        raise TypeError("Shot origin must be a FloorPoint")
    return CaptureContext(state=CaptureState.AWAITING_PLACEMENT, pending_origin=point)


def select_placement(ctx: CaptureContext, point: GoalPoint, game_clock: GameClock) -> CaptureContext:
    """Record the goal tap.

    The first tap captures the running game clock as the shot time and clears
    the modifiers. A later tap while details are open only moves the
    placement.
    """

    if ctx.state is CaptureState.AWAITING_DETAILS:
        return refine_placement(ctx, point)
    _require_state(ctx, "select_placement", CaptureState.AWAITING_PLACEMENT)
    if not isinstance(point, GoalPoint):
        raise TypeError("Shot placement must be a GoalPoint")
    return replace(
        ctx,
        state=CaptureState.AWAITING_DETAILS,
        pending_placement=point,
        candidate_time=game_clock,
        modifiers=Modifiers(),
    )


def refine_placement(ctx: CaptureContext, point: GoalPoint) -> CaptureContext:
    _require_state(ctx, "refine_placement", CaptureState.AWAITING_DETAILS)
    if not isinstance(point, GoalPoint):
        raise TypeError("Shot placement must be a GoalPoint")
    return replace(ctx, pending_placement=point)


def toggle_modifier(ctx: CaptureContext, modifier: Modifier) -> CaptureContext:
    _require_state(ctx, "toggle_modifier", CaptureState.AWAITING_DETAILS)
    return replace(ctx, modifiers=ctx.modifiers.toggled(modifier))


def adjust_time(ctx: CaptureContext, unit: str, delta: int) -> CaptureContext:
    _require_state(ctx, "adjust_time", CaptureState.AWAITING_DETAILS)
    if unit not in CLOCK_UNITS:
        raise ValueError(f"unit must be one of {CLOCK_UNITS}, got {unit!r}")
    clock = ctx.candidate_time or GameClock()
    if unit == "min":
        clock = clock.adjust_minutes(delta)
    else:
        clock = clock.adjust_seconds(delta)
    return replace(ctx, candidate_time=clock)


def commit(
    ctx: CaptureContext,
    outcome: ShotOutcome,
    *,
    period: int,
    now: Optional[Callable[[], float]] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Tuple[CaptureContext, ShotEvent]:
    """Turn the pending shot into a :class:`ShotEvent`.

    Returns a fresh context awaiting the next origin together with the new
    event. The caller appends the event to its log.
    """

    _require_state(ctx, "commit", CaptureState.AWAITING_DETAILS)
    outcome = ShotOutcome(outcome)
    if outcome not in COMMITTABLE_OUTCOMES:
        raise InvalidTransitionError(ctx.state, f"commit({outcome.value})")
    if ctx.pending_origin is None:
        raise InvalidTransitionError(ctx.state, "commit without origin")
    if int(period) < 1:
        raise ValueError(f"period must be a positive integer, got {period!r}")

    clock = now or (lambda: time.time() * 1000.0)
    make_id = id_factory or (lambda: uuid.uuid4().hex)
    event = ShotEvent(
        id=make_id(),
        origin=ctx.pending_origin,
        placement=ctx.pending_placement,
        outcome=outcome,
        situation=ctx.modifiers.situation,
        is_rebound=ctx.modifiers.rebound,
        is_controlled=ctx.modifiers.controlled,
        period=int(period),
        time_remaining=ctx.candidate_time or GameClock(),
        timestamp=float(clock()),
    )
    return new_context(), event


def cancel(ctx: CaptureContext) -> CaptureContext:
    """Drop the pending shot. Harmless when nothing is in progress."""

    return new_context()
