import pytest

from boxlax_tracker.errors import InvalidTransitionError
from boxlax_tracker.tracking import capture
from boxlax_tracker.tracking.capture import CaptureContext, CaptureState, Modifier, Modifiers
from boxlax_tracker.tracking.clock import GameClock
from boxlax_tracker.tracking.event_log import EventLog
from boxlax_tracker.tracking.geometry import FloorPoint, GoalPoint
from boxlax_tracker.tracking.models import GameSituation, ShotOutcome

ORIGIN = FloorPoint(30.0, 60.0)
PLACEMENT = GoalPoint(80.0, 20.0)
CLOCK = GameClock.parse("12:34")


def _to_details() -> CaptureContext:
    ctx = capture.select_origin(capture.new_context(), ORIGIN)
    return capture.select_placement(ctx, PLACEMENT, CLOCK)


def test_round_trip_commits_one_event_and_resets() -> None:
    log = EventLog()
    ctx = capture.new_context()
    assert ctx.state is CaptureState.AWAITING_ORIGIN

    ctx = capture.select_origin(ctx, ORIGIN)
    assert ctx.state is CaptureState.AWAITING_PLACEMENT
    ctx = capture.select_placement(ctx, PLACEMENT, CLOCK)
    assert ctx.state is CaptureState.AWAITING_DETAILS

    ctx, event = capture.commit(ctx, ShotOutcome.SAVE, period=2, now=lambda: 1000.0, id_factory=lambda: "abc")
    log = log.append(event)

    assert log.size() == 1
    assert event.id == "abc"
    assert event.origin == ORIGIN
    assert event.placement == PLACEMENT
    assert event.outcome is ShotOutcome.SAVE
    assert event.situation is GameSituation.EVEN_STRENGTH
    assert event.is_rebound is False
    assert event.is_controlled is False
    assert event.period == 2
    assert event.time_remaining == CLOCK
    assert event.timestamp == 1000.0
    assert ctx == CaptureContext()


def test_cancel_from_placement_discards_attempt() -> None:
    log = EventLog()
    ctx = capture.select_origin(capture.new_context(), FloorPoint(1.0, 1.0))
    ctx = capture.cancel(ctx)
    assert ctx == CaptureContext()

    ctx = capture.select_origin(ctx, ORIGIN)
    ctx = capture.select_placement(ctx, PLACEMENT, CLOCK)
    ctx, event = capture.commit(ctx, ShotOutcome.GOAL, period=1)
    log = log.append(event)

    assert len(log) == 1
    assert log.all()[0].origin == ORIGIN


def test_cancel_from_details_discards_everything() -> None:
    ctx = capture.toggle_modifier(_to_details(), Modifier.PENALTY_KILL)
    ctx = capture.cancel(ctx)

    assert ctx.state is CaptureState.AWAITING_ORIGIN
    assert ctx.pending_origin is None
    assert ctx.pending_placement is None
    assert ctx.candidate_time is None
    assert ctx.modifiers == Modifiers()


def test_modifiers_feed_the_event() -> None:
    ctx = _to_details()
    ctx = capture.toggle_modifier(ctx, Modifier.PENALTY_KILL)
    ctx = capture.toggle_modifier(ctx, Modifier.REBOUND)
    ctx = capture.toggle_modifier(ctx, Modifier.CONTROLLED)
    ctx = capture.toggle_modifier(ctx, Modifier.REBOUND)

    _, event = capture.commit(ctx, ShotOutcome.SAVE, period=1)

    assert event.situation is GameSituation.PENALTY_KILL
    assert event.is_rebound is False
    assert event.is_controlled is True


def test_new_placement_resets_modifiers_and_captures_clock() -> None:
    ctx = capture.select_origin(capture.new_context(), ORIGIN)
    ctx = capture.select_placement(ctx, PLACEMENT, GameClock.parse("03:00"))

    assert ctx.modifiers == Modifiers()
    assert ctx.candidate_time == GameClock(3, 0)


def test_goal_tap_in_details_refines_without_advancing() -> None:
    ctx = capture.toggle_modifier(_to_details(), Modifier.REBOUND)
    refined = capture.select_placement(ctx, GoalPoint(10.0, 90.0), GameClock.parse("00:01"))

    assert refined.state is CaptureState.AWAITING_DETAILS
    assert refined.pending_placement == GoalPoint(10.0, 90.0)
    assert refined.candidate_time == CLOCK
    assert refined.modifiers.rebound is True


def test_adjust_time_uses_clock_carry() -> None:
    ctx = capture.adjust_time(_to_details(), "sec", 26)
    assert str(ctx.candidate_time) == "13:00"
    ctx = capture.adjust_time(ctx, "min", -1)
    assert str(ctx.candidate_time) == "12:00"

    with pytest.raises(ValueError):
        capture.adjust_time(ctx, "hours", 1)


@pytest.mark.parametrize(
    "operation",
    [
        lambda ctx: capture.select_placement(ctx, PLACEMENT, CLOCK),
        lambda ctx: capture.refine_placement(ctx, PLACEMENT),
        lambda ctx: capture.toggle_modifier(ctx, Modifier.REBOUND),
        lambda ctx: capture.adjust_time(ctx, "sec", 1),
        lambda ctx: capture.commit(ctx, ShotOutcome.SAVE, period=1),
    ],
)
def test_operations_rejected_while_awaiting_origin(operation) -> None:
    with pytest.raises(InvalidTransitionError):
        operation(capture.new_context())


def test_origin_tap_only_valid_when_awaiting_origin() -> None:
    ctx = capture.select_origin(capture.new_context(), ORIGIN)
    with pytest.raises(InvalidTransitionError):
        capture.select_origin(ctx, ORIGIN)
    with pytest.raises(InvalidTransitionError):
        capture.commit(ctx, ShotOutcome.SAVE, period=1)


def test_commit_rejects_miss_and_missing_origin() -> None:
    with pytest.raises(InvalidTransitionError):
        capture.commit(_to_details(), ShotOutcome.MISS, period=1)

    broken = CaptureContext(state=CaptureState.AWAITING_DETAILS, pending_placement=PLACEMENT)
    with pytest.raises(InvalidTransitionError):
        capture.commit(broken, ShotOutcome.SAVE, period=1)


@pytest.mark.parametrize("period", [0, -2])
def test_commit_rejects_non_positive_period(period) -> None:
    ctx = _to_details()

    with pytest.raises(ValueError):
        capture.commit(ctx, ShotOutcome.SAVE, period=period)
    assert ctx.state is CaptureState.AWAITING_DETAILS


def test_points_must_use_their_own_surface() -> None:
    with pytest.raises(TypeError):
        capture.select_origin(capture.new_context(), GoalPoint(1.0, 1.0))
    ctx = capture.select_origin(capture.new_context(), ORIGIN)
    with pytest.raises(TypeError):
        capture.select_placement(ctx, FloorPoint(1.0, 1.0), CLOCK)
