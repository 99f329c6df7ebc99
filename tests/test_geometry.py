from __future__ import annotations

import math

import pytest

from boxlax_tracker.tracking.geometry import (
    FloorPoint,
    GoalPoint,
    clamp,
    round_half_up,
)


def test_from_tap_normalises_against_surface() -> None:
    point = FloorPoint.from_tap((150.0, 260.0), (100.0, 200.0), (200.0, 240.0))

    assert math.isclose(point.x, 25.0)
    assert math.isclose(point.y, 25.0)
    assert point.is_on_surface()


def test_from_tap_outside_surface_is_not_clamped() -> None:
    point = GoalPoint.from_tap((-20.0, 330.0), (0.0, 0.0), (200.0, 300.0))

    assert math.isclose(point.x, -10.0)
    assert math.isclose(point.y, 110.0)
    assert not point.is_on_surface()
    assert point.clamped() == GoalPoint(0.0, 100.0)


def test_from_tap_rejects_empty_surface() -> None:
    with pytest.raises(ValueError):
        FloorPoint.from_tap((1.0, 1.0), (0.0, 0.0), (0.0, 10.0))


def test_floor_and_goal_points_never_compare_equal() -> None:
    assert FloorPoint(10.0, 10.0) != GoalPoint(10.0, 10.0)
    assert isinstance(GoalPoint(1.0, 2.0).clamped(), GoalPoint)


def test_round_half_up_matches_whole_number_rounding() -> None:
    assert round_half_up(12.5) == 13
    assert round_half_up(87.5) == 88
    assert round_half_up(-0.5) == 0
    assert round_half_up(2.49) == 2
    assert GoalPoint(10.5, 99.4).rounded() == (11, 99)


def test_clamp_bounds() -> None:
    assert clamp(-3.0) == 0.0
    assert clamp(140.0) == 100.0
    assert clamp(42.0) == 42.0
