"""Normalised coordinates for the floor surface and the goal mouth.

Both surfaces use a 0-100 scale on each axis, but they are separate
coordinate spaces: ``FloorPoint`` values describe where a shot was taken
from, ``GoalPoint`` values where it crossed the goal line. Points built from
tap input are not clamped and may fall outside the 0-100 range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Type, TypeVar

SURFACE_MIN = 0.0
SURFACE_MAX = 100.0

# Floor: x 0 = left boards, 100 = right boards; y 0 = centre line, 100 = goal line.
# Goal: x 0 = left post, 100 = right post (goalie's view); y 0 = top bar, 100 = floor.

_P = TypeVar("_P", bound="_SurfacePoint")


@dataclass(frozen=True)
class _SurfacePoint:
    x: float
    y: float

    @classmethod
    def from_tap(
        cls: Type[_P],
        client: Tuple[float, float],
        surface_origin: Tuple[float, float],
        surface_size: Tuple[float, float],
    ) -> _P:
        """Normalise a pointer position relative to a rendered surface."""

        width, height = surface_size
        if width <= 0 or height <= 0:
            raise ValueError("Surface dimensions must be positive")
        x = (client[0] - surface_origin[0]) / width * SURFACE_MAX
        y = (client[1] - surface_origin[1]) / height * SURFACE_MAX
        return cls(x=float(x), y=float(y))

    def is_on_surface(self) -> bool:
        return is_in_range(self.x) and is_in_range(self.y)

    def clamped(self: _P) -> _P:
        return type(self)(x=clamp(self.x), y=clamp(self.y))

    def rounded(self) -> Tuple[int, int]:
        return round_half_up(self.x), round_half_up(self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class FloorPoint(_SurfacePoint):
    """Shot origin on the floor surface."""


@dataclass(frozen=True)
class GoalPoint(_SurfacePoint):
    """Shot placement on the goal mouth."""


def clamp(value: float, lower: float = SURFACE_MIN, upper: float = SURFACE_MAX) -> float:
    """Clamp ``value`` into ``[lower, upper]``."""

    return max(lower, min(upper, value))


def is_in_range(value: float) -> bool:
    return SURFACE_MIN <= value <= SURFACE_MAX


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards +inf."""

    return math.floor(value + 0.5)
