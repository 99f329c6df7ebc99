"""Goal-placement density surface used for the goals-allowed heatmap.

Goals with a recorded placement are smoothed with a Gaussian kernel on a
regular grid covering the goal mouth. The surface is cut at a fixed number of
density thresholds; each cut yields a band made of the filled polygons where
the density is at least that threshold. Bands are returned lowest threshold
first and carry an opacity that grows with their rank.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np
from contourpy import FillType, contour_generator

from boxlax_tracker.tracking.geometry import SURFACE_MAX, SURFACE_MIN
from boxlax_tracker.tracking.models import ShotEvent, ShotOutcome

DEFAULT_BANDWIDTH = 8.0
DEFAULT_BAND_COUNT = 10
DEFAULT_CELL_SIZE = 1.0
GOAL_EXTENT: Tuple[float, float, float, float] = (SURFACE_MIN, SURFACE_MAX, SURFACE_MIN, SURFACE_MAX)
MAX_BAND_OPACITY = 0.6

Ring = Tuple[Tuple[float, float], ...]
Polygon = Tuple[Ring, ...]


@dataclass(frozen=True)
class DensityBand:
    """Region where the goal density is at least ``threshold``.

    Each polygon is a tuple of closed rings: the outer boundary first, then
    any holes.
    """

    rank: int
    threshold: float
    opacity: float
    polygons: Tuple[Polygon, ...]


def goal_placements(events: Iterable[ShotEvent]) -> List[Tuple[float, float]]:
    """Placement coordinates of goals that have one, sorted for stability."""

    points = [
        event.placement.as_tuple()
        for event in events
        if event.outcome is ShotOutcome.GOAL and event.placement is not None
    ]
    return sorted(points)


def band_opacity(rank: int, band_count: int) -> float:
    return (rank + 1) / band_count * MAX_BAND_OPACITY


def density_grid(
    points: Sequence[Tuple[float, float]],
    *,
    bandwidth: float = DEFAULT_BANDWIDTH,
    extent: Tuple[float, float, float, float] = GOAL_EXTENT,
    cell_size: float = DEFAULT_CELL_SIZE,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Evaluate a Gaussian KDE of ``points`` on a regular grid.

    Returns ``(xs, ys, density)`` where ``density`` has shape
    ``(len(ys), len(xs))`` and integrates to one over the whole plane.
    """

    x_min, x_max, y_min, y_max = extent
    xs = np.arange(x_min, x_max + cell_size / 2.0, cell_size, dtype=float)
    ys = np.arange(y_min, y_max + cell_size / 2.0, cell_size, dtype=float)
    grid_x, grid_y = np.meshgrid(xs, ys)

    samples = np.asarray(points, dtype=float).reshape(-1, 2)
    dx = grid_x[np.newaxis, :, :] - samples[:, 0, np.newaxis, np.newaxis]
    dy = grid_y[np.newaxis, :, :] - samples[:, 1, np.newaxis, np.newaxis]
    kernels = np.exp(-(dx**2 + dy**2) / (2.0 * bandwidth**2))
    norm = len(samples) * 2.0 * np.pi * bandwidth**2
    return xs, ys, kernels.sum(axis=0) / norm


def _validate(bandwidth: float, band_count: int, extent: Tuple[float, float, float, float], cell_size: float) -> None:
    if bandwidth <= 0:
        raise ValueError("bandwidth must be positive")
    if band_count < 1:
        raise ValueError("band_count must be at least 1")
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    x_min, x_max, y_min, y_max = extent
    if x_max <= x_min or y_max <= y_min:
        raise ValueError("extent must describe a non-empty box")


def _to_polygons(filled: Tuple[Sequence[np.ndarray], Sequence[np.ndarray]]) -> Tuple[Polygon, ...]:
    points_list, offsets_list = filled
    polygons: List[Polygon] = []
    for points, offsets in zip(points_list, offsets_list):
        rings: List[Ring] = []
        for start, end in zip(offsets[:-1], offsets[1:]):
            ring = [(float(x), float(y)) for x, y in points[start:end]]
            if not ring:
                continue
            if ring[0] != ring[-1]:
                ring.append(ring[0])
            rings.append(tuple(ring))
        if rings:
            polygons.append(tuple(rings))
    return tuple(polygons)


def estimate_goal_density(
    events: Iterable[ShotEvent],
    *,
    bandwidth: float = DEFAULT_BANDWIDTH,
    band_count: int = DEFAULT_BAND_COUNT,
    extent: Tuple[float, float, float, float] = GOAL_EXTENT,
    cell_size: float = DEFAULT_CELL_SIZE,
) -> List[DensityBand]:
    """Compute heatmap bands for goals allowed; empty when there are none."""

    _validate(bandwidth, band_count, extent, cell_size)
    points = goal_placements(events)
    if not points:
        return []

    xs, ys, density = density_grid(points, bandwidth=bandwidth, extent=extent, cell_size=cell_size)
    peak = float(density.max())
    if peak <= 0.0:
        return []

    generator = contour_generator(xs, ys, density, fill_type=FillType.OuterOffset)
    upper = peak * 2.0
    bands: List[DensityBand] = []
    for rank in range(band_count):
        threshold = peak * (rank + 1) / (band_count + 1)
        bands.append(
            DensityBand(
                rank=rank,
                threshold=threshold,
                opacity=band_opacity(rank, band_count),
                polygons=_to_polygons(generator.filled(threshold, upper)),
            )
        )
    return bands
