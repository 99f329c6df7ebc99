"""Plotly figures for the floor shot map and the goal heatmap."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import plotly.graph_objects as go

from boxlax_tracker.stats.density import DensityBand, Polygon, estimate_goal_density
from boxlax_tracker.tracking.geometry import SURFACE_MAX, SURFACE_MIN
from boxlax_tracker.tracking.models import ShotEvent, ShotOutcome

_GOAL_COLOR = "#ef4444"
_SAVE_COLOR = "#10b981"
_LINE_COLOR = "#ef4444"
_CREASE_COLOR = "#3b82f6"
_FRAME_COLOR = "#ef4444"
_HEAT_COLOR = "#ef4444"
_FLOOR_COLOR = "#94a3b8"
_NET_COLOR = "#1e293b"

# Floor markings in normalised floor coordinates (y: 0 centre line, 100 goal line).
_RESTRAINING_LINE_Y = 33.3
_GOAL_LINE_Y = 83.3
_FACEOFF_DOTS = ((20.0, 45.8), (80.0, 45.8))
_CREASE_RADIUS_X = 10.5
_CREASE_RADIUS_Y = 8.75

# Goal frame in normalised goal coordinates (y: 0 top, 100 floor).
_POST_WIDTH = 4.0
_BAR_TOP = 10.0
_BAR_BOTTOM = 15.0


def _polygon_path(polygon: Polygon) -> str:
    parts: List[str] = []
    for ring in polygon:
        head, *tail = ring
        parts.append(f"M {head[0]:.3f},{head[1]:.3f}")
        parts.extend(f"L {x:.3f},{y:.3f}" for x, y in tail)
        parts.append("Z")
    return " ".join(parts)


def _add_goal_frame(fig: go.Figure) -> None:
    fig.add_shape(
        type="rect", x0=SURFACE_MIN, y0=SURFACE_MIN, x1=SURFACE_MAX, y1=SURFACE_MAX,
        fillcolor=_NET_COLOR, line=dict(width=0), layer="below",
    )
    fig.add_shape(
        type="rect", x0=8, y0=_BAR_TOP, x1=92, y1=_BAR_BOTTOM,
        fillcolor=_FRAME_COLOR, line=dict(width=0),
    )
    for x0 in (8.0, 92.0 - _POST_WIDTH):
        fig.add_shape(
            type="rect", x0=x0, y0=_BAR_TOP, x1=x0 + _POST_WIDTH, y1=SURFACE_MAX,
            fillcolor=_FRAME_COLOR, line=dict(width=0),
        )


def _add_floor_markings(fig: go.Figure) -> None:
    fig.add_shape(
        type="rect", x0=SURFACE_MIN, y0=SURFACE_MIN, x1=SURFACE_MAX, y1=SURFACE_MAX,
        fillcolor=_FLOOR_COLOR, line=dict(color="#1e293b", width=2), layer="below",
    )
    for y in (SURFACE_MIN, _RESTRAINING_LINE_Y, _GOAL_LINE_Y):
        fig.add_shape(type="line", x0=5, y0=y, x1=95, y1=y, line=dict(color=_LINE_COLOR, width=1))
    fig.add_shape(
        type="circle",
        x0=50 - _CREASE_RADIUS_X, y0=_GOAL_LINE_Y - _CREASE_RADIUS_Y,
        x1=50 + _CREASE_RADIUS_X, y1=_GOAL_LINE_Y + _CREASE_RADIUS_Y,
        line=dict(color=_CREASE_COLOR, width=1),
    )
    for x, y in _FACEOFF_DOTS:
        fig.add_shape(
            type="circle", x0=x - 1.5, y0=y - 1.5, x1=x + 1.5, y1=y + 1.5,
            fillcolor=_LINE_COLOR, line=dict(width=0),
        )


def _numbered_markers(
    xs: Sequence[float],
    ys: Sequence[float],
    labels: Sequence[str],
    colors: Sequence[str],
    name: str,
) -> go.Scatter:
    return go.Scatter(
        x=list(xs),
        y=list(ys),
        mode="markers+text",
        text=list(labels),
        textfont=dict(color="white", size=10),
        marker=dict(size=18, color=list(colors), line=dict(color="white", width=1)),
        name=name,
        hovertemplate="Shot %{text}<br>%{x:.0f}, %{y:.0f}<extra></extra>",
    )


def _layout(fig: go.Figure, title: str) -> None:
    fig.update_layout(
        title=title,
        showlegend=False,
        xaxis=dict(range=[SURFACE_MIN, SURFACE_MAX], visible=False),
        yaxis=dict(range=[SURFACE_MIN, SURFACE_MAX], visible=False, autorange="reversed"),
        margin=dict(l=10, r=10, t=40, b=10),
        height=500,
    )


def create_goal_heatmap_figure(
    events: Iterable[ShotEvent],
    *,
    bands: Optional[Sequence[DensityBand]] = None,
    show_shots: bool = True,
) -> go.Figure:
    """Goal mouth with goals-allowed density bands and numbered placements."""

    shots = list(events)
    if bands is None:
        bands = estimate_goal_density(shots)

    fig = go.Figure()
    _add_goal_frame(fig)
    for band in bands:
        for polygon in band.polygons:
            fig.add_shape(
                type="path",
                path=_polygon_path(polygon),
                fillcolor=_HEAT_COLOR,
                fillrule="evenodd",
                opacity=band.opacity,
                line=dict(width=0),
            )

    if show_shots:
        placed = [(number, shot) for number, shot in enumerate(shots, start=1) if shot.placement is not None]
        if placed:
            fig.add_trace(
                _numbered_markers(
                    [shot.placement.x for _, shot in placed],
                    [shot.placement.y for _, shot in placed],
                    [str(number) for number, _ in placed],
                    [_GOAL_COLOR if shot.outcome is ShotOutcome.GOAL else _SAVE_COLOR for _, shot in placed],
                    name="Placements",
                )
            )

    _layout(fig, "Goal density" if bands else "Shot placement")
    return fig


def create_floor_shots_figure(events: Iterable[ShotEvent]) -> go.Figure:
    """Floor view with every shot origin numbered in recording order."""

    shots = list(events)
    fig = go.Figure()
    _add_floor_markings(fig)
    if shots:
        fig.add_trace(
            _numbered_markers(
                [shot.origin.x for shot in shots],
                [shot.origin.y for shot in shots],
                [str(number) for number in range(1, len(shots) + 1)],
                [_GOAL_COLOR if shot.outcome is ShotOutcome.GOAL else _SAVE_COLOR for shot in shots],
                name="Origins",
            )
        )
    _layout(fig, "Shot origins")
    return fig
