"""Tabular views of a shot log."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

import numpy as np
import pandas as pd

from boxlax_tracker.tracking.models import ShotEvent

SHOT_COLUMNS = [
    "shot_number",
    "shot_id",
    "period",
    "time_remaining",
    "outcome",
    "situation",
    "is_rebound",
    "is_controlled",
    "origin_x",
    "origin_y",
    "placement_x",
    "placement_y",
    "timestamp",
]


def _shot_record(number: int, event: ShotEvent) -> Dict[str, Any]:
    placement = event.placement
    return {
        "shot_number": number,
        "shot_id": event.id,
        "period": event.period,
        "time_remaining": str(event.time_remaining),
        "outcome": event.outcome.value,
        "situation": event.situation.value,
        "is_rebound": event.is_rebound,
        "is_controlled": event.is_controlled,
        "origin_x": event.origin.x,
        "origin_y": event.origin.y,
        "placement_x": placement.x if placement is not None else np.nan,
        "placement_y": placement.y if placement is not None else np.nan,
        "timestamp": pd.to_datetime(event.timestamp, unit="ms", utc=True),
    }


def events_to_frame(events: Iterable[ShotEvent]) -> pd.DataFrame:
    """One row per shot in recording order; shots are numbered from 1."""

    records: List[Dict[str, Any]] = [
        _shot_record(number, event) for number, event in enumerate(events, start=1)
    ]
    return pd.DataFrame.from_records(records, columns=SHOT_COLUMNS)
