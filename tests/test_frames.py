import math

import pandas as pd

from boxlax_tracker.stats.frames import SHOT_COLUMNS, events_to_frame
from boxlax_tracker.tracking.models import GameSituation, ShotOutcome


def test_events_to_frame_numbers_shots_in_order(make_shot) -> None:
    shots = [
        make_shot(ShotOutcome.SAVE, period=1, time_remaining="14:10"),
        make_shot(ShotOutcome.GOAL, period=2, placement=None, situation=GameSituation.PENALTY_KILL),
    ]

    frame = events_to_frame(shots)

    assert list(frame.columns) == SHOT_COLUMNS
    assert frame["shot_number"].tolist() == [1, 2]
    assert frame["outcome"].tolist() == ["SAVE", "GOAL"]
    assert frame["situation"].tolist() == ["EV", "PK"]
    assert frame.loc[0, "time_remaining"] == "14:10"
    assert math.isclose(frame.loc[0, "placement_x"], 50.0)
    assert pd.isna(frame.loc[1, "placement_x"])
    assert frame.loc[0, "timestamp"].tzinfo is not None


def test_events_to_frame_empty() -> None:
    frame = events_to_frame([])

    assert frame.empty
    assert list(frame.columns) == SHOT_COLUMNS
