import importlib.util
import itertools
import types
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pytest

from boxlax_tracker.tracking.clock import GameClock
from boxlax_tracker.tracking.geometry import FloorPoint, GoalPoint
from boxlax_tracker.tracking.models import (
    GameMetadata,
    GameSituation,
    ShotEvent,
    ShotOutcome,
)


@pytest.fixture()
def make_shot() -> Callable[..., ShotEvent]:
    counter = itertools.count(1)

    def _make(
        outcome: ShotOutcome = ShotOutcome.SAVE,
        *,
        period: int = 1,
        situation: GameSituation = GameSituation.EVEN_STRENGTH,
        is_controlled: bool = False,
        is_rebound: bool = False,
        origin: Optional[FloorPoint] = None,
        placement: Optional[GoalPoint] = GoalPoint(50.0, 50.0),
        time_remaining: str = "15:00",
    ) -> ShotEvent:
        number = next(counter)
        return ShotEvent(
            id=f"shot-{number}",
            origin=origin or FloorPoint(50.0, 70.0),
            placement=placement,
            outcome=outcome,
            situation=situation,
            is_rebound=is_rebound,
            is_controlled=is_controlled,
            period=period,
            time_remaining=GameClock.parse(time_remaining),
            timestamp=1_700_000_000_000.0 + number,
        )

    return _make


@pytest.fixture()
def metadata() -> GameMetadata:
    return GameMetadata(opponent="Rock", location="Home Arena", date=datetime(2024, 3, 2, 19, 30))


@pytest.fixture()
def session_report_module() -> types.ModuleType:
    spec = importlib.util.spec_from_file_location(
        "session_report_cli",
        Path(__file__).resolve().parents[1] / "scripts" / "session_report.py",
    )
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module
