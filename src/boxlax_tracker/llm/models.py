"""Simplified shot data handed to the language model."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Union

from boxlax_tracker.tracking.models import ShotEvent

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class ShotProjection:
    """Rounded, token-friendly view of one shot."""

    result: str
    originX: int
    originY: int
    placementX: Union[int, str]
    placementY: Union[int, str]
    situation: str
    rebound: bool

    @classmethod
    def from_event(cls, event: ShotEvent) -> "ShotProjection":
        origin_x, origin_y = event.origin.rounded()
        if event.placement is not None:
            placement_x, placement_y = event.placement.rounded()
        else:
            placement_x = placement_y = NOT_AVAILABLE
        return cls(
            result=event.outcome.value,
            originX=origin_x,
            originY=origin_y,
            placementX=placement_x,
            placementY=placement_y,
            situation=event.situation.value,
            rebound=event.is_rebound,
        )

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class ReportTotals:
    total: int
    saves: int
    goals: int
    save_percentage: float


def project_shots(events: Iterable[ShotEvent]) -> List[ShotProjection]:
    return [ShotProjection.from_event(event) for event in events]
