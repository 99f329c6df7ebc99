"""Append-only, copy-on-write log of committed shots."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from boxlax_tracker.tracking.models import ShotEvent


class EventLog:
    """Ordered shots for one game.

    ``append`` never mutates the log it is called on; it returns a new log
    holding the extra event. Readers therefore always see a complete log.
    """

    __slots__ = ("_events",)

    def __init__(self, events: Iterable[ShotEvent] = ()) -> None:
        materialised = tuple(events)
        for event in materialised:
            _require_event(event)
        self._events: Tuple[ShotEvent, ...] = materialised

    def append(self, event: ShotEvent) -> "EventLog":
        _require_event(event)
        log = EventLog.__new__(EventLog)
        log._events = self._events + (event,)
        return log

    def size(self) -> int:
        return len(self._events)

    def all(self) -> Tuple[ShotEvent, ...]:
        return self._events

    def events_in_period(self, period: int) -> Tuple[ShotEvent, ...]:
        return tuple(event for event in self._events if event.period == period)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[ShotEvent]:
        return iter(self._events)

    def __getitem__(self, index: int) -> ShotEvent:
        return self._events[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventLog):
            return NotImplemented
        return self._events == other._events

    def __hash__(self) -> int:
        return hash(self._events)

    def __repr__(self) -> str:
        return f"EventLog(size={len(self._events)})"


def _require_event(event: object) -> None:
    if not isinstance(event, ShotEvent):
        raise TypeError(f"EventLog only accepts ShotEvent instances, got {type(event).__name__}")
