"""Game clock value shown as ``MM:SS`` time remaining in a period."""

from __future__ import annotations

from dataclasses import dataclass

MAX_MINUTES = 60
MAX_SECONDS = 59
DEFAULT_PERIOD_CLOCK = "15:00"


def _parse_part(text: str) -> int:
    digits = ""
    for char in text.strip():
        if char.isdigit() or (char == "-" and not digits):
            digits += char
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return 0


@dataclass(frozen=True, order=True)
class GameClock:
    """Minutes/seconds remaining, clamped to ``00:00``-``60:59``."""

    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "minutes", max(0, min(MAX_MINUTES, int(self.minutes))))
        object.__setattr__(self, "seconds", max(0, min(MAX_SECONDS, int(self.seconds))))

    @classmethod
    def parse(cls, value: str) -> "GameClock":
        """Parse ``"MM:SS"``; unreadable parts count as zero."""

        minutes_text, _, seconds_text = str(value).partition(":")
        return cls(_parse_part(minutes_text), _parse_part(seconds_text))

    def adjust_minutes(self, delta: int) -> "GameClock":
        return GameClock(self.minutes + delta, self.seconds)

    def adjust_seconds(self, delta: int) -> "GameClock":
        """Step the seconds by ``delta``, carrying into or borrowing from minutes.

        Seconds always wrap: ``59 + 1`` becomes ``00`` with one more minute and
        ``00 - 1`` becomes ``59`` with one less. Minutes stay clamped, so
        ``00:00`` minus one second reads ``00:59``.
        """

        carry, seconds = divmod(self.seconds + int(delta), MAX_SECONDS + 1)
        return GameClock(self.minutes + carry, seconds)

    def __str__(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}"


DEFAULT_CLOCK = GameClock.parse(DEFAULT_PERIOD_CLOCK)
