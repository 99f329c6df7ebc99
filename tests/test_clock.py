from boxlax_tracker.tracking.clock import DEFAULT_CLOCK, GameClock


def test_seconds_borrow_is_clamped_at_zero_minutes() -> None:
    assert str(GameClock.parse("00:00").adjust_seconds(-1)) == "00:59"


def test_seconds_carry_into_minutes() -> None:
    assert str(GameClock.parse("14:59").adjust_seconds(1)) == "15:00"


def test_seconds_borrow_from_minutes() -> None:
    assert str(GameClock.parse("15:00").adjust_seconds(-1)) == "14:59"


def test_minutes_are_clamped() -> None:
    assert str(GameClock.parse("60:10").adjust_minutes(1)) == "60:10"
    assert str(GameClock.parse("00:10").adjust_minutes(-1)) == "00:10"
    assert str(GameClock.parse("60:59").adjust_seconds(1)) == "60:00"


def test_parse_tolerates_garbage() -> None:
    assert GameClock.parse("ab:cd") == GameClock(0, 0)
    assert GameClock.parse("7") == GameClock(7, 0)
    assert GameClock.parse("99:75") == GameClock(60, 59)


def test_default_clock() -> None:
    assert str(DEFAULT_CLOCK) == "15:00"


def test_multi_second_steps_carry_and_borrow() -> None:
    assert str(GameClock.parse("10:30").adjust_seconds(125)) == "12:35"
    assert str(GameClock.parse("10:30").adjust_seconds(-95)) == "08:55"


def test_large_second_steps_clamp_minutes_only() -> None:
    assert str(GameClock.parse("15:00").adjust_seconds(3_000_000)) == "60:00"
    assert str(GameClock.parse("15:00").adjust_seconds(-3_000_001)) == "00:59"
