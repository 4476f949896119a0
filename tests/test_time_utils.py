"""Tests for time utilities."""

from __future__ import annotations

from datetime import UTC, datetime, time, timedelta, timezone

import pytest

from batterywatch.utils.time import TimeUtils


def test_parse_clock() -> None:
    assert TimeUtils.parse_clock("08:30") == time(8, 30)
    assert TimeUtils.parse_clock(" 23:05 ") == time(23, 5)


@pytest.mark.parametrize("value", ["8", "25:00", "12:60", "ab:cd", ""])
def test_parse_clock_rejects(value: str) -> None:
    with pytest.raises(ValueError):
        TimeUtils.parse_clock(value)


@pytest.mark.parametrize(
    "clock, expected",
    [
        (time(7, 59), False),
        (time(8, 0), False),  # start is exclusive
        (time(8, 1), True),
        (time(21, 59), True),
        (time(22, 0), False),  # end is exclusive
    ],
)
def test_window_within_day(clock: time, expected: bool) -> None:
    now = datetime.combine(datetime(2025, 1, 1), clock)
    assert TimeUtils.is_within_window(now, time(8, 0), time(22, 0)) is expected


@pytest.mark.parametrize(
    "clock, expected",
    [
        (time(23, 0), True),
        (time(3, 0), True),
        (time(7, 0), False),
        (time(12, 0), False),
    ],
)
def test_window_across_midnight(clock: time, expected: bool) -> None:
    now = datetime.combine(datetime(2025, 1, 1), clock)
    assert TimeUtils.is_within_window(now, time(22, 0), time(7, 0)) is expected


def test_window_ignores_timezone_of_now() -> None:
    now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=5)))
    assert TimeUtils.is_within_window(now, time(8, 0), time(22, 0))


def test_days_between() -> None:
    start = datetime(2025, 1, 1, 12, 0)
    assert TimeUtils.days_between(start, datetime(2025, 1, 3, 11, 59)) == 1
    assert TimeUtils.days_between(start, datetime(2025, 1, 3, 12, 0)) == 2
    assert TimeUtils.days_between(start, datetime(2024, 12, 1)) == 0


def test_epoch_conversions() -> None:
    dt = datetime(2025, 1, 1, tzinfo=UTC)
    epoch = TimeUtils.datetime_to_epoch(dt)
    assert TimeUtils.datetime_to_epoch(datetime(2025, 1, 1)) == epoch
    assert TimeUtils.epoch_to_datetime(epoch) == dt
