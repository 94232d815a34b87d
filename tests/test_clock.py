from __future__ import annotations

from datetime import datetime

import pytest

from preorder.clock import format_time_for_display, is_valid_time, min_arrival_time, normalize_time_input


def test_min_arrival_is_25_minutes_ahead() -> None:
    assert min_arrival_time(datetime(2026, 10, 19, 12, 0)) == "12:25"
    assert min_arrival_time(datetime(2026, 10, 19, 9, 50, 59)) == "10:15"


def test_min_arrival_wraps_past_midnight() -> None:
    assert min_arrival_time(datetime(2026, 10, 19, 23, 50)) == "00:15"


@pytest.mark.parametrize(
    ("time24", "expected"),
    [
        ("00:05", "12:05 AM"),
        ("09:30", "9:30 AM"),
        ("12:00", "12:00 PM"),
        ("13:45", "1:45 PM"),
        ("22:30", "10:30 PM"),
        ("", ""),
    ],
)
def test_format_time_for_display(time24: str, expected: str) -> None:
    assert format_time_for_display(time24) == expected


def test_normalize_pads_single_digit_hours() -> None:
    assert normalize_time_input("7:05") == "07:05"
    assert normalize_time_input(" 19:30 ") == "19:30"
    assert normalize_time_input("7pm") == "7pm"


def test_is_valid_time() -> None:
    assert is_valid_time("00:00")
    assert is_valid_time("23:59")
    assert not is_valid_time("24:00")
    assert not is_valid_time("7:05")
