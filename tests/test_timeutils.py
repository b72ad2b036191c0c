from datetime import date, datetime

import pytest

from roster.timeutils import add_days, at_clock_time, format_floating, parse_clock_time


def test_parse_clock_time_splits_hours_and_minutes():
    assert parse_clock_time("07:30") == (7, 30)
    assert parse_clock_time("0:05") == (0, 5)


def test_parse_clock_time_does_not_range_check():
    assert parse_clock_time("25:99") == (25, 99)


def test_parse_clock_time_ignores_seconds():
    assert parse_clock_time("07:30:00") == (7, 30)


def test_at_clock_time_accepts_seconds_form():
    assert at_clock_time(date(2024, 1, 1), "17:45:30") == datetime(2024, 1, 1, 17, 45)


def test_parse_clock_time_rejects_non_numeric():
    with pytest.raises(ValueError):
        parse_clock_time("seven:thirty")


def test_at_clock_time_places_time_on_day():
    assert at_clock_time(date(2024, 1, 1), "17:45") == datetime(2024, 1, 1, 17, 45)


def test_at_clock_time_rolls_over_out_of_range_values():
    assert at_clock_time(date(2024, 1, 1), "25:99") == datetime(2024, 1, 2, 2, 39)
    assert at_clock_time(date(2024, 12, 31), "24:00") == datetime(2025, 1, 1, 0, 0)


def test_add_days_keeps_time_of_day():
    assert add_days(datetime(2024, 3, 9, 7, 0), 1) == datetime(2024, 3, 10, 7, 0)
    assert add_days(date(2024, 2, 28), 2) == date(2024, 3, 1)
    assert add_days(date(2024, 1, 1), 0) == date(2024, 1, 1)


def test_format_floating_has_no_zone_suffix():
    assert format_floating(datetime(2024, 1, 5, 7, 5)) == "20240105T070500"


def test_format_floating_fixes_seconds_at_zero():
    assert format_floating(datetime(2024, 11, 30, 23, 59, 42, 123)) == "20241130T235900"
