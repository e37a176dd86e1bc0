"""Deadline parser: shapes, fallbacks, range validation."""

from datetime import datetime, time

import pytest

from tick.core.deadline import (
    DeadlineShape,
    classify_deadline,
    format_deadline,
    parse_deadline,
    parse_time_of_day,
)
from tick.errors import InvalidDeadlineFormat


def test_full_datetime_used_as_is(now):
    assert parse_deadline("2025-03-10 08:30", now) == datetime(2025, 3, 10, 8, 30)


def test_date_only_defaults_to_five_pm(now):
    """Contract: date-only deadline lands at 17:00 on that date."""
    assert parse_deadline("2025-03-10", now) == datetime(2025, 3, 10, 17, 0)


def test_time_only_uses_reference_date(now):
    """Contract: time-only deadline lands on now's date."""
    assert parse_deadline("13:00", now) == datetime(2025, 3, 7, 13, 0)


def test_time_only_earlier_than_now_stays_today(now):
    assert parse_deadline("08:00", now) == datetime(2025, 3, 7, 8, 0)


def test_default_time_override(now):
    assert parse_deadline("2025-03-10", now, default_time=time(9, 0)) == datetime(2025, 3, 10, 9, 0)


def test_iso_separator_and_seconds(now):
    assert parse_deadline("2025-03-10T08:30:15", now) == datetime(2025, 3, 10, 8, 30, 15)
    assert parse_deadline("08:30:15", now) == datetime(2025, 3, 7, 8, 30, 15)


def test_surrounding_whitespace_ignored(now):
    assert parse_deadline("  2025-03-10  ", now) == datetime(2025, 3, 10, 17, 0)


def test_classify_reports_shape():
    assert classify_deadline("2025-03-10 08:30").shape is DeadlineShape.DATETIME
    assert classify_deadline("2025-03-10").shape is DeadlineShape.DATE_ONLY
    assert classify_deadline("08:30").shape is DeadlineShape.TIME_ONLY


def test_leap_day_accepted(now):
    assert parse_deadline("2024-02-29", now) == datetime(2024, 2, 29, 17, 0)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "tomorrow",
        "2025/03/10",
        "10-03-2025",
        "2025-03-10 8",
        "25:00",
        "12:60",
        "2025-13-01",
        "2025-00-10",
        "2025-02-30",
        "2023-02-29",
        "2025-03-10 24:00",
        "2025-03-10 17:00 extra",
    ],
)
def test_invalid_deadlines_raise(text, now):
    """Boundary: unparseable or out-of-range text raises InvalidDeadlineFormat."""
    with pytest.raises(InvalidDeadlineFormat):
        parse_deadline(text, now)


@pytest.mark.parametrize("text", ["٢٠٢٥-٠٣-١٠", "١٧:٠٠", "２０２５-03-10"])
def test_non_ascii_digits_rejected(text, now):
    """Boundary: only ASCII digits count, matching what the store file accepts."""
    with pytest.raises(InvalidDeadlineFormat):
        parse_deadline(text, now)


def test_error_carries_text(now):
    with pytest.raises(InvalidDeadlineFormat) as exc:
        parse_deadline("someday", now)
    assert exc.value.text == "someday"
    assert "someday" in str(exc.value)


def test_parse_time_of_day():
    assert parse_time_of_day("09:15") == time(9, 15)
    with pytest.raises(InvalidDeadlineFormat):
        parse_time_of_day("2025-03-10")


def test_format_deadline_pads_fields():
    assert format_deadline(datetime(2025, 3, 7, 9, 5)) == "2025-03-07 09:05"
    assert format_deadline(datetime(999, 1, 2, 3, 4)) == "0999-01-02 03:04"
