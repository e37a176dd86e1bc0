"""Deadline parsing: free-form text to an absolute (naive, local) timestamp.

Three shapes are accepted, tried in order:

    YYYY-MM-DD HH:MM    used as-is
    YYYY-MM-DD          that date at the default time (17:00)
    HH:MM               the reference date at that time

Seconds are optional on both time forms. Anything else, or any field out of
range, raises InvalidDeadlineFormat.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum

from tick.errors import InvalidDeadlineFormat

DEFAULT_TIME = time(17, 0)

_DATE = r"(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
_TIME = r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"

_DATETIME_RE = re.compile(rf"^{_DATE}[ T]{_TIME}$", re.ASCII)
_DATE_RE = re.compile(rf"^{_DATE}$", re.ASCII)
_TIME_RE = re.compile(rf"^{_TIME}$", re.ASCII)


class DeadlineShape(str, Enum):
    DATETIME = "datetime"
    DATE_ONLY = "date_only"
    TIME_ONLY = "time_only"


@dataclass(frozen=True)
class ParsedDeadline:
    """A deadline string after shape detection, before fallback rules are applied."""

    shape: DeadlineShape
    text: str
    day: date | None = None
    at: time | None = None

    def resolve(self, now: datetime, default_time: time = DEFAULT_TIME) -> datetime:
        if self.shape is DeadlineShape.DATETIME:
            return datetime.combine(self.day, self.at)
        if self.shape is DeadlineShape.DATE_ONLY:
            return datetime.combine(self.day, default_time)
        return datetime.combine(now.date(), self.at)


def _build_date(text: str, match: re.Match) -> date:
    try:
        return date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError as e:
        raise InvalidDeadlineFormat(text, str(e)) from e


def _build_time(text: str, match: re.Match) -> time:
    second = match["second"]
    try:
        return time(int(match["hour"]), int(match["minute"]), int(second) if second else 0)
    except ValueError as e:
        raise InvalidDeadlineFormat(text, str(e)) from e


def classify_deadline(text: str) -> ParsedDeadline:
    raw = text.strip()

    if match := _DATETIME_RE.match(raw):
        return ParsedDeadline(
            DeadlineShape.DATETIME, raw, day=_build_date(text, match), at=_build_time(text, match)
        )
    if match := _DATE_RE.match(raw):
        return ParsedDeadline(DeadlineShape.DATE_ONLY, raw, day=_build_date(text, match))
    if match := _TIME_RE.match(raw):
        return ParsedDeadline(DeadlineShape.TIME_ONLY, raw, at=_build_time(text, match))

    raise InvalidDeadlineFormat(text)


def parse_deadline(text: str, now: datetime, default_time: time = DEFAULT_TIME) -> datetime:
    """Parse a deadline string relative to `now`.

    Args:
        text: User-supplied deadline ("2025-03-07 13:00", "2025-03-07" or "13:00")
        now: Reference timestamp; its date fills in time-only deadlines
        default_time: Time of day used for date-only deadlines

    Returns:
        Naive datetime for the deadline.

    Raises:
        InvalidDeadlineFormat: text matches no shape or a field is out of range
    """
    return classify_deadline(text).resolve(now, default_time)


def parse_time_of_day(text: str) -> time:
    """Parse a bare HH:MM time of day (used for configured defaults)."""
    match = _TIME_RE.match(text.strip())
    if not match:
        raise InvalidDeadlineFormat(text)
    return _build_time(text, match)


def format_deadline(deadline: datetime) -> str:
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{deadline.year:04d}-{deadline.month:02d}-{deadline.day:02d} "
        f"{deadline.hour:02d}:{deadline.minute:02d}"
    )


__all__ = [
    "DEFAULT_TIME",
    "DeadlineShape",
    "ParsedDeadline",
    "classify_deadline",
    "format_deadline",
    "parse_deadline",
    "parse_time_of_day",
]
