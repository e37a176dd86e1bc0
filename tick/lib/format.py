from datetime import datetime

MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'s' if n != 1 else ''}"


def _span(seconds: float) -> str:
    if seconds < HOUR:
        return _plural(max(1, int(seconds / MINUTE)), "minute")
    if seconds < DAY:
        return _plural(int(seconds / HOUR), "hour")
    if seconds < WEEK:
        return _plural(int(seconds / DAY), "day")
    if seconds < MONTH:
        return _plural(int(seconds / WEEK), "week")
    if seconds < YEAR:
        return _plural(int(seconds / MONTH), "month")
    return _plural(int(seconds / YEAR), "year")


def humanize_deadline(deadline: datetime, now: datetime) -> str:
    """Describe a deadline relative to now: 'due in 3 hours', '2 days overdue', 'due now'."""
    diff = (deadline - now).total_seconds()
    if abs(diff) < MINUTE:
        return "due now"
    if diff > 0:
        return f"due in {_span(diff)}"
    return f"{_span(-diff)} overdue"
