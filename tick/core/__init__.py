"""Core domain: task records, deadline parsing, filtering."""

from tick.core.deadline import (
    DEFAULT_TIME,
    DeadlineShape,
    ParsedDeadline,
    classify_deadline,
    format_deadline,
    parse_deadline,
)
from tick.core.models import Store, Task
from tick.core.queries import FilterOptions, ListResult, filter_tasks

__all__ = [
    "DEFAULT_TIME",
    "DeadlineShape",
    "FilterOptions",
    "ListResult",
    "ParsedDeadline",
    "Store",
    "Task",
    "classify_deadline",
    "filter_tasks",
    "format_deadline",
    "parse_deadline",
]
