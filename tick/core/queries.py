"""Task filtering over a Store."""

from dataclasses import dataclass, field
from datetime import datetime

from tick.core.models import Store, Task


@dataclass(frozen=True)
class FilterOptions:
    include_complete: bool = False
    overdue_only: bool = False
    required_tags: frozenset[str] = field(default_factory=frozenset)
    now: datetime | None = None
    by_deadline: bool = False
    limit: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "required_tags", frozenset(self.required_tags))
        if self.overdue_only and self.now is None:
            raise ValueError("overdue_only requires a reference 'now'")
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")


@dataclass(frozen=True)
class ListResult:
    tasks: tuple[Task, ...]
    show_ids: bool = True

    def __iter__(self):
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)


def filter_tasks(store: Store, options: FilterOptions | None = None) -> ListResult:
    """Select tasks from store, preserving store order.

    Args:
        store: Tasks to filter
        options: Filter settings; defaults hide completed tasks only

    Returns:
        ListResult with the matching tasks. show_ids is False when completed
        tasks are included, signalling that ids should not be displayed.
    """
    options = options or FilterOptions()

    tasks = [task for task in store if options.include_complete or not task.complete]

    if options.overdue_only:
        tasks = [task for task in tasks if task.is_overdue(options.now)]

    if options.required_tags:
        tasks = [task for task in tasks if task.has_tags(options.required_tags)]

    if options.by_deadline:
        tasks.sort(key=lambda task: task.deadline)

    if options.limit is not None:
        tasks = tasks[: options.limit]

    return ListResult(tuple(tasks), show_ids=not options.include_complete)


__all__ = ["FilterOptions", "ListResult", "filter_tasks"]
