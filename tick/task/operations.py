"""Task operations: pure transitions over a Store."""

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime, time

from tick.core.deadline import DEFAULT_TIME, parse_deadline
from tick.core.models import Store, Task
from tick.core.queries import FilterOptions, ListResult, filter_tasks
from tick.errors import EmptyName

logger = logging.getLogger(__name__)


def add(
    store: Store,
    name: str,
    tags: Iterable[str],
    deadline_text: str,
    now: datetime,
    default_time: time = DEFAULT_TIME,
) -> Store:
    """Append a new incomplete task with the next free id.

    Raises:
        EmptyName: name is blank
        InvalidDeadlineFormat: deadline_text cannot be parsed
    """
    name = name.strip() if name else ""
    if not name:
        raise EmptyName()

    deadline = parse_deadline(deadline_text, now, default_time)
    task = Task(id=store.next_id(), name=name, deadline=deadline, tags=tuple(tags))
    logger.debug("Adding task id=%s deadline=%s tags=%s", task.id, task.deadline, task.tags)
    return store.append(task)


def complete(store: Store, task_id: int) -> Store:
    """Mark task complete. Already-complete and unknown ids leave the store unchanged."""
    task = store.get(task_id)
    if task is None:
        logger.debug("complete: no task id=%s", task_id)
        return store
    if task.complete:
        return store
    return replace(store, tasks=tuple(t.mark_complete() if t.id == task_id else t for t in store))


def delete(store: Store, task_id: int) -> Store:
    """Remove task. Remaining tasks keep their ids; unknown ids are a no-op."""
    if task_id not in store:
        logger.debug("delete: no task id=%s", task_id)
        return store
    return replace(store, tasks=tuple(t for t in store if t.id != task_id))


def list_tasks(store: Store, options: FilterOptions | None = None) -> ListResult:
    return filter_tasks(store, options)


def get_task(store: Store, task_id: int) -> Task | None:
    return store.get(task_id)
