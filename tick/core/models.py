from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from datetime import datetime

from tick.errors import EmptyName, InvalidTag


@dataclass(frozen=True)
class Task:
    id: int
    name: str
    deadline: datetime
    tags: tuple[str, ...] = ()
    complete: bool = False

    def __post_init__(self):
        if not isinstance(self.id, int) or isinstance(self.id, bool) or self.id < 1:
            raise ValueError(f"Task id must be a positive integer, got {self.id!r}")
        if not self.name or not self.name.strip():
            raise EmptyName()
        tags = tuple(self.tags)
        for tag in tags:
            if not tag:
                raise InvalidTag(tag)
        object.__setattr__(self, "tags", tags)
        # File format stores minutes only.
        object.__setattr__(self, "deadline", self.deadline.replace(second=0, microsecond=0))

    def mark_complete(self) -> "Task":
        if self.complete:
            return self
        return replace(self, complete=True)

    def is_overdue(self, now: datetime) -> bool:
        return not self.complete and self.deadline < now

    def has_tags(self, required: Iterable[str]) -> bool:
        return set(required) <= set(self.tags)


@dataclass(frozen=True)
class Store:
    """Ordered task collection; insertion order, ids unique but not contiguous."""

    tasks: tuple[Task, ...] = field(default_factory=tuple)

    def __post_init__(self):
        tasks = tuple(self.tasks)
        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise ValueError(f"Duplicate task id {task.id}")
            seen.add(task.id)
        object.__setattr__(self, "tasks", tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, task_id: object) -> bool:
        return any(task.id == task_id for task in self.tasks)

    @property
    def ids(self) -> list[int]:
        return [task.id for task in self.tasks]

    def get(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def next_id(self) -> int:
        return max(self.ids, default=0) + 1

    def append(self, task: Task) -> "Store":
        return Store(self.tasks + (task,))


__all__ = ["Store", "Task"]
