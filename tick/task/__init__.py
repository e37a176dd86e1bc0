"""Task commands: add, complete, delete, list."""

from .operations import add, complete, delete, get_task, list_tasks

__all__ = [
    "add",
    "complete",
    "delete",
    "get_task",
    "list_tasks",
]
