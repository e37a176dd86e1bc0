"""Task formatting for CLI display."""

from datetime import datetime

import typer

from tick.core.deadline import format_deadline
from tick.core.models import Task
from tick.core.queries import ListResult
from tick.lib.format import humanize_deadline

DONE_MARK = "✓"


def _row(task: Task, now: datetime | None, show_ids: bool) -> list[str]:
    due = format_deadline(task.deadline)
    if now is not None and not task.complete:
        due = f"{due} ({humanize_deadline(task.deadline, now)})"
    cells = [task.name, ", ".join(task.tags), due, DONE_MARK if task.complete else ""]
    if show_ids:
        cells.insert(0, str(task.id))
    return cells


def _style(line: str, task: Task, now: datetime | None) -> str:
    if task.complete:
        return typer.style(line, fg="green", strikethrough=True)
    if now is not None and task.is_overdue(now):
        return typer.style(line, fg="red")
    return line


def format_task_table(result: ListResult, now: datetime | None = None) -> str:
    """Render tasks as a padded table.

    The id column is dropped when result.show_ids is False. Completed rows are
    green and struck through, overdue rows red; styling is stripped by
    typer.echo when output is not a terminal.
    """
    headers = ["Name", "Tags", "Due", "Done"]
    if result.show_ids:
        headers.insert(0, "#")

    rows = [_row(task, now, result.show_ids) for task in result.tasks]
    widths = [len(h) for h in headers]
    for cells in rows:
        for i, cell in enumerate(cells):
            widths[i] = max(widths[i], len(cell))

    def line(cells: list[str]) -> str:
        return "| " + " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)) + " |"

    header = line(headers)
    lines = [header, "=" * len(header)]
    for task, cells in zip(result.tasks, rows):
        lines.append(_style(line(cells), task, now))
    return "\n".join(lines)


def task_to_dict(task: Task, show_id: bool = True) -> dict:
    data = {
        "name": task.name,
        "tags": list(task.tags),
        "deadline": format_deadline(task.deadline),
        "complete": task.complete,
    }
    if show_id:
        data = {"id": task.id, **data}
    return data


def format_task_json(result: ListResult) -> list[dict]:
    return [task_to_dict(task, result.show_ids) for task in result.tasks]
