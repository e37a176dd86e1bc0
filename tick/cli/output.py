"""CLI output: global flags carried on the context, confirmations, task lists."""

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import typer

from tick.core.queries import ListResult
from tick.lib import paths
from tick.task.format import format_task_json, format_task_table


@dataclass(frozen=True)
class Session:
    """Flags from the top-level callback, shared with every subcommand."""

    json: bool = False
    quiet: bool = False
    store_override: str | None = None

    def store_path(self) -> Path:
        return paths.store_file(self.store_override)


def init_context(
    ctx: typer.Context,
    *,
    json_output: bool = False,
    quiet_output: bool = False,
    store_override: str | None = None,
) -> Session:
    ctx.obj = Session(json=json_output, quiet=quiet_output, store_override=store_override)
    return ctx.obj


def session(ctx: typer.Context) -> Session:
    return ctx.obj if isinstance(ctx.obj, Session) else Session()


def confirm(ctx: typer.Context, message: str) -> None:
    """Print a one-line confirmation unless --quiet was given."""
    if not session(ctx).quiet:
        typer.echo(message)


def emit_tasks(ctx: typer.Context, result: ListResult, now: datetime) -> None:
    """Print a list result as JSON rows or as a table.

    JSON mode always prints, so an empty result is `[]`. In table mode an
    empty result is a confirmation, and --quiet silences it.
    """
    if session(ctx).json:
        typer.echo(json.dumps(format_task_json(result), indent=2, ensure_ascii=False))
        return
    if not result.tasks:
        confirm(ctx, "No tasks")
        return
    typer.echo(format_task_table(result, now))


__all__ = ["Session", "confirm", "emit_tasks", "init_context", "session"]
