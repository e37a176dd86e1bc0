"""Task CLI: add, complete, delete, list."""

import logging
import sys
from datetime import datetime
from typing import Annotated

import typer

from tick import config
from tick.cli import argv, output
from tick.cli.errors import error_feedback
from tick.core.queries import FilterOptions
from tick.lib.store import file as store_file
from tick.task import operations

logger = logging.getLogger(__name__)

main_app = typer.Typer(
    invoke_without_command=True,
    add_completion=False,
    help="""A todo CLI application. Tasks live in a plain-text file, one per line.""",
)


def _now() -> datetime:
    return datetime.now()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[tick] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@main_app.callback(context_settings={"help_option_names": ["-h", "--help"]})
def main_callback(
    ctx: typer.Context,
    file: Annotated[
        str | None, typer.Option("--file", "-f", help="Task database file.")
    ] = None,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
):
    output.init_context(
        ctx, json_output=json_output, quiet_output=quiet_output, store_override=file
    )

    if ctx.resilient_parsing:
        return

    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@main_app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    name: Annotated[str, typer.Option("--name", "-n", help="Task description")],
    tags: Annotated[
        list[str] | None, typer.Option("--tags", "-t", help="Tag(s) to categorize the task")
    ] = None,
    deadline: Annotated[
        str | None,
        typer.Option(
            "--deadline",
            "-d",
            help="'YYYY-MM-DD HH:MM', 'YYYY-MM-DD' or 'HH:MM' (default: end of today)",
        ),
    ] = None,
):
    """Add a new task."""
    now = _now()
    at = config.default_time()
    deadline_text = deadline if deadline is not None else f"{now:%Y-%m-%d} {at:%H:%M}"

    path = output.session(ctx).store_path()
    store = store_file.load(path)
    store = operations.add(store, name, tags or [], deadline_text, now, default_time=at)
    store_file.save(path, store)

    task = store.tasks[-1]
    logger.info("Added task %s to %s", task.id, path)
    output.confirm(ctx, f"Added: {task.id}")


@main_app.command("complete")
@error_feedback
def complete(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., min=1, help="Id of task to complete"),
):
    """Mark an existing task as finished."""
    path = output.session(ctx).store_path()
    store = store_file.load(path)
    if task_id not in store:
        output.confirm(ctx, f"No task {task_id}")
        return

    updated = operations.complete(store, task_id)
    if updated is not store:
        store_file.save(path, updated)
    output.confirm(ctx, f"Completed: {task_id}")


@main_app.command("delete")
@error_feedback
def delete(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., min=1, help="Id of task to delete"),
):
    """Remove a task."""
    path = output.session(ctx).store_path()
    store = store_file.load(path)
    if task_id not in store:
        output.confirm(ctx, f"No task {task_id}")
        return

    store_file.save(path, operations.delete(store, task_id))
    output.confirm(ctx, f"Deleted: {task_id}")


@main_app.command("list")
@error_feedback
def list_cmd(
    ctx: typer.Context,
    show_all: bool = typer.Option(False, "--all", "-a", help="Include completed tasks"),
    overdue: bool = typer.Option(False, "--overdue", "-o", help="Only show overdue tasks"),
    tags: Annotated[
        list[str] | None, typer.Option("--tags", "-t", help="Only show tasks with all these tags")
    ] = None,
    number: Annotated[
        int | None,
        typer.Option("--number", "-n", min=0, help="Only show the next N tasks due"),
    ] = None,
):
    """Show tasks."""
    now = _now()
    store = store_file.load(output.session(ctx).store_path())
    options = FilterOptions(
        include_complete=show_all,
        overdue_only=overdue,
        required_tags=frozenset(tags or []),
        now=now,
        by_deadline=number is not None,
        limit=number,
    )
    result = operations.list_tasks(store, options)
    output.emit_tasks(ctx, result, now)


def main() -> None:
    """Entry point for tick command."""
    sys.argv[1:] = argv.expand_multi(sys.argv[1:], "--tags", "-t")
    try:
        main_app()
    except SystemExit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


app = main_app

__all__ = ["app", "main"]
