"""CLI error handling: map domain errors to messages and exit codes."""

import logging
from functools import wraps

import typer
from click.exceptions import Exit

from tick.errors import (
    CorruptRecord,
    EmptyName,
    InvalidDeadlineFormat,
    InvalidTag,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Bad user input (blank name, bad deadline, bad tag) exits 2. A corrupt or
    unreadable store file and anything unexpected exit 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except (EmptyName, InvalidTag, InvalidDeadlineFormat, ValueError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(EXIT_USAGE) from e
        except CorruptRecord as e:
            typer.echo(f"Corrupt store: {e}", err=True)
            raise typer.Exit(EXIT_FAILURE) from e
        except StoreUnavailable as e:
            typer.echo(f"Store unavailable: {e}", err=True)
            raise typer.Exit(EXIT_FAILURE) from e
        except Exception as e:
            logger.debug("Unhandled error in %s", f.__name__, exc_info=True)
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(EXIT_FAILURE) from e

    return wrapper
