"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from tasktrack_cli.utils.exceptions import TaskListError
from tasktrack_cli.utils.logger import get_logger
from tasktrack_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with timing logs and error-to-exit-code mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except TaskListError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - [%s] %s",
                cmd,
                elapsed,
                e.kind.value,
                e.message,
            )
            format_error(e.message)
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=1) from e

    return wrapper
