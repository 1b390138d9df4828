"""Helpers shared by the e2fs operation commands."""

from collections.abc import Callable

import click

from e2fs.cli.output import error_output
from e2fs.core.errors import ToolError

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds before the tool is killed (default: group --timeout, then config).",
)


def run_operation(operation: Callable[[], None]) -> None:
    """Run an e2fsprogs operation, exiting with status 1 on failure.

    Raises:
        SystemExit: If the operation raised a ToolError (with exit code 1)
    """
    try:
        operation()
    except ToolError as e:
        error_output(str(e))
        raise SystemExit(1) from e
