import logging
import os
from dataclasses import replace

import click

from e2fs.cli.commands.check import check_cmd
from e2fs.cli.commands.create import create_cmd
from e2fs.cli.commands.resize import resize_cmd
from e2fs.cli.output import error_output
from e2fs.core.context import E2fsContext, create_context

# Enable debug logging if E2FS_DEBUG environment variable is set
if os.getenv("E2FS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="e2fs")
@click.option("--dry-run", is_flag=True, help="Print commands that would modify devices.")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Default seconds before a tool is killed; commands may override it.",
)
@click.pass_context
def cli(ctx: click.Context, dry_run: bool, timeout: float | None) -> None:
    """Create, resize and check ext4 filesystems with e2fsprogs."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run, timeout=timeout)
        except ValueError as e:
            error_output(str(e))
            raise SystemExit(1) from e
    elif isinstance(ctx.obj, E2fsContext) and timeout is not None:
        ctx.obj = replace(ctx.obj, timeout=timeout)


cli.add_command(create_cmd)
cli.add_command(resize_cmd)
cli.add_command(check_cmd)


def main() -> None:
    """CLI entry point used by the `e2fs` console script."""
    cli()
