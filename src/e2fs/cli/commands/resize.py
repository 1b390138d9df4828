import click

from e2fs.cli.commands.shared import run_operation, timeout_option
from e2fs.cli.output import user_output
from e2fs.core.context import E2fsContext
from e2fs.core.options import ResizeOptions


@click.command("resize")
@click.argument("device")
@click.argument("size", required=False, default="")
@click.option("-f", "--force", is_flag=True, help="Skip safety checks.")
@click.option("-F", "--flush", is_flag=True, help="Flush the device's buffer cache.")
@click.option("-M", "--shrink", is_flag=True, help="Shrink to the minimum size.")
@click.option("-b", "--enable-64bit", is_flag=True, help="Turn on the 64bit feature.")
@click.option("-s", "--disable-64bit", is_flag=True, help="Turn off the 64bit feature.")
@click.option("-S", "--raid-stride", type=int, help="RAID stride in filesystem blocks.")
@click.option("-z", "--undo-file", default="", help="Back up overwritten blocks to this file.")
@timeout_option
@click.pass_obj
def resize_cmd(ctx: E2fsContext, timeout: float | None, **fields: object) -> None:
    """Resize the ext4 filesystem on DEVICE, to SIZE if given.

    Without SIZE the filesystem grows to fill the device.
    """
    options = ResizeOptions(**fields)  # type: ignore[arg-type]
    if options.enable_64bit and options.disable_64bit:
        raise click.UsageError("--enable-64bit and --disable-64bit are mutually exclusive")
    timeout = ctx.timeout if timeout is None else timeout
    run_operation(lambda: ctx.e2fsprogs.resize_filesystem(options, timeout=timeout))
    if not ctx.dry_run:
        user_output(f"Resized filesystem on {options.device}")
