import click

from e2fs.cli.commands.shared import run_operation, timeout_option
from e2fs.cli.output import user_output
from e2fs.core.context import E2fsContext
from e2fs.core.options import CheckOptions


@click.command("check")
@click.argument("device")
@click.option("-p", "--preen", is_flag=True, help="Automatically apply safe repairs.")
@click.option("-n", "--no-fix", is_flag=True, help="Read-only check.")
@click.option("-c", "--check-for-bad-blocks", is_flag=True, help="Check for bad blocks.")
@click.option("-k", "--append-bad-blocks", is_flag=True, help="Keep the existing bad blocks.")
@click.option("-l", "--append-bad-blocks-file", default="", help="Add bad blocks from file.")
@click.option("-L", "--bad-blocks-file", default="", help="Replace bad blocks list from file.")
@click.option("-f", "--force", is_flag=True, help="Check even if the filesystem seems clean.")
@click.option("-D", "--optimize-directories", is_flag=True, help="Optimize directories.")
@click.option("-F", "--flush", is_flag=True, help="Flush the device's buffer cache.")
@click.option("-b", "--superblock", type=int, help="Use alternative superblock.")
@click.option("-B", "--blocksize", type=int, help="Block size in bytes.")
@click.option("-j", "--external-journal", default="", help="External journal for the fs.")
@click.option("-E", "--extended-options", default="", help="Comma separated extended options.")
@click.option("-z", "--undo-file", default="", help="Back up overwritten blocks to this file.")
@timeout_option
@click.pass_obj
def check_cmd(ctx: E2fsContext, timeout: float | None, **fields: object) -> None:
    """Check the ext4 filesystem on DEVICE.

    Unless --preen or --no-fix is given, e2fsck runs with -y and applies
    every repair it proposes without asking.
    """
    options = CheckOptions(**fields)  # type: ignore[arg-type]
    if options.preen and options.no_fix:
        raise click.UsageError("--preen and --no-fix are mutually exclusive")
    timeout = ctx.timeout if timeout is None else timeout
    run_operation(lambda: ctx.e2fsprogs.check_filesystem(options, timeout=timeout))
    if not ctx.dry_run or options.no_fix:
        user_output(f"Checked filesystem on {options.device}")
