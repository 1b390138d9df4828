import click

from e2fs.cli.commands.shared import run_operation, timeout_option
from e2fs.cli.output import user_output
from e2fs.core.context import E2fsContext
from e2fs.core.options import CreateOptions


@click.command("create")
@click.argument("device")
@click.argument("size", required=False, default="")
@click.option("-c", "--check-for-bad-blocks", is_flag=True, help="Check for bad blocks first.")
@click.option("-b", "--block-size", type=int, help="Block size in bytes (1024, 2048, 4096).")
@click.option("-C", "--cluster-size", type=int, help="Cluster size in bytes (bigalloc).")
@click.option("-i", "--bytes-per-inode", type=int, help="Bytes/inode ratio.")
@click.option("-I", "--inode-size", type=int, help="Size of each inode in bytes.")
@click.option("-J", "--journal-options", default="", help="Comma separated journal options.")
@click.option("-G", "--number-of-groups", type=int, help="Block groups per flex_bg group.")
@click.option("-N", "--number-of-inodes", type=int, help="Number of inodes to create.")
@click.option("-d", "--root-directory", default="", help="Copy directory contents into the fs.")
@click.option(
    "-m", "--reserved-blocks-percentage", type=int, help="Percentage reserved for super-user."
)
@click.option("-o", "--creator-os", default="", help="Override creator os.")
@click.option("-g", "--blocks-per-group", type=int, help="Blocks in each block group.")
@click.option("-L", "--label", default="", help="Volume label (max 16 bytes).")
@click.option("-M", "--last-mounted-directory", default="", help="Last mounted directory.")
@click.option("-O", "--features", default="", help="Comma separated filesystem features.")
@click.option("-r", "--filesystem-revision", type=int, help="Filesystem revision level.")
@click.option("-E", "--extended-options", default="", help="Comma separated extended options.")
@click.option("-T", "--usage-type", default="", help="Usage type (floppy, small, default).")
@click.option("-U", "--uuid", default="", help="UUID for the filesystem.")
@click.option(
    "-e",
    "--error-behavior",
    type=click.Choice(["continue", "remount-ro", "panic"]),
    default=None,
    help="Kernel behavior when errors are detected.",
)
@click.option("-z", "--undo-file", default="", help="Back up overwritten blocks to this file.")
@click.option("-j", "--journal", is_flag=True, help="Create an ext3 journal.")
@click.option("-n", "--simulate", "dry_run", is_flag=True, help="Let mke2fs skip the writes.")
@click.option("-D", "--direct-io", is_flag=True, help="Use direct I/O when writing.")
@click.option("-F", "--force", is_flag=True, help="Force creation on any device.")
@click.option("-S", "--write-superblocks", is_flag=True, help="Superblock and descriptors only.")
@timeout_option
@click.pass_obj
def create_cmd(ctx: E2fsContext, timeout: float | None, **fields: object) -> None:
    """Create an ext4 filesystem on DEVICE, optionally SIZE long."""
    if fields["error_behavior"] is None:
        fields["error_behavior"] = ""
    options = CreateOptions(**fields)  # type: ignore[arg-type]
    timeout = ctx.timeout if timeout is None else timeout
    run_operation(lambda: ctx.e2fsprogs.create_filesystem(options, timeout=timeout))
    if not ctx.dry_run:
        user_output(f"Created ext4 filesystem on {options.device}")
