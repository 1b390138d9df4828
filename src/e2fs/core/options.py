"""Option records for mke2fs, resize2fs and e2fsck.

Field comments describe what the tool does with each option; the directive
on each field gives the tool's own flag letter.
"""

from dataclasses import dataclass

from e2fs.core.args import flag, positional


@dataclass(frozen=True)
class CreateOptions:
    """Options for creating an ext4 filesystem with mke2fs."""

    device: str = positional(0)  # Device where the filesystem will be created.
    size: str = positional(1)  # Optional size of the filesystem.
    check_for_bad_blocks: bool = flag("c", default=False)  # Check for bad blocks first.
    block_size: int | None = flag("b", default=None)  # Block size in bytes (1024, 2048, 4096).
    cluster_size: int | None = flag("C", default=None)  # Cluster size in bytes (bigalloc).
    bytes_per_inode: int | None = flag("i", default=None)  # Bytes/inode ratio.
    inode_size: int | None = flag("I", default=None)  # Size of each inode in bytes.
    journal_options: str = flag("J", default="")  # Comma separated journal options.
    number_of_groups: int | None = flag("G", default=None)  # Block groups per flex_bg group.
    number_of_inodes: int | None = flag("N", default=None)  # Override the number of inodes.
    root_directory: str = flag("d", default="")  # Copy directory contents into the filesystem.
    reserved_blocks_percentage: int | None = flag("m", default=None)  # Reserved for super-user.
    creator_os: str = flag("o", default="")  # Override creator os.
    blocks_per_group: int | None = flag("g", default=None)  # Blocks in each block group.
    label: str = flag("L", default="")  # Volume label (max 16 bytes).
    last_mounted_directory: str = flag("M", default="")  # Last mounted directory.
    features: str = flag("O", default="")  # Comma separated filesystem features.
    filesystem_revision: int | None = flag("r", default=None)  # Filesystem revision level.
    extended_options: str = flag("E", default="")  # Comma separated extended options.
    usage_type: str = flag("T", default="")  # Usage type (floppy, small, default).
    uuid: str = flag("U", default="")  # UUID for the filesystem.
    error_behavior: str = flag("e", default="")  # continue, remount-ro or panic.
    undo_file: str = flag("z", default="")  # Back up overwritten blocks to this file.
    journal: bool = flag("j", default=False)  # Create an ext3 journal.
    dry_run: bool = flag("n", default=False)  # Don't actually create the filesystem.
    direct_io: bool = flag("D", default=False)  # Use direct I/O when writing.
    force: bool = flag("F", default=False)  # Force creation on any device.
    write_superblocks: bool = flag("S", default=False)  # Superblock and descriptors only.


@dataclass(frozen=True)
class ResizeOptions:
    """Options for resizing an ext4 filesystem with resize2fs."""

    device: str = positional(0)  # Device containing the filesystem.
    size: str = positional(1)  # Optional new size of the filesystem.
    force: bool = flag("f", default=False)  # Skip safety checks.
    flush: bool = flag("F", default=False)  # Flush the device's buffer cache.
    shrink: bool = flag("M", default=False)  # Shrink to the minimum size.
    enable_64bit: bool = flag("b", default=False)
    disable_64bit: bool = flag("s", default=False)
    raid_stride: int | None = flag("S", default=None)  # RAID stride in filesystem blocks.
    undo_file: str = flag("z", default="")  # Back up overwritten blocks to this file.


@dataclass(frozen=True)
class CheckOptions:
    """Options for checking an ext4 filesystem with e2fsck.

    Unless ``preen`` or ``no_fix`` is set, the check is run with ``-y`` and
    answers "yes" to every repair prompt. This differs from e2fsck's own
    default of asking interactively.
    """

    device: str = positional(0)  # Device containing the filesystem.
    preen: bool = flag("p", default=False)  # Automatically repair the filesystem.
    no_fix: bool = flag("n", default=False)  # Read-only check.
    check_for_bad_blocks: bool = flag("c", default=False)
    append_bad_blocks: bool = flag("k", default=False)  # Keep the existing bad blocks list.
    append_bad_blocks_file: str = flag("l", default="")  # Add bad blocks from file.
    bad_blocks_file: str = flag("L", default="")  # Replace bad blocks list from file.
    force: bool = flag("f", default=False)  # Check even if the filesystem seems clean.
    optimize_directories: bool = flag("D", default=False)
    flush: bool = flag("F", default=False)  # Flush the device's buffer cache.
    superblock: int | None = flag("b", default=None)  # Use alternative superblock.
    blocksize: int | None = flag("B", default=None)  # Block size in bytes.
    external_journal: str = flag("j", default="")  # External journal for the filesystem.
    extended_options: str = flag("E", default="")  # Comma separated extended options.
    undo_file: str = flag("z", default="")  # Back up overwritten blocks to this file.
