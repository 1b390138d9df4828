"""Argument vectors for each e2fsprogs operation.

These builders are shared by every E2fsprogs implementation so that the real,
dry-run and fake variants agree on exactly what would be executed.
"""

from e2fs.core.args import marshal
from e2fs.core.options import CheckOptions, CreateOptions, ResizeOptions

MKE2FS = "mke2fs"
RESIZE2FS = "resize2fs"
E2FSCK = "e2fsck"


def create_command(options: CreateOptions) -> tuple[str, list[str]]:
    """Return the tool name and arguments for creating an ext4 filesystem."""
    return MKE2FS, ["-q", "-t", "ext4", *marshal(options)]


def resize_command(options: ResizeOptions) -> tuple[str, list[str]]:
    """Return the tool name and arguments for resizing a filesystem."""
    return RESIZE2FS, marshal(options)


def check_command(options: CheckOptions) -> tuple[str, list[str]]:
    """Return the tool name and arguments for checking a filesystem.

    Without an explicit preen (-p) or no-fix (-n) request, -y is prepended so
    that e2fsck answers "yes" to every prompt instead of waiting for input.
    """
    prefix = [] if options.preen or options.no_fix else ["-y"]
    return E2FSCK, [*prefix, *marshal(options)]
