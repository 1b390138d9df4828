"""e2fsprogs operations subpackage.

This subpackage provides an abstraction over mke2fs, resize2fs and e2fsck
with support for testing via fakes and dry-run via wrappers.
"""

from e2fs.core.e2fsprogs.abc import E2fsprogs
from e2fs.core.e2fsprogs.commands import check_command, create_command, resize_command
from e2fs.core.e2fsprogs.dry_run import DryRunE2fsprogs
from e2fs.core.e2fsprogs.fake import FakeE2fsprogs
from e2fs.core.e2fsprogs.real import RealE2fsprogs

__all__ = [
    "E2fsprogs",
    "RealE2fsprogs",
    "DryRunE2fsprogs",
    "FakeE2fsprogs",
    "create_command",
    "resize_command",
    "check_command",
]
