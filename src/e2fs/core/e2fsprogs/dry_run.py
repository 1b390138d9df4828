"""Dry-run wrapper for e2fsprogs operations.

Operations that write to a device print the command they would run instead
of executing it. A read-only check (no_fix) touches nothing and is delegated
to the wrapped implementation.
"""

import threading
from collections.abc import Sequence

from e2fs.cli.output import user_output
from e2fs.core.e2fsprogs.abc import E2fsprogs
from e2fs.core.e2fsprogs.commands import check_command, create_command, resize_command
from e2fs.core.options import CheckOptions, CreateOptions, ResizeOptions


class DryRunE2fsprogs(E2fsprogs):
    """No-op wrapper that prints destructive operations instead of running them.

    Usage:
        real_ops = RealE2fsprogs()
        dry_run_ops = DryRunE2fsprogs(real_ops)

        # Prints "[DRY RUN] Would run: mke2fs -q -t ext4 /dev/loop0"
        dry_run_ops.create_filesystem(CreateOptions(device="/dev/loop0"))
    """

    def __init__(self, wrapped: E2fsprogs) -> None:
        """Create a dry-run wrapper around an E2fsprogs implementation.

        Args:
            wrapped: The implementation to wrap (usually RealE2fsprogs)
        """
        self._wrapped = wrapped

    def create_filesystem(
        self,
        options: CreateOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Print dry-run message instead of creating a filesystem."""
        _print_would_run(*create_command(options))

    def resize_filesystem(
        self,
        options: ResizeOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Print dry-run message instead of resizing a filesystem."""
        _print_would_run(*resize_command(options))

    def check_filesystem(
        self,
        options: CheckOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Delegate read-only checks, print dry-run message for repairing ones."""
        if options.no_fix:
            self._wrapped.check_filesystem(options, timeout=timeout, cancel_event=cancel_event)
            return
        _print_would_run(*check_command(options))


def _print_would_run(tool: str, args: Sequence[str]) -> None:
    user_output(f"[DRY RUN] Would run: {' '.join([tool, *args])}")
