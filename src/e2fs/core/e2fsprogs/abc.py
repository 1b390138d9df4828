"""e2fsprogs operations interface.

This module defines the abstract interface for filesystem maintenance
operations, enabling dependency injection: the real implementation runs the
e2fsprogs binaries, the dry-run wrapper prints what would run, and the fake
records calls in memory for tests.
"""

import threading
from abc import ABC, abstractmethod

from e2fs.core.options import CheckOptions, CreateOptions, ResizeOptions


class E2fsprogs(ABC):
    """Abstract interface for e2fsprogs operations.

    Every operation either completes or raises; there is no partial success.
    Callers are responsible for not running two operations against the same
    device at once.
    """

    @abstractmethod
    def create_filesystem(
        self,
        options: CreateOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Create an ext4 filesystem with mke2fs.

        Args:
            options: mke2fs options; device is required by the tool
            timeout: Seconds before the tool is killed (overrides client default)
            cancel_event: Event that kills the tool once set

        Raises:
            ToolError: If mke2fs cannot be found, started, or fails
        """
        ...

    @abstractmethod
    def resize_filesystem(
        self,
        options: ResizeOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Resize an ext4 filesystem with resize2fs.

        Raises:
            ToolError: If resize2fs cannot be found, started, or fails
        """
        ...

    @abstractmethod
    def check_filesystem(
        self,
        options: CheckOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Check an ext4 filesystem with e2fsck.

        Unless options.preen or options.no_fix is set, e2fsck runs with -y and
        applies every repair it proposes.

        Raises:
            ToolError: If e2fsck cannot be found, started, or fails
        """
        ...
