"""Fake e2fsprogs operations for testing without the real binaries.

No processes are spawned: every call is recorded as the (tool, args) pair the
real implementation would have executed.
"""

import threading

from e2fs.core.e2fsprogs.abc import E2fsprogs
from e2fs.core.e2fsprogs.commands import check_command, create_command, resize_command
from e2fs.core.errors import ToolError
from e2fs.core.options import CheckOptions, CreateOptions, ResizeOptions


class FakeE2fsprogs(E2fsprogs):
    """In-memory fake e2fsprogs for unit testing.

    All state is provided via constructor or captured during execution.

    Example:
        fake = FakeE2fsprogs()
        fake.resize_filesystem(ResizeOptions(device="/dev/loop0", shrink=True))
        assert fake.calls == [("resize2fs", ["-M", "/dev/loop0"])]
    """

    def __init__(self, *, error: ToolError | None = None) -> None:
        """Create a fake.

        Args:
            error: If given, every operation records its call and then raises it
        """
        self._error = error
        self._calls: list[tuple[str, list[str]]] = []
        self._timeouts: list[float | None] = []

    @property
    def calls(self) -> list[tuple[str, list[str]]]:
        """(tool, args) pairs in call order. For test assertions only."""
        return self._calls

    @property
    def timeouts(self) -> list[float | None]:
        """Timeout passed to each call. For test assertions only."""
        return self._timeouts

    def create_filesystem(
        self,
        options: CreateOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self._record(create_command(options), timeout)

    def resize_filesystem(
        self,
        options: ResizeOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self._record(resize_command(options), timeout)

    def check_filesystem(
        self,
        options: CheckOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self._record(check_command(options), timeout)

    def _record(self, command: tuple[str, list[str]], timeout: float | None) -> None:
        self._calls.append(command)
        self._timeouts.append(timeout)
        if self._error is not None:
            raise self._error
