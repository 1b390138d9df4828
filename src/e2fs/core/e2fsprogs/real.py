"""Production e2fsprogs implementation running the real binaries."""

import logging
import threading

from e2fs.core.e2fsprogs.abc import E2fsprogs
from e2fs.core.e2fsprogs.commands import check_command, create_command, resize_command
from e2fs.core.executable import default_search_path, find_executable
from e2fs.core.options import CheckOptions, CreateOptions, ResizeOptions
from e2fs.core.subprocess import run_tool

logger = logging.getLogger(__name__)


class RealE2fsprogs(E2fsprogs):
    """Runs mke2fs, resize2fs and e2fsck as child processes.

    The search path is fixed when the client is constructed and never changes
    afterwards, so one instance can be shared between threads.

    Example:
        e2fs = RealE2fsprogs()
        e2fs.create_filesystem(CreateOptions(device="/dev/loop0", label="data"))
    """

    def __init__(self, search_path: str | None = None, timeout: float | None = None) -> None:
        """Create a client.

        Args:
            search_path: os.pathsep-separated directories to resolve tools in
                (default: PATH plus /sbin and /usr/sbin)
            timeout: Default seconds before a tool is killed (default: no limit)
        """
        self._search_path = default_search_path() if search_path is None else search_path
        self._timeout = timeout

    @property
    def search_path(self) -> str:
        return self._search_path

    def create_filesystem(
        self,
        options: CreateOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        tool, args = create_command(options)
        self._run(tool, args, f"create filesystem on {options.device}", timeout, cancel_event)

    def resize_filesystem(
        self,
        options: ResizeOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        tool, args = resize_command(options)
        self._run(tool, args, f"resize filesystem on {options.device}", timeout, cancel_event)

    def check_filesystem(
        self,
        options: CheckOptions,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        tool, args = check_command(options)
        self._run(tool, args, f"check filesystem on {options.device}", timeout, cancel_event)

    def _run(
        self,
        tool: str,
        args: list[str],
        operation_context: str,
        timeout: float | None,
        cancel_event: threading.Event | None,
    ) -> bytes:
        executable = find_executable(tool, self._search_path)
        logger.debug("%s: %s %s", operation_context, executable, args)
        return run_tool(
            executable,
            args,
            operation_context=operation_context,
            timeout=self._timeout if timeout is None else timeout,
            cancel_event=cancel_event,
        )
