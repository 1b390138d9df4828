"""Run a resolved tool and turn every failure into a ToolError.

Standard output and standard error are captured separately. On success the
tool's stdout is returned and its stderr dropped. On failure the raised error
embeds the command, the cause and the full stderr text, so callers can show
the tool's own diagnostics.
"""

import logging
import subprocess
import threading
import time
from collections.abc import Sequence
from pathlib import Path

from e2fs.core.errors import ToolCancelledError, ToolExitError, ToolLaunchError

logger = logging.getLogger(__name__)

# How often a running tool is checked for cancellation
POLL_INTERVAL = 0.1


def run_tool(
    executable: Path | str,
    args: Sequence[str],
    *,
    operation_context: str,
    timeout: float | None = None,
    cancel_event: threading.Event | None = None,
) -> bytes:
    """Execute a tool and return its standard output.

    Args:
        executable: Path to the resolved executable
        args: Arguments passed to the executable
        operation_context: Human-readable description of the operation,
            used as "Failed to <operation_context>" in error messages
        timeout: Seconds to wait before killing the tool (default: no limit)
        cancel_event: Event that, once set, kills the tool

    Returns:
        Captured standard output bytes

    Raises:
        ToolLaunchError: If the executable could not be started
        ToolExitError: If the tool exited with a non-zero status
        ToolCancelledError: If cancel_event was set or timeout elapsed
    """
    cmd = [str(executable), *args]

    if cancel_event is not None and cancel_event.is_set():
        raise ToolCancelledError(
            _format_error(operation_context, cmd, "Cancelled before start", ""),
            command=cmd,
            stderr="",
            reason="cancelled",
        )

    logger.debug("Running %s", _format_command(cmd))
    try:
        proc = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise ToolLaunchError(
            _format_error(operation_context, cmd, f"Launch error: {e}", ""),
            command=cmd,
        ) from e

    with proc:
        try:
            stdout, stderr, reason = _wait(proc, timeout, cancel_event)
        except BaseException:
            proc.kill()
            raise

    stderr_text = stderr.decode("utf-8", errors="replace")

    if reason is not None:
        logger.debug("%s %s", _format_command(cmd), reason)
        raise ToolCancelledError(
            _format_error(operation_context, cmd, f"Process {reason}", stderr_text),
            command=cmd,
            stderr=stderr_text,
            reason=reason,
        )

    if proc.returncode != 0:
        logger.debug("%s exited with %d", _format_command(cmd), proc.returncode)
        raise ToolExitError(
            _format_error(operation_context, cmd, f"Exit code: {proc.returncode}", stderr_text),
            command=cmd,
            stderr=stderr_text,
            returncode=proc.returncode,
        )

    if stderr_text.strip():
        logger.debug("Discarding stderr from %s: %s", cmd[0], stderr_text.strip())
    return stdout


def _wait(
    proc: subprocess.Popen[bytes],
    timeout: float | None,
    cancel_event: threading.Event | None,
) -> tuple[bytes, bytes, str | None]:
    """Collect output until the process exits, is cancelled, or times out.

    Returns (stdout, stderr, reason) where reason is None when the process
    exited on its own. A cancelled process is killed and reaped before
    returning.
    """
    if cancel_event is None and timeout is None:
        stdout, stderr = proc.communicate()
        return stdout, stderr, None

    deadline = None if timeout is None else time.monotonic() + timeout
    reason: str | None = None
    while True:
        wait = POLL_INTERVAL if cancel_event is not None else None
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                reason = "timed out"
                break
            wait = remaining if wait is None else min(wait, remaining)

        try:
            stdout, stderr = proc.communicate(timeout=wait)
            return stdout, stderr, None
        except subprocess.TimeoutExpired:
            # communicate() keeps partial output across retries
            if cancel_event is not None and cancel_event.is_set():
                reason = "cancelled"
                break

    proc.kill()
    stdout, stderr = proc.communicate()
    return stdout, stderr, reason


def _format_command(cmd: Sequence[str]) -> str:
    return " ".join(str(arg) for arg in cmd)


def _format_error(operation_context: str, cmd: Sequence[str], detail: str, stderr: str) -> str:
    error_msg = f"Failed to {operation_context}"
    error_msg += f"\nCommand: {_format_command(cmd)}"
    error_msg += f"\n{detail}"

    stderr_stripped = stderr.strip()
    if stderr_stripped:
        error_msg += f"\nstderr: {stderr_stripped}"

    return error_msg
