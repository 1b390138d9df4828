"""Exceptions raised when an e2fsprogs tool cannot be resolved or fails.

Every failure carries the command that was attempted and whatever standard
error text the tool produced, so callers can surface the tool's own complaint
without re-running anything.
"""


class ToolError(RuntimeError):
    """Base class for all e2fsprogs invocation failures.

    Attributes:
        command: Executable and arguments that were (or would have been) run
        stderr: Full captured standard error text (empty if none)
    """

    def __init__(self, message: str, *, command: list[str], stderr: str = "") -> None:
        super().__init__(message)
        self.command = command
        self.stderr = stderr


class ToolNotFoundError(ToolError):
    """No executable with the requested name exists on the search path."""

    def __init__(self, name: str, search_path: str) -> None:
        super().__init__(f"command not found: {name}", command=[name])
        self.name = name
        self.search_path = search_path


class ToolLaunchError(ToolError):
    """The resolved executable could not be started."""


class ToolExitError(ToolError):
    """The tool ran and exited with a non-zero status."""

    def __init__(self, message: str, *, command: list[str], stderr: str, returncode: int) -> None:
        super().__init__(message, command=command, stderr=stderr)
        self.returncode = returncode


class ToolCancelledError(ToolError):
    """The invocation was cancelled or timed out before the tool finished."""

    def __init__(self, message: str, *, command: list[str], stderr: str, reason: str) -> None:
        super().__init__(message, command=command, stderr=stderr)
        self.reason = reason
