"""Typed Python client for the e2fsprogs filesystem tools."""

from e2fs.core.e2fsprogs import DryRunE2fsprogs, E2fsprogs, FakeE2fsprogs, RealE2fsprogs
from e2fs.core.errors import (
    ToolCancelledError,
    ToolError,
    ToolExitError,
    ToolLaunchError,
    ToolNotFoundError,
)
from e2fs.core.options import CheckOptions, CreateOptions, ResizeOptions

__all__ = [
    "CheckOptions",
    "CreateOptions",
    "DryRunE2fsprogs",
    "E2fsprogs",
    "FakeE2fsprogs",
    "RealE2fsprogs",
    "ResizeOptions",
    "ToolCancelledError",
    "ToolError",
    "ToolExitError",
    "ToolLaunchError",
    "ToolNotFoundError",
]
