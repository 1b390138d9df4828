"""Locate e2fsprogs executables on a constrained search path.

e2fsprogs tools usually live in /sbin or /usr/sbin, which are often missing
from an unprivileged user's PATH. The search path used here is the inherited
PATH followed by any configured directories, with the system directories
always appended last.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from e2fs.core.errors import ToolNotFoundError

logger = logging.getLogger(__name__)

SYSTEM_DIRS = ("/sbin", "/usr/sbin")


def default_search_path(
    environ: Mapping[str, str] | None = None,
    extra_dirs: Iterable[str] = (),
) -> str:
    """Build the search path used to resolve tool names.

    Args:
        environ: Environment to read PATH from (default: os.environ)
        extra_dirs: Configured directories searched after PATH

    Returns:
        os.pathsep-joined directory list ending with SYSTEM_DIRS
    """
    env = os.environ if environ is None else environ
    entries: list[str] = []
    inherited = env.get("PATH", "")
    if inherited:
        entries.append(inherited)
    entries.extend(extra_dirs)
    entries.extend(SYSTEM_DIRS)
    return os.pathsep.join(entries)


def find_executable(name: str, search_path: str) -> Path:
    """Return the first regular file called name in search_path.

    An empty entry in search_path stands for the current directory.

    Raises:
        ToolNotFoundError: If no directory on the search path contains name
    """
    for directory in search_path.split(os.pathsep):
        if not directory:
            directory = "."
        candidate = Path(os.path.normpath(directory)) / name
        if candidate.is_file():
            logger.debug("Resolved %s to %s", name, candidate)
            return candidate

    logger.debug("Could not resolve %s on %s", name, search_path)
    raise ToolNotFoundError(name, search_path)
