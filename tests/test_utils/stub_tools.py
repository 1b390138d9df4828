"""Stand-in executables for exercising the real process plumbing.

Stub tools are tiny POSIX shell scripts written into a temporary directory.
They let tests run RealE2fsprogs and run_tool end to end without e2fsprogs
installed and without touching any block device.
"""

import stat
from pathlib import Path


def write_stub(directory: Path, name: str, body: str) -> Path:
    """Write an executable shell script and return its path.

    Args:
        directory: Directory to create the script in (created if missing)
        name: File name of the script, e.g. "mke2fs"
        body: Shell commands run by the script
    """
    directory.mkdir(parents=True, exist_ok=True)
    script = directory / name
    script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def write_recording_stub(directory: Path, name: str) -> Path:
    """Write a stub that records its arguments, one per line, and exits 0.

    The arguments are written to "<name>.args" next to the script; read them
    back with recorded_args().
    """
    record = directory / f"{name}.args"
    return write_stub(directory, name, f"printf '%s\\n' \"$@\" > '{record}'")


def recorded_args(directory: Path, name: str) -> list[str]:
    """Return the arguments captured by a recording stub's last run."""
    return (directory / f"{name}.args").read_text(encoding="utf-8").splitlines()
