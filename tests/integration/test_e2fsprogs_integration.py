"""Integration tests running the real e2fsprogs binaries.

The tools operate on a sparse image file instead of a block device, so no
root privileges, loop devices or mounts are needed. The tests are skipped when
e2fsprogs is not installed.
"""

from pathlib import Path

import pytest

from e2fs.core.e2fsprogs.commands import E2FSCK, MKE2FS, RESIZE2FS
from e2fs.core.e2fsprogs.real import RealE2fsprogs
from e2fs.core.errors import ToolExitError, ToolNotFoundError
from e2fs.core.executable import default_search_path, find_executable
from e2fs.core.options import CheckOptions, CreateOptions, ResizeOptions
from e2fs.core.subprocess import run_tool

DUMPE2FS = "dumpe2fs"


def _have_e2fsprogs() -> bool:
    search_path = default_search_path()
    try:
        for tool in (MKE2FS, RESIZE2FS, E2FSCK, DUMPE2FS):
            find_executable(tool, search_path)
    except ToolNotFoundError:
        return False
    return True


pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not _have_e2fsprogs(), reason="e2fsprogs not installed"),
]

MIB = 1024 * 1024


def _sparse_image(tmp_path: Path, size: int) -> Path:
    image = tmp_path / "disk.img"
    with image.open("wb") as f:
        f.truncate(size)
    return image


def _superblock(image: Path) -> dict[str, str]:
    """Read the superblock summary printed by dumpe2fs -h."""
    dumpe2fs = find_executable(DUMPE2FS, default_search_path())
    output = run_tool(dumpe2fs, ["-h", str(image)], operation_context="dump superblock")
    fields: dict[str, str] = {}
    for line in output.decode("utf-8", errors="replace").splitlines():
        key, sep, value = line.partition(":")
        if sep:
            fields[key.strip()] = value.strip()
    return fields


def _filesystem_bytes(superblock: dict[str, str]) -> int:
    return int(superblock["Block count"]) * int(superblock["Block size"])


def test_create_check_resize_round(tmp_path: Path) -> None:
    image = _sparse_image(tmp_path, 256 * MIB)
    e2fs = RealE2fsprogs(timeout=120)

    e2fs.create_filesystem(CreateOptions(device=str(image), size="64M", label="testvol"))
    e2fs.check_filesystem(CheckOptions(device=str(image), force=True))

    superblock = _superblock(image)
    assert superblock["Filesystem volume name"] == "testvol"
    assert _filesystem_bytes(superblock) == 64 * MIB

    e2fs.resize_filesystem(ResizeOptions(device=str(image), size="128M"))
    e2fs.check_filesystem(CheckOptions(device=str(image), no_fix=True, force=True))

    superblock = _superblock(image)
    assert superblock["Filesystem volume name"] == "testvol"
    assert _filesystem_bytes(superblock) == 128 * MIB
    # resize2fs truncates a regular image file to the new filesystem size
    assert image.stat().st_size == 128 * MIB


def test_shrink_to_minimum(tmp_path: Path) -> None:
    image = _sparse_image(tmp_path, 64 * MIB)
    e2fs = RealE2fsprogs(timeout=120)

    e2fs.create_filesystem(CreateOptions(device=str(image)))
    e2fs.check_filesystem(CheckOptions(device=str(image), force=True))
    e2fs.resize_filesystem(ResizeOptions(device=str(image), shrink=True))
    e2fs.check_filesystem(CheckOptions(device=str(image), preen=True))


def test_check_on_garbage_reports_tool_stderr(tmp_path: Path) -> None:
    image = tmp_path / "garbage.img"
    image.write_bytes(b"\xde\xad\xbe\xef" * 4096)
    e2fs = RealE2fsprogs(timeout=120)

    with pytest.raises(ToolExitError) as exc_info:
        e2fs.check_filesystem(CheckOptions(device=str(image), no_fix=True))

    assert exc_info.value.returncode != 0
    assert "Failed to check filesystem" in str(exc_info.value)
