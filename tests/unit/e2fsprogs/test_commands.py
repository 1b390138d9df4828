"""Tests for the argument vectors of each e2fsprogs operation."""

from e2fs.core.e2fsprogs.commands import (
    E2FSCK,
    MKE2FS,
    RESIZE2FS,
    check_command,
    create_command,
    resize_command,
)
from e2fs.core.options import CheckOptions, CreateOptions, ResizeOptions


def test_create_prefixes_quiet_and_ext4_type() -> None:
    tool, args = create_command(CreateOptions(device="/dev/loop0", label="testvol"))

    assert tool == MKE2FS
    assert args == ["-q", "-t", "ext4", "-L", "testvol", "/dev/loop0"]


def test_create_with_size_puts_size_last() -> None:
    _, args = create_command(CreateOptions(device="/dev/loop0", size="100M", force=True))

    assert args == ["-q", "-t", "ext4", "-F", "/dev/loop0", "100M"]


def test_resize_has_no_fixed_prefix() -> None:
    tool, args = resize_command(ResizeOptions(device="/dev/loop0", shrink=True))

    assert tool == RESIZE2FS
    assert args == ["-M", "/dev/loop0"]


def test_resize_with_size() -> None:
    _, args = resize_command(ResizeOptions(device="/dev/loop0", size="500M"))

    assert args == ["/dev/loop0", "500M"]


def test_check_auto_confirms_without_preen_or_no_fix() -> None:
    tool, args = check_command(CheckOptions(device="/dev/loop0", force=True))

    assert tool == E2FSCK
    assert args == ["-y", "-f", "/dev/loop0"]


def test_check_with_preen_does_not_auto_confirm() -> None:
    _, args = check_command(CheckOptions(device="/dev/loop0", preen=True))

    assert args == ["-p", "/dev/loop0"]


def test_check_with_no_fix_does_not_auto_confirm() -> None:
    _, args = check_command(CheckOptions(device="/dev/loop0", no_fix=True))

    assert args == ["-n", "/dev/loop0"]
    assert "-y" not in args
