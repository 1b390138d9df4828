"""Tests for rendering option dataclasses into argument vectors."""

from dataclasses import dataclass

import pytest

from e2fs.core.args import Flag, Positional, directive_table, flag, marshal, positional


@dataclass(frozen=True)
class SampleOptions:
    source: str = positional(0)
    target: str = positional(1)
    verbose: bool = flag("v", default=False)
    count: int | None = flag("c", default=None)
    name: str = flag("n", default="")


@dataclass(frozen=True)
class FlagsOnly:
    quiet: bool = flag("q", default=False)
    level: int | None = flag("l", default=None)


@dataclass(frozen=True)
class GappedPositionals:
    first: str = positional(0)
    third: str = positional(2)


@dataclass(frozen=True)
class MissingDirective:
    plain: str = ""


@dataclass(frozen=True)
class ReversedPositionals:
    second: str = positional(1)
    first: str = positional(0)


def test_all_defaults_render_nothing() -> None:
    assert marshal(SampleOptions()) == []
    assert marshal(FlagsOnly()) == []


def test_true_bool_renders_single_token() -> None:
    assert marshal(FlagsOnly(quiet=True)) == ["-q"]


def test_false_bool_renders_nothing() -> None:
    assert marshal(FlagsOnly(quiet=False, level=3)) == ["-l", "3"]


def test_present_zero_int_renders_flag_and_value() -> None:
    """An optional int set to 0 is present, not absent."""
    assert marshal(FlagsOnly(level=0)) == ["-l", "0"]


def test_negative_int_renders_decimal() -> None:
    assert marshal(FlagsOnly(level=-2)) == ["-l", "-2"]


def test_non_empty_string_renders_flag_and_raw_value() -> None:
    assert marshal(SampleOptions(name="has spaces, commas")) == ["-n", "has spaces, commas"]


def test_flags_precede_positionals() -> None:
    options = SampleOptions(source="src", target="dst", verbose=True, count=4, name="x")

    assert marshal(options) == ["-v", "-c", "4", "-n", "x", "src", "dst"]


def test_flags_follow_declaration_order() -> None:
    options = SampleOptions(name="x", verbose=True)

    assert marshal(options) == ["-v", "-n", "x"]


def test_empty_positional_is_skipped() -> None:
    assert marshal(SampleOptions(source="src")) == ["src"]
    assert marshal(SampleOptions(target="dst")) == ["dst"]


def test_positionals_render_in_index_order_not_declaration_order() -> None:
    assert marshal(ReversedPositionals(second="b", first="a")) == ["a", "b"]


def test_marshal_is_deterministic() -> None:
    options = SampleOptions(source="src", target="dst", verbose=True, count=0, name="x")

    assert marshal(options) == marshal(options)
    assert marshal(options) == marshal(
        SampleOptions(source="src", target="dst", verbose=True, count=0, name="x")
    )


def test_directive_table_is_built_once_per_class() -> None:
    assert directive_table(SampleOptions) is directive_table(SampleOptions)


def test_directive_table_lists_flags_then_positionals() -> None:
    table = directive_table(SampleOptions)

    assert table == (
        ("verbose", Flag("v")),
        ("count", Flag("c")),
        ("name", Flag("n")),
        ("source", Positional(0)),
        ("target", Positional(1)),
    )


def test_gap_in_positional_indices_is_rejected() -> None:
    with pytest.raises(TypeError, match="contiguous"):
        marshal(GappedPositionals(first="a", third="c"))


def test_field_without_directive_is_rejected() -> None:
    with pytest.raises(TypeError, match="has no argument directive"):
        marshal(MissingDirective(plain="x"))


def test_non_dataclass_is_rejected() -> None:
    with pytest.raises(TypeError, match="expected a dataclass instance"):
        marshal({"verbose": True})


def test_dataclass_type_instead_of_instance_is_rejected() -> None:
    with pytest.raises(TypeError, match="expected a dataclass instance"):
        marshal(SampleOptions)


def test_unsupported_flag_value_type_is_rejected() -> None:
    with pytest.raises(TypeError, match=r"SampleOptions\.count: unsupported flag type float"):
        marshal(SampleOptions(count=1.5))  # type: ignore[arg-type]
