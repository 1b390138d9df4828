"""Render option dataclasses into command-line argument vectors.

Each field of an option record declares how it is rendered via its
``dataclasses.field`` metadata:

- ``positional(index)``: the value is emitted as a bare operand. Operands are
  emitted after all flags, lowest index first, and skipped when empty.
- ``flag(name, default)``: the value is emitted as ``-<name>`` (booleans) or
  ``-<name> <value>`` (strings and optional integers), but only when it
  differs from "not set": ``False``, ``""`` or ``None``.

Example:
    >>> @dataclass(frozen=True)
    ... class LabelOptions:
    ...     device: str = positional(0)
    ...     label: str = flag("L", default="")
    ...     force: bool = flag("f", default=False)
    >>> marshal(LabelOptions(device="/dev/sda1", label="root"))
    ['-L', 'root', '/dev/sda1']
"""

import dataclasses
import functools
from dataclasses import dataclass
from typing import Any

_DIRECTIVE_KEY = "e2fs.directive"


@dataclass(frozen=True)
class Positional:
    """Field rendered as a bare operand at a fixed position."""

    index: int


@dataclass(frozen=True)
class Flag:
    """Field rendered as a short ``-<name>`` option."""

    name: str


Directive = Positional | Flag


def positional(index: int, *, default: str | None = "") -> Any:
    """Declare a dataclass field rendered as the operand at ``index``."""
    return dataclasses.field(default=default, metadata={_DIRECTIVE_KEY: Positional(index)})


def flag(name: str, *, default: bool | int | str | None) -> Any:
    """Declare a dataclass field rendered as the short option ``-<name>``."""
    return dataclasses.field(default=default, metadata={_DIRECTIVE_KEY: Flag(name)})


@functools.cache
def directive_table(cls: type) -> tuple[tuple[str, Directive], ...]:
    """Build the rendering table for an option dataclass.

    The table lists flag fields in declaration order followed by positional
    fields sorted by index. It is computed once per class.

    Raises:
        TypeError: If cls is not a dataclass, a field has no directive, or the
            positional indices are not 0, 1, ... without gaps
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a dataclass")

    flags: list[tuple[str, Directive]] = []
    positionals: list[tuple[str, Positional]] = []
    for field in dataclasses.fields(cls):
        directive = field.metadata.get(_DIRECTIVE_KEY)
        if isinstance(directive, Positional):
            positionals.append((field.name, directive))
        elif isinstance(directive, Flag):
            flags.append((field.name, directive))
        else:
            raise TypeError(f"{cls.__name__}.{field.name} has no argument directive")

    positionals.sort(key=lambda entry: entry[1].index)
    indices = [directive.index for _, directive in positionals]
    if indices != list(range(len(indices))):
        raise TypeError(f"{cls.__name__} positional indices must be contiguous from 0: {indices}")

    return (*flags, *positionals)


def marshal(options: Any) -> list[str]:
    """Render an option dataclass instance into argument tokens.

    Args:
        options: Instance of a dataclass whose fields all carry directives

    Returns:
        Flag tokens in declaration order followed by positional operands.
        Empty when every field is unset.

    Raises:
        TypeError: If options is not a dataclass instance or a field holds a
            value of an unsupported type
    """
    if isinstance(options, type) or not dataclasses.is_dataclass(options):
        raise TypeError(f"expected a dataclass instance, got {type(options).__name__}")

    cls = type(options)
    tokens: list[str] = []
    for name, directive in directive_table(cls):
        value = getattr(options, name)
        if isinstance(directive, Positional):
            tokens.extend(_render_positional(cls, name, value))
        else:
            tokens.extend(_render_flag(cls, name, directive.name, value))
    return tokens


def _render_positional(cls: type, name: str, value: Any) -> list[str]:
    if value is None or value == "":
        return []
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"{cls.__name__}.{name}: unsupported operand type {type(value).__name__}")
    return [str(value)]


def _render_flag(cls: type, name: str, flag_name: str, value: Any) -> list[str]:
    # bool before int: True is an int
    if isinstance(value, bool):
        return [f"-{flag_name}"] if value else []
    if value is None:
        return []
    if isinstance(value, int):
        return [f"-{flag_name}", str(value)]
    if isinstance(value, str):
        return [f"-{flag_name}", value] if value else []
    raise TypeError(f"{cls.__name__}.{name}: unsupported flag type {type(value).__name__}")
