"""Value micro-lexer for property values.

Recognised forms, tried in this order at every position:

    10su            custom spacing unit  -> ${theme.spacing.unit * 10}px
    var(--my-var)   root variable        -> ${myVar}
    $(js.code())    escape hatch         -> ${js.code()}

Anything else is literal text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from css_to_mui.errors import FractionalUnitError

__all__ = [
    "CodeFragment",
    "LiteralFragment",
    "ValueFragment",
    "hyphen_to_camel_case",
    "lex_value",
    "variable_name",
]

DEFAULT_SPACING_UNIT = "theme.spacing.unit"
UNIT_SUFFIX = "su"

_CUSTOM_UNIT_RE = re.compile(r"(-?(?=[\d.]*\d)[\d.]+)" + UNIT_SUFFIX)
_HYPHEN_RE = re.compile(r"-([a-z])")
_NEWLINE_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class LiteralFragment:
    """Plain text copied into the value as-is."""

    text: str


@dataclass(frozen=True)
class CodeFragment:
    """Raw JavaScript, optionally followed by literal text (e.g. ``px``)."""

    code: str
    suffix: str = ""


ValueFragment = Union[LiteralFragment, CodeFragment]


def hyphen_to_camel_case(text: str) -> str:
    """Convert ``background-color`` to ``backgroundColor``."""
    return _HYPHEN_RE.sub(lambda m: m.group(1).upper(), text)


def variable_name(name: str) -> str:
    """Convert a custom property name (``--my-var``) to a JS identifier (``myVar``)."""
    if name.startswith("--"):
        name = name[2:]
    return hyphen_to_camel_case(name)


def _consume_custom_unit(
    value: str, pos: int, spacing_unit: str
) -> tuple[CodeFragment, int] | None:
    match = _CUSTOM_UNIT_RE.match(value, pos)
    if not match:
        return None
    number = match.group(1)
    if "." in number:
        raise FractionalUnitError(f"{number}{UNIT_SUFFIX}")
    return CodeFragment(f"{spacing_unit} * {number}", suffix="px"), match.end()


def _consume_variable(value: str, pos: int) -> tuple[CodeFragment, int] | None:
    if not value.startswith("var(", pos):
        return None
    close = value.find(")", pos)
    if close == -1:
        return None
    name = value[pos + len("var("):close].strip()
    return CodeFragment(variable_name(name)), close + 1


def _consume_escape_hatch(value: str, pos: int) -> tuple[CodeFragment, int] | None:
    if not value.startswith("$(", pos):
        return None
    start = pos + 2
    depth = 1
    i = start
    while depth > 0 and i < len(value):
        if value[i] == ")":
            depth -= 1
        elif value[i] == "(":
            depth += 1
        i += 1
    if depth != 0:
        return None
    return CodeFragment(value[start:i - 1]), i


def lex_value(
    value: str, spacing_unit: str = DEFAULT_SPACING_UNIT
) -> list[ValueFragment]:
    """Split a CSS value into literal and code fragments, in source order.

    Raises FractionalUnitError for custom units such as ``1.5su``.
    """
    fragments: list[ValueFragment] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            fragments.append(LiteralFragment(_NEWLINE_RE.sub(" ", "".join(literal))))
            literal.clear()

    pos = 0
    while pos < len(value):
        result = (
            _consume_custom_unit(value, pos, spacing_unit)
            or _consume_variable(value, pos)
            or _consume_escape_hatch(value, pos)
        )
        if result is None:
            literal.append(value[pos])
            pos += 1
            continue
        flush()
        fragment, pos = result
        fragments.append(fragment)

    flush()
    return fragments
