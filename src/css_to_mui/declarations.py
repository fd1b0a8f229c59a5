"""Declaration transpiler: CSS declarations to JSS object entries."""

from __future__ import annotations

from dataclasses import dataclass, field

from css_to_mui.javascript import template_literal
from css_to_mui.lexer import DEFAULT_SPACING_UNIT, hyphen_to_camel_case, lex_value
from css_to_mui.model.stylesheet import Declaration

__all__ = ["DeclarationBlock", "split_mixins", "transpile_declarations"]

DEFAULT_MIXIN_PROPERTY = "-mui-mixins"

_OPENERS = "([{"
_CLOSERS = ")]}"


@dataclass(frozen=True)
class DeclarationBlock:
    """Transpiled declarations of one rule.

    ``entries`` may contain the same key more than once; the emitted object
    literal keeps them all and the last one wins at runtime.
    """

    entries: list[tuple[str, str]] = field(default_factory=list)
    mixins: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries and not self.mixins


def split_mixins(value: str) -> list[str]:
    """Split a mixin list on top-level commas.

    ``theme.a, theme.b(1, 2)`` -> ``["theme.a", "theme.b(1, 2)"]``
    """
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in value:
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        if char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def transpile_declarations(
    declarations: list[Declaration],
    *,
    spacing_unit: str = DEFAULT_SPACING_UNIT,
    mixin_property: str = DEFAULT_MIXIN_PROPERTY,
) -> DeclarationBlock:
    """Transpile *declarations* into ordered JSS entries plus mixin operands."""
    entries: list[tuple[str, str]] = []
    mixins: list[str] = []
    for declaration in declarations:
        if declaration.property == mixin_property:
            mixins.extend(split_mixins(declaration.value))
            continue
        key = hyphen_to_camel_case(declaration.property)
        value = template_literal(lex_value(declaration.value, spacing_unit))
        entries.append((key, value))
    return DeclarationBlock(entries=entries, mixins=mixins)
