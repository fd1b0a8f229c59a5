"""Helpers for rendering JavaScript literals."""

from __future__ import annotations

import re
from collections.abc import Iterable

from css_to_mui.lexer import CodeFragment, LiteralFragment, ValueFragment

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def string_literal(text: str) -> str:
    """Single-quoted JS string literal."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def object_key(name: str) -> str:
    """Render *name* as an object literal key, quoting only when needed."""
    if is_identifier(name):
        return name
    return string_literal(name)


def _escape_template_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def template_literal(fragments: Iterable[ValueFragment]) -> str:
    """Join value fragments into a single template literal.

    ``[LiteralFragment("0 "), CodeFragment("theme.spacing.unit * 2", "px")]``
    renders as the template literal ``0 ${theme.spacing.unit * 2}px``.
    """
    parts: list[str] = []
    for fragment in fragments:
        if isinstance(fragment, LiteralFragment):
            parts.append(_escape_template_text(fragment.text))
        elif isinstance(fragment, CodeFragment):
            parts.append("${" + fragment.code + "}")
            parts.append(_escape_template_text(fragment.suffix))
        else:
            raise TypeError(f"Unknown value fragment: {fragment!r}")
    return "`" + "".join(parts) + "`"
