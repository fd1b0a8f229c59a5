"""Lark Transformer that converts a stylesheet parse tree into a Stylesheet model."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
)

from css_to_mui.diagnostic import render_syntax_error
from css_to_mui.errors import ParseError
from css_to_mui.model.stylesheet import (
    Declaration,
    Keyframe,
    KeyframesRule,
    MediaRule,
    StyleRule,
    Stylesheet,
)

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")
_AT_KEYWORD_RE = re.compile(r"@-?[_a-zA-Z][_a-zA-Z0-9-]*")
_SUPPORTED_AT_RULE_RE = re.compile(r"@media|@(-[a-zA-Z]+-)?keyframes")

# Human-readable names for terminals reported in syntax errors.
_TERMINAL_DESCRIPTIONS: dict[str, str] = {
    "COLON": "':'",
    "SEMICOLON": "';'",
    "LBRACE": "'{'",
    "RBRACE": "'}'",
    "PROPERTY": "a property name",
    "VALUE": "a value",
    "PRELUDE": "a selector",
    "_MEDIA": "'@media'",
    "KEYFRAMES": "'@keyframes'",
    "$END": "end of input",
}


def _clean(raw: Token | str) -> str:
    """Strip comments and surrounding whitespace from raw prelude/value text."""
    return _COMMENT_RE.sub("", str(raw)).strip()


def _split_list(raw: str) -> list[str]:
    """Split on commas that are not nested inside parentheses or brackets."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, char in enumerate(raw):
        if char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            parts.append(raw[start:i])
            start = i + 1
    parts.append(raw[start:])
    return [part.strip() for part in parts if part.strip()]


def _split_selectors(prelude: Token) -> list[str]:
    return [_WHITESPACE_RE.sub(" ", s) for s in _split_list(_clean(prelude))]


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Stylesheet model objects."""

    def declaration(self, items: list[Token]) -> Declaration:
        prop, value = items
        return Declaration(property=str(prop).strip(), value=_clean(value))

    def declaration_list(self, items: list[Declaration]) -> list[Declaration]:
        return [item for item in items if isinstance(item, Declaration)]

    def rule_set(self, items: list[object]) -> StyleRule:
        prelude, declarations = items
        return StyleRule(
            selectors=_split_selectors(prelude),  # type: ignore[arg-type]
            declarations=declarations,  # type: ignore[arg-type]
        )

    def media_rule(self, items: list[object]) -> MediaRule:
        prelude, *rules = items
        return MediaRule(condition=_clean(prelude), rules=rules)  # type: ignore[arg-type]

    def keyframe(self, items: list[object]) -> Keyframe:
        prelude, declarations = items
        return Keyframe(
            values=_split_list(_clean(prelude)),  # type: ignore[arg-type]
            declarations=declarations,  # type: ignore[arg-type]
        )

    def keyframes_rule(self, items: list[object]) -> KeyframesRule:
        keyword, name, *frames = items
        # "@-webkit-keyframes" -> "-webkit-"
        vendor = str(keyword)[1:-len("keyframes")] or None
        return KeyframesRule(name=_clean(name), frames=frames, vendor=vendor)  # type: ignore[arg-type]

    def start(self, items: list[object]) -> Stylesheet:
        return Stylesheet(rules=list(items))  # type: ignore[arg-type]


@lru_cache(maxsize=None)
def _get_parser() -> Lark:
    logger.debug("Building stylesheet parser from %s", GRAMMAR_PATH)
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start="start",
    )


def _describe(names: object) -> str:
    descriptions = sorted(
        {_TERMINAL_DESCRIPTIONS.get(str(n), str(n).lower()) for n in (names or ())}  # type: ignore[union-attr]
    )
    return " or ".join(descriptions)


def _shorten(text: str, limit: int = 30) -> str:
    text = text.split("\n", 1)[0]
    if len(text) > limit:
        text = text[:limit] + "..."
    return repr(text)


def _reason(exc: UnexpectedInput, source: str) -> str:
    """Summarise a Lark exception as ``unexpected X, expected Y``.

    Failures at an at-rule other than @media and @keyframes are reported
    by the at-rule's name instead.
    """
    pos = getattr(exc, "pos_in_stream", None)
    if isinstance(pos, int):
        match = _AT_KEYWORD_RE.match(source, pos)
        if match and not _SUPPORTED_AT_RULE_RE.fullmatch(match.group(0)):
            return f"unsupported at-rule {match.group(0)}"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            found = "end of input"
        else:
            found = _shorten(str(exc.token))
        expected = exc.expected
    elif isinstance(exc, UnexpectedCharacters):
        found = _shorten(exc.char)
        expected = exc.allowed
    elif isinstance(exc, UnexpectedEOF):
        found = "end of input"
        expected = exc.expected
    else:
        return str(exc)
    described = _describe(expected)
    if described:
        return f"unexpected {found}, expected {described}"
    return f"unexpected {found}"


def _position(exc: UnexpectedInput, source: str) -> tuple[int, int]:
    line = getattr(exc, "line", None)
    column = getattr(exc, "column", None)
    if not isinstance(line, int) or line < 1:
        lines = source.split("\n")
        return len(lines), len(lines[-1]) + 1
    if not isinstance(column, int) or column < 1:
        column = 1
    return line, column


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet source into a Stylesheet model.

    Raises ParseError, whose message is a source excerpt pointing at the
    failure.
    """
    try:
        tree = _get_parser().parse(source)
    except UnexpectedInput as e:
        line, column = _position(e, source)
        reason = _reason(e, source)
        raise ParseError(
            render_syntax_error(source, line, column, reason),
            line=line,
            column=column,
            reason=reason,
        ) from e
    return StylesheetTransformer().transform(tree)
