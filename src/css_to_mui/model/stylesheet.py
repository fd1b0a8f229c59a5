"""Stylesheet model: the flat rule list produced by the grammar parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` assignment."""

    property: str
    value: str


@dataclass(frozen=True)
class StyleRule:
    """A plain rule set: one or more selectors sharing a declaration block."""

    selectors: list[str]
    declarations: list[Declaration] = field(default_factory=list)


@dataclass(frozen=True)
class MediaRule:
    """An ``@media`` block holding nested rule sets."""

    condition: str
    rules: list[StyleRule] = field(default_factory=list)


@dataclass(frozen=True)
class Keyframe:
    """One frame of a keyframes block, e.g. ``from`` or ``0%, 100%``."""

    values: list[str]
    declarations: list[Declaration] = field(default_factory=list)


@dataclass(frozen=True)
class KeyframesRule:
    """An ``@keyframes`` block, optionally vendor prefixed (``-webkit-``)."""

    name: str
    frames: list[Keyframe] = field(default_factory=list)
    vendor: str | None = None


Rule = Union[StyleRule, MediaRule, KeyframesRule]


@dataclass(frozen=True)
class Stylesheet:
    """All top-level rules of a source document, in source order."""

    rules: list[Rule]
