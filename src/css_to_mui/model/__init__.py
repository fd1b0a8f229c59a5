from css_to_mui.model.stylesheet import (
    Declaration,
    Keyframe,
    KeyframesRule,
    MediaRule,
    StyleRule,
    Stylesheet,
)
from css_to_mui.model.tree import (
    ChildRule,
    ParsedKeyframes,
    ParsedMedia,
    ParsedRule,
    RuleTree,
)

__all__ = [
    "Declaration",
    "Keyframe",
    "KeyframesRule",
    "MediaRule",
    "StyleRule",
    "Stylesheet",
    "ChildRule",
    "ParsedKeyframes",
    "ParsedMedia",
    "ParsedRule",
    "RuleTree",
]
