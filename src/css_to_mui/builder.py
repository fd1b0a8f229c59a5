"""Rule tree builder: restructures the flat rule list for emission.

Compound and descendant selectors are split on their leading class:

    .a:hover       -> rule ".a", child ":hover"
    .a.b           -> rule ".b" (empty), rule ".a", child ".b"
    .a .b:hover    -> rule ".b" (empty), rule ".a", child " .b:hover"

Classes referenced only inside a child selector still get their own
(possibly empty) entry so the generated ``$b`` references resolve.
"""

from __future__ import annotations

import logging
import re

from css_to_mui.errors import InvalidMediaConditionError, UnsupportedSelectorError
from css_to_mui.model.stylesheet import (
    Declaration,
    KeyframesRule,
    MediaRule,
    StyleRule,
    Stylesheet,
)
from css_to_mui.model.tree import ParsedKeyframes, ParsedMedia, ParsedRule, RuleTree

__all__ = ["CLASS_TOKEN", "build_rule_tree", "build_rules", "media_expression"]

logger = logging.getLogger(__name__)

CLASS_TOKEN = r"\.-?[_a-zA-Z]+[_a-zA-Z0-9-]*"

_LEADING_CLASS_RE = re.compile(rf"^({CLASS_TOKEN})(.*)$", re.DOTALL)
_CLASS_RE = re.compile(CLASS_TOKEN)
_MEDIA_CONDITION_RE = re.compile(r"^\$\((.+)\)$", re.DOTALL)


def _get_or_create(rules: dict[str, ParsedRule], selector: str) -> ParsedRule:
    rule = rules.get(selector)
    if rule is None:
        rule = ParsedRule(selector=selector)
        rules[selector] = rule
    return rule


def _add_selector(
    rules: dict[str, ParsedRule], selector: str, declarations: list[Declaration]
) -> None:
    match = _LEADING_CLASS_RE.match(selector)
    if not match:
        raise UnsupportedSelectorError(selector)

    class_selector, child_selector = match.groups()
    if not child_selector:
        _get_or_create(rules, selector).declarations.extend(declarations)
        return

    for child_class in _CLASS_RE.findall(child_selector):
        _get_or_create(rules, child_class)
    _get_or_create(rules, class_selector).add_child(child_selector, declarations)


def build_rules(
    style_rules: list[StyleRule],
    root: list[Declaration] | None = None,
    root_selector: str = ":root",
) -> dict[str, ParsedRule]:
    """Build the selector -> ParsedRule mapping for *style_rules*.

    Declarations under *root_selector* go to *root* when a list is given;
    otherwise that selector is rejected like any other non-class selector.
    """
    rules: dict[str, ParsedRule] = {}
    for style_rule in style_rules:
        for selector in style_rule.selectors:
            if root is not None and selector == root_selector:
                root.extend(style_rule.declarations)
                continue
            _add_selector(rules, selector, style_rule.declarations)
    return rules


def media_expression(condition: str) -> str:
    """Return the expression inside a ``$( )`` media condition.

    Raises InvalidMediaConditionError for bare CSS media features.
    """
    match = _MEDIA_CONDITION_RE.match(condition.strip())
    if not match:
        raise InvalidMediaConditionError(condition)
    return match.group(1)


def _merge_media(media: dict[str, ParsedMedia], media_rule: MediaRule) -> None:
    expression = media_expression(media_rule.condition)
    current = media.get(media_rule.condition)
    if current is None:
        current = ParsedMedia(condition=media_rule.condition, expression=expression)
        media[media_rule.condition] = current

    for selector, rule in build_rules(media_rule.rules).items():
        existing = current.rules.get(selector)
        if existing is None:
            current.rules[selector] = rule
        else:
            existing.merge(rule)


def build_rule_tree(stylesheet: Stylesheet, *, root_selector: str = ":root") -> RuleTree:
    """Restructure *stylesheet* into a RuleTree.

    Repeated selectors concatenate their declarations, media blocks with the
    same condition merge, and the last keyframes block with a name wins.
    """
    tree = RuleTree()
    style_rules: list[StyleRule] = []

    for rule in stylesheet.rules:
        if isinstance(rule, StyleRule):
            style_rules.append(rule)
        elif isinstance(rule, MediaRule):
            _merge_media(tree.media, rule)
        elif isinstance(rule, KeyframesRule):
            if rule.name in tree.keyframes:
                logger.debug("Keyframes %r redefined, keeping the last block", rule.name)
            tree.keyframes[rule.name] = ParsedKeyframes(
                name=rule.name, frames=list(rule.frames), vendor=rule.vendor
            )
        else:
            raise TypeError(f"Unknown stylesheet rule: {rule!r}")

    tree.rules = build_rules(style_rules, root=tree.root, root_selector=root_selector)
    return tree
