"""Rule tree model: the nested structure the emitter walks.

These dataclasses are mutable; the builder fills them in place while it
merges repeated selectors and media blocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from css_to_mui.model.stylesheet import Declaration, Keyframe


@dataclass
class ChildRule:
    """A selector fragment nested under its leading class.

    ``selector`` is the text after the leading class, e.g. ``:hover`` or
    `` .other:hover``, kept verbatim until emission.
    """

    selector: str
    declarations: list[Declaration] = field(default_factory=list)


@dataclass
class ParsedRule:
    selector: str
    declarations: list[Declaration] = field(default_factory=list)
    child_rules: list[ChildRule] = field(default_factory=list)

    def add_child(self, selector: str, declarations: list[Declaration]) -> ChildRule:
        """Append declarations to the child rule for *selector*, creating it if needed."""
        for child in self.child_rules:
            if child.selector == selector:
                child.declarations.extend(declarations)
                return child
        child = ChildRule(selector=selector, declarations=list(declarations))
        self.child_rules.append(child)
        return child

    def merge(self, other: ParsedRule) -> None:
        """Fold *other* (same selector) into this rule, keeping encounter order."""
        self.declarations.extend(other.declarations)
        for child in other.child_rules:
            self.add_child(child.selector, child.declarations)


@dataclass
class ParsedMedia:
    condition: str
    expression: str  # text inside the $( ) wrapper
    rules: dict[str, ParsedRule] = field(default_factory=dict)


@dataclass
class ParsedKeyframes:
    name: str
    frames: list[Keyframe] = field(default_factory=list)
    vendor: str | None = None

    @property
    def at_rule(self) -> str:
        """The at-rule text used as the JSS key, e.g. ``@-webkit-keyframes spin``."""
        return f"@{self.vendor or ''}keyframes {self.name}"


@dataclass
class RuleTree:
    """Everything the emitter needs, in emission order per mapping."""

    root: list[Declaration] = field(default_factory=list)
    rules: dict[str, ParsedRule] = field(default_factory=dict)
    media: dict[str, ParsedMedia] = field(default_factory=dict)
    keyframes: dict[str, ParsedKeyframes] = field(default_factory=dict)
