"""Code emitter: renders a RuleTree as a JavaScript module.

Output shape (ESM)::

    export default (theme) => {
      const myColor = `blue`;
      return {
        '@keyframes spin': {
          from: {
            opacity: `0`,
          },
        },
        test: {
          ...theme.mixins.gutters,
          padding: `${theme.spacing.unit * 2}px`,
          '&:hover': {
            color: `${myColor}`,
          },
        },
        [theme.breakpoints.down('xs')]: {
          test: {
            padding: `5px`,
          },
        },
      };
    };
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from css_to_mui.builder import CLASS_TOKEN
from css_to_mui.config import TranspileConfig
from css_to_mui.declarations import transpile_declarations
from css_to_mui.javascript import object_key, template_literal
from css_to_mui.lexer import lex_value, variable_name
from css_to_mui.model.stylesheet import Declaration
from css_to_mui.model.tree import ChildRule, ParsedKeyframes, ParsedMedia, RuleTree

__all__ = ["child_selector", "emit_module"]

_CLASS_RE = re.compile(CLASS_TOKEN)


class _Writer:
    """Accumulates indented lines."""

    def __init__(self, indent: int) -> None:
        self._lines: list[str] = []
        self._depth = 0
        self._indent = " " * indent

    def line(self, text: str) -> None:
        self._lines.append(self._indent * self._depth + text)

    @contextmanager
    def block(self, opener: str, closer: str) -> Iterator[None]:
        self.line(opener)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
        self.line(closer)

    def getvalue(self) -> str:
        return "\n".join(self._lines) + "\n"


def child_selector(selector: str) -> str:
    """Render a child rule selector as a JSS nested key.

    ``":hover"`` -> ``"&:hover"``, ``" .b:hover"`` -> ``"& $b:hover"``
    """
    return "&" + _CLASS_RE.sub(lambda m: "$" + m.group(0)[1:], selector)


class _Emitter:
    def __init__(self, config: TranspileConfig) -> None:
        self.config = config
        self.writer = _Writer(config.indent)

    def _entry(
        self,
        key: str,
        declarations: list[Declaration],
        child_rules: Sequence[ChildRule] = (),
    ) -> None:
        block = transpile_declarations(
            declarations,
            spacing_unit=self.config.spacing_expression,
            mixin_property=self.config.mixin_property,
        )
        if block.is_empty and not child_rules:
            self.writer.line(f"{key}: {{}},")
            return
        with self.writer.block(f"{key}: {{", "},"):
            for mixin in block.mixins:
                self.writer.line(f"...{mixin},")
            for prop, value in block.entries:
                self.writer.line(f"{object_key(prop)}: {value},")
            for child in child_rules:
                self._entry(object_key(child_selector(child.selector)), child.declarations)

    def _keyframes(self, keyframes: ParsedKeyframes) -> None:
        with self.writer.block(f"{object_key(keyframes.at_rule)}: {{", "},"):
            for frame in keyframes.frames:
                self._entry(object_key(",".join(frame.values)), frame.declarations)

    def _media(self, media: ParsedMedia) -> None:
        with self.writer.block(f"[{media.expression}]: {{", "},"):
            for rule in media.rules.values():
                self._entry(object_key(rule.selector[1:]), rule.declarations, rule.child_rules)

    def _root(self, root: list[Declaration]) -> None:
        for declaration in root:
            value = template_literal(
                lex_value(declaration.value, self.config.spacing_expression)
            )
            self.writer.line(f"const {variable_name(declaration.property)} = {value};")

    def _function(self) -> tuple[str, str]:
        theme = self.config.theme_name
        if self.config.module_format == "commonjs":
            return f"module.exports = function cssToMuiLoader({theme}) {{", "};"
        return f"export default ({theme}) => {{", "};"

    def emit(self, tree: RuleTree) -> str:
        opener, closer = self._function()
        with self.writer.block(opener, closer):
            self._root(tree.root)
            if not (tree.keyframes or tree.rules or tree.media):
                self.writer.line("return {};")
            else:
                with self.writer.block("return {", "};"):
                    for keyframes in tree.keyframes.values():
                        self._keyframes(keyframes)
                    for rule in tree.rules.values():
                        self._entry(
                            object_key(rule.selector[1:]),
                            rule.declarations,
                            rule.child_rules,
                        )
                    for media in tree.media.values():
                        self._media(media)
        return self.writer.getvalue()


def emit_module(tree: RuleTree, config: TranspileConfig | None = None) -> str:
    """Render *tree* as a module exporting a function of the theme.

    Errors raised while transpiling values propagate unchanged.
    """
    return _Emitter(config or TranspileConfig()).emit(tree)
