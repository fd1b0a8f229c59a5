"""Tests for the declaration transpiler and JS literal helpers."""

from css_to_mui.declarations import split_mixins, transpile_declarations
from css_to_mui.javascript import object_key, string_literal, template_literal
from css_to_mui.lexer import CodeFragment, LiteralFragment
from css_to_mui.model.stylesheet import Declaration


def _decls(*pairs):
    return [Declaration(property=p, value=v) for p, v in pairs]


# ---------------------------------------------------------------------------
# JS helpers
# ---------------------------------------------------------------------------


class TestTemplateLiteral:
    def test_literal_only(self):
        assert template_literal([LiteralFragment("10px")]) == "`10px`"

    def test_code_with_suffix(self):
        result = template_literal([CodeFragment("theme.spacing.unit * 2", suffix="px")])
        assert result == "`${theme.spacing.unit * 2}px`"

    def test_escapes_backtick_and_backslash(self):
        assert template_literal([LiteralFragment("a`b\\c")]) == "`a\\`b\\\\c`"

    def test_escapes_interpolation_marker(self):
        assert template_literal([LiteralFragment("${x}")]) == "`\\${x}`"

    def test_empty(self):
        assert template_literal([]) == "``"


class TestObjectKey:
    def test_identifier_is_bare(self):
        assert object_key("padding") == "padding"

    def test_hyphenated_is_quoted(self):
        assert object_key("my-class") == "'my-class'"

    def test_nested_selector_is_quoted(self):
        assert object_key("&:hover") == "'&:hover'"

    def test_string_literal_escapes_quote(self):
        assert string_literal("it's") == "'it\\'s'"


# ---------------------------------------------------------------------------
# Mixins
# ---------------------------------------------------------------------------


class TestSplitMixins:
    def test_single(self):
        assert split_mixins("theme.mixins.customMixin") == ["theme.mixins.customMixin"]

    def test_multiple_trimmed(self):
        assert split_mixins(" a.b ,c.d, e ") == ["a.b", "c.d", "e"]

    def test_nested_commas_do_not_split(self):
        assert split_mixins("theme.mixins.gutters({ a: 1, b: 2 }), theme.x(1, 2)") == [
            "theme.mixins.gutters({ a: 1, b: 2 })",
            "theme.x(1, 2)",
        ]


# ---------------------------------------------------------------------------
# transpile_declarations
# ---------------------------------------------------------------------------


class TestTranspileDeclarations:
    def test_property_names_camel_cased(self):
        block = transpile_declarations(_decls(("text-align", "center")))
        assert block.entries == [("textAlign", "`center`")]

    def test_order_preserved(self):
        block = transpile_declarations(
            _decls(("margin", "20px"), ("padding", "10px"), ("white-space", "nowrap"))
        )
        assert [key for key, _ in block.entries] == ["margin", "padding", "whiteSpace"]

    def test_duplicate_properties_kept(self):
        block = transpile_declarations(_decls(("color", "red"), ("color", "blue")))
        assert block.entries == [("color", "`red`"), ("color", "`blue`")]

    def test_mixins_extracted(self):
        block = transpile_declarations(
            _decls(
                ("border", "1px solid red"),
                ("-mui-mixins", "theme.mixins.mixin1, theme.mixins.mixin2"),
                ("padding", "10px"),
            )
        )
        assert block.mixins == ["theme.mixins.mixin1", "theme.mixins.mixin2"]
        assert [key for key, _ in block.entries] == ["border", "padding"]

    def test_every_mixin_declaration_contributes(self):
        block = transpile_declarations(
            _decls(("-mui-mixins", "a"), ("color", "red"), ("-mui-mixins", "b"))
        )
        assert block.mixins == ["a", "b"]

    def test_custom_mixin_property(self):
        block = transpile_declarations(
            _decls(("-x-mixins", "theme.m"), ("-mui-mixins", "kept")),
            mixin_property="-x-mixins",
        )
        assert block.mixins == ["theme.m"]
        assert block.entries == [("MuiMixins", "`kept`")]

    def test_spacing_unit_threaded_through(self):
        block = transpile_declarations(_decls(("padding", "2su")), spacing_unit="t.s")
        assert block.entries == [("padding", "`${t.s * 2}px`")]

    def test_empty_block(self):
        block = transpile_declarations([])
        assert block.is_empty
