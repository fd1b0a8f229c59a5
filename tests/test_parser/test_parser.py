"""Tests for the stylesheet grammar parser."""

from pathlib import Path

import pytest

from css_to_mui.model.stylesheet import (
    Declaration,
    Keyframe,
    KeyframesRule,
    MediaRule,
    StyleRule,
    Stylesheet,
)
from css_to_mui.parser import ParseError, parse_stylesheet

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------


class TestRuleSets:
    def test_single_rule(self):
        ss = parse_stylesheet(".test { padding: 10px; }")
        assert ss == Stylesheet(
            rules=[StyleRule(selectors=[".test"], declarations=[Declaration("padding", "10px")])]
        )

    def test_multiple_declarations_in_order(self):
        ss = parse_stylesheet(".test { margin: 20px; padding: 10px; }")
        assert [d.property for d in ss.rules[0].declarations] == ["margin", "padding"]

    def test_last_semicolon_optional(self):
        ss = parse_stylesheet(".test { margin: 20px; padding: 10px }")
        assert ss.rules[0].declarations[-1] == Declaration("padding", "10px")

    def test_empty_block(self):
        ss = parse_stylesheet(".test {}")
        assert ss.rules[0].declarations == []

    def test_selector_list_split(self):
        ss = parse_stylesheet(".test1, .test2 { padding: 10px; }")
        assert ss.rules[0].selectors == [".test1", ".test2"]

    def test_selector_whitespace_collapsed(self):
        ss = parse_stylesheet(".a\n   .b { color: red; }")
        assert ss.rules[0].selectors == [".a .b"]

    def test_selector_commas_inside_parens_kept(self):
        ss = parse_stylesheet(".a:not(.b, .c) { color: red; }")
        assert ss.rules[0].selectors == [".a:not(.b, .c)"]

    def test_custom_properties_and_mixins(self):
        ss = parse_stylesheet(":root { --my-color: blue; } .a { -mui-mixins: theme.m; }")
        assert ss.rules[0].declarations == [Declaration("--my-color", "blue")]
        assert ss.rules[1].declarations == [Declaration("-mui-mixins", "theme.m")]

    def test_escape_hatch_value(self):
        ss = parse_stylesheet(".a { color: $(theme.palette.gray[200]); }")
        assert ss.rules[0].declarations[0].value == "$(theme.palette.gray[200])"

    def test_semicolon_inside_parens_kept(self):
        ss = parse_stylesheet(".a { background: url(data:image/png;base64,AAAA); color: red; }")
        assert ss.rules[0].declarations == [
            Declaration("background", "url(data:image/png;base64,AAAA)"),
            Declaration("color", "red"),
        ]

    def test_quoted_semicolon_kept(self):
        ss = parse_stylesheet(".a::after { content: ';'; quotes: \"{\" \"}\"; }")
        assert ss.rules[0].declarations == [
            Declaration("content", "';'"),
            Declaration("quotes", '"{" "}"'),
        ]

    def test_escape_hatch_with_object_literal(self):
        ss = parse_stylesheet(
            ".a { transition: $(theme.transitions.create('width', { duration: 200 })); }"
        )
        assert ss.rules[0].declarations[0].value == (
            "$(theme.transitions.create('width', { duration: 200 }))"
        )

    def test_non_class_selectors_still_parse(self):
        ss = parse_stylesheet("#test { padding: 10px; }")
        assert ss.rules[0].selectors == ["#test"]


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class TestComments:
    def test_top_level_comment(self):
        ss = parse_stylesheet("/*\n.todo {\n  margin: 0;\n}\n*/\n.test { padding: 10px; }")
        assert len(ss.rules) == 1
        assert ss.rules[0].selectors == [".test"]

    def test_nested_comment(self):
        ss = parse_stylesheet(".test {\n  padding: 10px;\n  /* .todo { margin: 0; } */\n}")
        assert ss.rules[0].declarations == [Declaration("padding", "10px")]

    def test_inline_comment_after_declaration(self):
        ss = parse_stylesheet(".test {\n  padding: 10px; /* TODO: something */\n}")
        assert ss.rules[0].declarations == [Declaration("padding", "10px")]

    def test_comment_inside_value(self):
        ss = parse_stylesheet(".test { padding: 10px /* all */ 5px; }")
        assert ss.rules[0].declarations[0].value == "10px  5px"


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestMedia:
    def test_media_block(self):
        ss = parse_stylesheet(
            "@media $(theme.breakpoints.down('xs')) {\n  .test { padding: 5px; }\n}"
        )
        assert ss.rules == [
            MediaRule(
                condition="$(theme.breakpoints.down('xs'))",
                rules=[StyleRule([".test"], [Declaration("padding", "5px")])],
            )
        ]

    def test_bare_condition_parses(self):
        ss = parse_stylesheet("@media (min-width: 30em) { .test { padding: 5px; } }")
        assert ss.rules[0].condition == "(min-width: 30em)"

    def test_empty_media(self):
        ss = parse_stylesheet("@media $(x) {}")
        assert ss.rules[0].rules == []


class TestKeyframes:
    def test_keyframes(self):
        ss = parse_stylesheet(
            "@keyframes spin { from { opacity: 0; } 50%, 75% { opacity: .5; } }"
        )
        assert ss.rules == [
            KeyframesRule(
                name="spin",
                frames=[
                    Keyframe(["from"], [Declaration("opacity", "0")]),
                    Keyframe(["50%", "75%"], [Declaration("opacity", ".5")]),
                ],
            )
        ]

    def test_vendor_prefix(self):
        ss = parse_stylesheet("@-webkit-keyframes spin { to { opacity: 1; } }")
        assert ss.rules[0].vendor == "-webkit-"
        assert ss.rules[0].name == "spin"


# ---------------------------------------------------------------------------
# Whole documents
# ---------------------------------------------------------------------------


class TestDocument:
    def test_empty_source(self):
        assert parse_stylesheet("") == Stylesheet(rules=[])

    def test_whitespace_only(self):
        assert parse_stylesheet("  \n\t ") == Stylesheet(rules=[])

    def test_fixture(self):
        ss = parse_stylesheet((FIXTURES / "button.css").read_text())
        kinds = [type(rule).__name__ for rule in ss.rules]
        assert kinds == ["StyleRule", "KeyframesRule", "StyleRule", "StyleRule", "MediaRule"]


# ---------------------------------------------------------------------------
# Syntax errors
# ---------------------------------------------------------------------------


class TestSyntaxErrors:
    def test_missing_colon(self):
        source = "\n.test {\n  padding 10px;\n}\n"
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet(source)
        err = exc_info.value
        assert err.line == 3
        assert err.column == 11
        assert "expected ':'" in err.reason
        assert str(err).startswith("SyntaxError: ")
        assert ">" in str(err)

    def test_unclosed_block(self):
        with pytest.raises(ParseError):
            parse_stylesheet(".test { padding: 10px;")

    def test_nested_block_rejected(self):
        with pytest.raises(ParseError):
            parse_stylesheet(".a { .b { color: red; } }")

    def test_unknown_at_rule(self):
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet("@import 'x.css';")
        assert exc_info.value.reason == "unsupported at-rule @import"

    def test_font_face_named_in_reason(self):
        source = ".a { color: red; }\n@font-face {\n  font-family: Roboto;\n}\n"
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet(source)
        err = exc_info.value
        assert err.reason == "unsupported at-rule @font-face"
        assert err.line == 2
        assert str(err).startswith("SyntaxError: unsupported at-rule @font-face")

    def test_unclosed_string_in_value(self):
        with pytest.raises(ParseError):
            parse_stylesheet(".a { content: 'open; }")

    def test_stray_closing_brace(self):
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet(".a { color: red; }\n}")
        assert exc_info.value.line == 2
