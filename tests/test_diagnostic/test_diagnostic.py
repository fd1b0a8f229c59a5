"""Tests for syntax error source excerpts."""

from css_to_mui.diagnostic import render_syntax_error


class TestRenderSyntaxError:
    def test_excerpt_with_caret(self):
        source = "\n.test {\n  padding 10px;\n}\n"
        message = render_syntax_error(source, 3, 11, "unexpected '10px', expected ':'")
        assert message.split("\n") == [
            "SyntaxError: unexpected '10px', expected ':'",
            "",
            "  1 | ",
            "  2 | .test {",
            "> 3 |   padding 10px;",
            "    |           ^",
            "  4 | }",
        ]

    def test_window_is_clamped_to_five_lines(self):
        source = "\n".join(f"line{i}" for i in range(1, 13))
        lines = render_syntax_error(source, 10, 1, "boom").split("\n")
        assert lines[2:] == [
            "   7 | line7",
            "   8 | line8",
            "   9 | line9",
            "> 10 | line10",
            "     | ^",
            "  11 | line11",
        ]

    def test_first_line(self):
        lines = render_syntax_error("}\n.a {}", 1, 1, "boom").split("\n")
        assert lines[2:] == ["> 1 | }", "    | ^", "  2 | .a {}"]

    def test_last_line_has_no_trailing_context(self):
        lines = render_syntax_error(".a {}\n}", 2, 1, "boom").split("\n")
        assert lines[-2:] == ["> 2 | }", "    | ^"]
