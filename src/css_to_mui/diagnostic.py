"""Source excerpts for syntax errors."""

from __future__ import annotations

# Lines shown before and after the failing line.
CONTEXT_BEFORE = 3
CONTEXT_AFTER = 1


def render_syntax_error(source: str, line: int, column: int, reason: str) -> str:
    """Render *reason* with a numbered excerpt of *source* around *line*.

    Example (error at line 3, column 11)::

        SyntaxError: unexpected '10px', expected ':'

          1 |
          2 | .test {
        > 3 |   padding 10px;
            |           ^
          4 | }
    """
    lines = source.split("\n")
    first = max(line - 1 - CONTEXT_BEFORE, 0)
    last = min(line + CONTEXT_AFTER, len(lines))
    width = len(str(last))

    message = [f"SyntaxError: {reason}", ""]
    for number in range(first + 1, last + 1):
        is_error = number == line
        gutter = ("> " if is_error else "  ") + str(number).rjust(width)
        message.append(f"{gutter} | {lines[number - 1]}")
        if is_error:
            caret = " " * max(column - 1, 0) + "^"
            message.append(f"{' ' * (2 + width)} | {caret}")
    return "\n".join(message)
