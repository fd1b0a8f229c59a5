"""Error hierarchy for the css-to-mui transpiler.

Every error is fatal: a transpilation either returns a complete module or
raises one of these.
"""

from __future__ import annotations


class TranspileError(Exception):
    """Base error for all css_to_mui errors."""


class ParseError(TranspileError):
    """Raised when stylesheet source cannot be parsed.

    The message is a rendered source excerpt pointing at the failure; the
    bare reason and 1-based position are kept as attributes.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        reason: str = "",
    ):
        self.line = line
        self.column = column
        self.reason = reason
        super().__init__(message)


class UnsupportedSelectorError(TranspileError):
    """A rule selector is not a class selector."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(
            f"Only CSS class selectors are supported, received: {selector}"
        )


class FractionalUnitError(TranspileError):
    """A custom spacing unit value contains a decimal point."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Custom units cannot be fractions, received: {value}")


class InvalidMediaConditionError(TranspileError):
    """An @media condition is not wrapped in ``$( )``."""

    def __init__(self, condition: str) -> None:
        self.condition = condition
        super().__init__(
            "Invalid @media format, use Material UI breakpoints, e.g.: "
            f"@media $(theme.breakpoints.down('xs')). Received: {condition}"
        )


class SourceDecodeError(TranspileError):
    """A stylesheet file is not valid UTF-8."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path} as UTF-8: {reason}")
