"""css_to_mui: transpile an extended CSS dialect into Material UI JSS style functions."""

from css_to_mui.config import TranspileConfig
from css_to_mui.errors import (
    FractionalUnitError,
    InvalidMediaConditionError,
    ParseError,
    SourceDecodeError,
    TranspileError,
    UnsupportedSelectorError,
)
from css_to_mui.transpiler import transpile, transpile_file

__version__ = "0.1.0"

__all__ = [
    "FractionalUnitError",
    "InvalidMediaConditionError",
    "ParseError",
    "SourceDecodeError",
    "TranspileConfig",
    "TranspileError",
    "UnsupportedSelectorError",
    "transpile",
    "transpile_file",
]
