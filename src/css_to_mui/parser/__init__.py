from css_to_mui.errors import ParseError
from css_to_mui.parser.transformer import parse_stylesheet

__all__ = ["ParseError", "parse_stylesheet"]
