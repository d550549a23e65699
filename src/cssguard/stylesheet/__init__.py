from cssguard.stylesheet.errors import ParseError
from cssguard.stylesheet.model import Stylesheet, StyleRule
from cssguard.stylesheet.parser import parse_file, parse_stylesheet

__all__ = ["parse_stylesheet", "parse_file", "ParseError", "Stylesheet", "StyleRule"]
