"""minicss: parse, validate and re-render a small fixed subset of CSS."""

from minicss.config import ParserConfig
from minicss.model import Attribute, AttributeKind, Block, Diagnostic, Tree
from minicss.normalize import normalize
from minicss.parser import (
    InvalidIdentifierError,
    ParseError,
    Parser,
    UnexpectedSyntaxError,
    UnknownAttributeError,
    parse_stylesheet,
)
from minicss.render import format_debug, print_tree, serialize, write_tree

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "AttributeKind",
    "Block",
    "Diagnostic",
    "InvalidIdentifierError",
    "ParseError",
    "Parser",
    "ParserConfig",
    "Tree",
    "UnexpectedSyntaxError",
    "UnknownAttributeError",
    "format_debug",
    "normalize",
    "parse_stylesheet",
    "print_tree",
    "serialize",
    "write_tree",
]
