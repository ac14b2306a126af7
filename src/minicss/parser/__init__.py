from minicss.parser.errors import (
    InvalidIdentifierError,
    ParseError,
    UnexpectedSyntaxError,
    UnknownAttributeError,
)
from minicss.parser.parser import Parser, parse_stylesheet
from minicss.parser.report import Reporter, locate, log_reporter
from minicss.parser.resolver import resolve
from minicss.parser.scanner import Scanner

__all__ = [
    "InvalidIdentifierError",
    "ParseError",
    "Parser",
    "Reporter",
    "Scanner",
    "UnexpectedSyntaxError",
    "UnknownAttributeError",
    "locate",
    "log_reporter",
    "parse_stylesheet",
    "resolve",
]
