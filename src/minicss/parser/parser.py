"""Hand-written recursive-descent parser for the stylesheet subset.

Syntax example:
    h1 { color: red; font-size: 12px; }
    body {
        background-color: white;
        text-align: center;
    }

Grammar:
    document   := block*
    block      := identifier '{' attribute* '}'
    attribute  := identifier ':' identifier ';'
    identifier := (alnum | '-')+

Whitespace is skipped between every token. Parsing is all-or-nothing: the
first malformed construct emits one diagnostic and raises a
:class:`ParseError`.
"""

from __future__ import annotations

import logging

from minicss.config import ParserConfig
from minicss.model.attribute import Attribute
from minicss.model.tree import Block, Tree
from minicss.normalize import normalize
from minicss.parser.errors import UnknownAttributeError
from minicss.parser.report import Reporter
from minicss.parser.resolver import resolve
from minicss.parser.scanner import Scanner

__all__ = ["Parser", "parse_stylesheet"]

logger = logging.getLogger(__name__)


class Parser:
    """Parse one source string into a :class:`Tree`.

    The parser owns the source for the duration of a parse; the returned tree
    holds its own copies of every identifier.
    """

    def __init__(
        self,
        source: str,
        config: ParserConfig | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.source = source
        self.scanner = Scanner(
            source, whitespace=self.config.whitespace, reporter=reporter
        )

    def parse(self) -> Tree:
        scanner = self.scanner
        blocks: list[Block] = []
        pos = 0
        while True:
            pos = scanner.skip_whitespace(pos)
            if scanner.at_end(pos):
                break
            block, pos = self.parse_block(pos)
            blocks.append(block)
        logger.debug("parsed %d block(s)", len(blocks))
        return Tree(blocks=tuple(blocks))

    def parse_block(self, pos: int) -> tuple[Block, int]:
        """Parse one ``selector { ... }`` unit starting at *pos*.

        Returns the block and the offset just past its closing brace.
        """
        scanner = self.scanner
        pos = scanner.skip_whitespace(pos)
        selector, pos = scanner.scan_identifier(pos)
        pos = scanner.skip_whitespace(pos)
        pos = scanner.expect_char(pos, "{")

        attributes: list[Attribute] = []
        while True:
            pos = scanner.skip_whitespace(pos)
            # End of input falls through to the '}' check below.
            if scanner.at_end(pos) or scanner.peek(pos) == "}":
                break
            attribute, pos = self.parse_attribute(pos)
            attributes.append(attribute)

        pos = scanner.skip_whitespace(pos)
        pos = scanner.expect_char(pos, "}")
        logger.debug(
            "block %r: %d attribute(s)", normalize(selector), len(attributes)
        )
        return Block(selector=selector, attributes=tuple(attributes)), pos

    def parse_attribute(self, pos: int) -> tuple[Attribute, int]:
        """Parse ``name: value;`` starting at *pos*."""
        scanner = self.scanner
        pos = scanner.skip_whitespace(pos)
        name_pos = pos
        name, pos = scanner.scan_identifier(
            pos, context="Could not parse attribute name."
        )
        pos = scanner.skip_whitespace(pos)
        pos = scanner.expect_char(pos, ":")
        pos = scanner.skip_whitespace(pos)
        value, pos = scanner.scan_identifier(
            pos, context="Could not parse attribute value."
        )
        pos = scanner.skip_whitespace(pos)
        pos = scanner.expect_char(pos, ";")

        resolved = resolve(name, value)
        if not isinstance(resolved, Attribute):
            text_name = normalize(name)
            message = f"Unknown attribute: '{text_name}'."
            diagnostic = scanner.report(name_pos, message)
            raise UnknownAttributeError(
                message, name_pos, name=text_name, diagnostic=diagnostic
            )
        return resolved, pos


def parse_stylesheet(
    source: str | bytes,
    config: ParserConfig | None = None,
    reporter: Reporter | None = None,
) -> Tree:
    """Parse stylesheet source into a :class:`Tree`.

    *source* may be UTF-8 bytes as read from a file.
    Raises a :class:`ParseError` subclass on the first malformed construct.
    """
    if isinstance(source, bytes):
        source = source.decode("utf-8")
    return Parser(source, config=config, reporter=reporter).parse()
