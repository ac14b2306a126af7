"""Scanner primitives over a source string and an offset.

Each method takes the current offset and returns the offset after what it
consumed. Failures are reported through a :class:`Scanner`'s reporter before
the matching :class:`ParseError` subclass is raised.
"""

from __future__ import annotations

from minicss.config import ASCII_WHITESPACE
from minicss.model.diagnostic import Diagnostic
from minicss.normalize import normalize
from minicss.parser.errors import InvalidIdentifierError, UnexpectedSyntaxError
from minicss.parser.report import Reporter, locate, log_reporter

__all__ = ["Scanner", "is_identifier_char"]


def is_identifier_char(ch: str) -> bool:
    return ch == "-" or (ch.isascii() and ch.isalnum())


class Scanner:
    """Positional scanning over one source string."""

    def __init__(
        self,
        source: str,
        whitespace: str = ASCII_WHITESPACE,
        reporter: Reporter | None = None,
    ) -> None:
        self.source = source
        self.whitespace = whitespace
        self.reporter = reporter or log_reporter

    def at_end(self, pos: int) -> bool:
        return pos >= len(self.source)

    def peek(self, pos: int) -> str | None:
        if pos < len(self.source):
            return self.source[pos]
        return None

    def skip_whitespace(self, pos: int) -> int:
        source = self.source
        while pos < len(source) and source[pos] in self.whitespace:
            pos += 1
        return pos

    def scan_identifier(self, pos: int, context: str = "") -> tuple[str, int]:
        """Scan a run of ASCII letters, digits and hyphens starting at *pos*.

        Returns the normalized identifier and the offset after it.
        """
        source = self.source
        end = pos
        while end < len(source) and is_identifier_char(source[end]):
            end += 1
        if end == pos:
            message = "Expected valid identifier."
            if context:
                message = f"{message}\n{context}"
            diagnostic = self.report(pos, message)
            raise InvalidIdentifierError(message, pos, diagnostic=diagnostic)
        return normalize(source[pos:end]), end

    def expect_char(self, pos: int, ch: str) -> int:
        if self.peek(pos) == ch:
            return pos + 1
        message = f"Expected syntax: '{ch}'."
        diagnostic = self.report(pos, message)
        raise UnexpectedSyntaxError(message, pos, expected=ch, diagnostic=diagnostic)

    def report(self, pos: int, message: str) -> Diagnostic:
        diagnostic = locate(self.source, pos, message)
        self.reporter(diagnostic)
        return diagnostic
