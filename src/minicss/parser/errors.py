"""Parser error types."""

from __future__ import annotations

from minicss.model.diagnostic import Diagnostic


class ParseError(Exception):
    """Raised when stylesheet source cannot be parsed.

    The position fields mirror the :class:`Diagnostic` emitted for the
    failure; ``diagnostic`` is None only when the error is raised by hand.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        diagnostic: Diagnostic | None = None,
    ):
        self.offset = offset
        self.diagnostic = diagnostic
        self.line = diagnostic.line if diagnostic else None
        self.column = diagnostic.column if diagnostic else None
        self.source_line = diagnostic.source_line if diagnostic else None
        super().__init__(message)


class InvalidIdentifierError(ParseError):
    """No identifier character where an identifier was required."""


class UnexpectedSyntaxError(ParseError):
    """A required punctuation character was missing."""

    def __init__(
        self,
        message: str,
        offset: int,
        expected: str,
        diagnostic: Diagnostic | None = None,
    ):
        self.expected = expected
        super().__init__(message, offset, diagnostic)


class UnknownAttributeError(ParseError):
    """A well-formed property name that is not in the recognized set."""

    def __init__(
        self,
        message: str,
        offset: int,
        name: str,
        diagnostic: Diagnostic | None = None,
    ):
        self.name = name
        super().__init__(message, offset, diagnostic)
