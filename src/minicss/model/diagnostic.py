"""Diagnostic model: a located parse failure, ready to print."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single parse failure pinned to a position in the source.

    Attributes:
        line: 1-based line number.
        column: 0-based column within the line.
        message: Human-readable description of the problem.
        source_line: Full text of the offending line, without newlines.
    """

    line: int
    column: int
    message: str
    source_line: str

    @property
    def caret(self) -> str:
        return " " * self.column + "^ Near here."

    def __str__(self) -> str:
        return (
            f"Error at line {self.line}, column {self.column}.\n"
            f"{self.message}\n"
            f"\n"
            f"{self.source_line}\n"
            f"{self.caret}"
        )
