"""Error reporter: turn a source offset into a printable diagnostic."""

from __future__ import annotations

import logging
from typing import Callable

from minicss.model.diagnostic import Diagnostic

__all__ = ["Reporter", "locate", "log_reporter"]

logger = logging.getLogger("minicss.parser")

Reporter = Callable[[Diagnostic], None]


def locate(source: str, offset: int, message: str) -> Diagnostic:
    """Build a :class:`Diagnostic` for *offset* by rescanning *source*.

    Offsets past the end are clamped to the end of input, which lands on the
    last line.
    """
    offset = max(0, min(offset, len(source)))
    line_start = source.rfind("\n", 0, offset) + 1
    line_end = source.find("\n", offset)
    if line_end == -1:
        line_end = len(source)
    return Diagnostic(
        line=source.count("\n", 0, offset) + 1,
        column=offset - line_start,
        message=message,
        source_line=source[line_start:line_end],
    )


def log_reporter(diagnostic: Diagnostic) -> None:
    """Default reporter: emit the diagnostic on the ``minicss.parser`` logger."""
    logger.error("%s", diagnostic)
