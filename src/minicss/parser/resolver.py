"""Attribute resolver: map a normalized name onto a known attribute kind."""

from __future__ import annotations

from minicss.model.attribute import (
    KNOWN_ATTRIBUTES,
    UNRECOGNIZED,
    Attribute,
    ResolvedAttribute,
)

__all__ = ["resolve"]


def resolve(name: str, value: str) -> ResolvedAttribute:
    """Return an :class:`Attribute` for *name*, or ``UNRECOGNIZED``.

    *name* must already be normalized; matching is exact and case-sensitive.
    """
    for kind, canonical in KNOWN_ATTRIBUTES:
        if canonical == name:
            return Attribute(kind=kind, value=value)
    return UNRECOGNIZED
