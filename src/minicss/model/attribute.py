"""Attribute model: the closed set of recognized properties and their values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from minicss.normalize import normalize


class AttributeKind(Enum):
    """A recognized property, valued by its normalized (underscore) name."""

    COLOR = "color"
    BACKGROUND = "background"
    BACKGROUND_COLOR = "background_color"
    TEXT_ALIGN = "text_align"
    FONT_FAMILY = "font_family"
    FONT_SIZE = "font_size"

    @property
    def property_name(self) -> str:
        """The hyphenated name used in stylesheet text."""
        return normalize(self.value)


# Consulted in order by the resolver and by both renderers.
KNOWN_ATTRIBUTES: tuple[tuple[AttributeKind, str], ...] = tuple(
    (kind, kind.value) for kind in AttributeKind
)


@dataclass(frozen=True)
class Attribute:
    """A recognized property paired with its (normalized) value text."""

    kind: AttributeKind
    value: str

    is_recognized = True

    @property
    def property_name(self) -> str:
        return self.kind.property_name

    @property
    def text_value(self) -> str:
        """The value in source spelling."""
        return normalize(self.value)


class Unrecognized:
    """Marker returned by the resolver when a name matches no known kind.

    It never appears inside a :class:`~minicss.model.Block`.
    """

    is_recognized = False

    def __repr__(self) -> str:
        return "UNRECOGNIZED"


UNRECOGNIZED = Unrecognized()

ResolvedAttribute = Attribute | Unrecognized
