"""Tree model: blocks of attributes in source order."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from minicss.model.attribute import Attribute, AttributeKind
from minicss.normalize import normalize


@dataclass(frozen=True)
class Block:
    """One ``selector { ... }`` unit.

    Attributes:
        selector: The selector identifier, normalized.
        attributes: Recognized attributes in source order.
    """

    selector: str
    attributes: tuple[Attribute, ...] = ()

    @property
    def text_selector(self) -> str:
        """The selector in source spelling."""
        return normalize(self.selector)

    def get(self, kind: AttributeKind) -> str | None:
        """Return the value of the first attribute of *kind*, or None."""
        for attr in self.attributes:
            if attr.kind is kind:
                return attr.value
        return None


@dataclass(frozen=True)
class Tree:
    """All blocks of one parsed document, in source order."""

    blocks: tuple[Block, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def selectors(self) -> list[str]:
        return [block.selector for block in self.blocks]
