"""Canonical serializer: deterministic stylesheet text for a tree.

Each block renders as ``selector {``, then one tab-indented
``property-name: value;`` line per attribute, then ``}``.

Selectors, property names and values are written in source spelling, so the
output always parses back to an equal tree.
"""

from __future__ import annotations

from pathlib import Path

from minicss.model.tree import Tree

__all__ = ["serialize", "write_tree"]


def serialize(tree: Tree) -> str:
    parts: list[str] = []
    for block in tree.blocks:
        parts.append(f"{block.text_selector} {{\n")
        for attr in block.attributes:
            parts.append(f"\t{attr.property_name}: {attr.text_value};\n")
        parts.append("}\n")
    return "".join(parts)


def write_tree(tree: Tree, path: str | Path) -> Path:
    """Write the canonical form of *tree* to *path*, replacing any file there."""
    target = Path(path)
    target.write_text(serialize(tree), encoding="utf-8", newline="")
    return target
