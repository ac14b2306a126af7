"""Debug listing of a parsed tree."""

from __future__ import annotations

import sys
from typing import TextIO

from minicss.model.tree import Tree


def format_debug(tree: Tree) -> str:
    lines: list[str] = []
    for i, block in enumerate(tree.blocks):
        lines.append(f"selector {i}: {block.text_selector}")
        for j, attr in enumerate(block.attributes):
            lines.append(
                f"\tattribute {j}: {attr.property_name}  value: {attr.text_value}"
            )
        lines.append("")
    return "".join(line + "\n" for line in lines)


def print_tree(tree: Tree, stream: TextIO | None = None) -> None:
    """Write the debug listing of *tree* to *stream* (stderr by default)."""
    out = stream if stream is not None else sys.stderr
    out.write(format_debug(tree))
