from minicss.render.canonical import serialize, write_tree
from minicss.render.debug import format_debug, print_tree

__all__ = ["format_debug", "print_tree", "serialize", "write_tree"]
