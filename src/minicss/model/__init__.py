from minicss.model.attribute import (
    KNOWN_ATTRIBUTES,
    UNRECOGNIZED,
    Attribute,
    AttributeKind,
    ResolvedAttribute,
    Unrecognized,
)
from minicss.model.diagnostic import Diagnostic
from minicss.model.tree import Block, Tree

__all__ = [
    "KNOWN_ATTRIBUTES",
    "UNRECOGNIZED",
    "Attribute",
    "AttributeKind",
    "Block",
    "Diagnostic",
    "ResolvedAttribute",
    "Tree",
    "Unrecognized",
]
