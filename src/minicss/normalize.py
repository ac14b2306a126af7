"""Hyphen/underscore name normalization.

Every scanned identifier passes through :func:`normalize` so that source
spellings such as ``font-size`` line up with the underscore spelling used by
:class:`~minicss.model.AttributeKind`. The substitution is its own inverse,
so renderers apply it a second time to get the source spelling back.
"""

from __future__ import annotations

__all__ = ["normalize"]

_SWAP = str.maketrans({"-": "_", "_": "-"})


def normalize(text: str) -> str:
    """Swap every ``-`` for ``_`` and every ``_`` for ``-``."""
    return text.translate(_SWAP)
