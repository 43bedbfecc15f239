"""Coordinate spaces used by lines and cursors.

Three distinct spaces are in play and must not be mixed:

``TextOffset`` -- position inside ``Line.raw`` (Python string index)
``GraphemeIndex`` -- position counted in user-perceived characters
``VisualColumn`` -- position on screen after tab expansion and wide glyphs
"""

from __future__ import annotations

from typing import NewType

TextOffset = NewType("TextOffset", int)
GraphemeIndex = NewType("GraphemeIndex", int)
VisualColumn = NewType("VisualColumn", int)

TAB_STOP = 8
FILLER = "~"


def saturating_sub(value: int, amount: int) -> int:
    return max(0, value - amount)


__all__ = [
    "TextOffset",
    "GraphemeIndex",
    "VisualColumn",
    "TAB_STOP",
    "FILLER",
    "saturating_sub",
]
