"""Cursor position and sticky-column state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .coords import GraphemeIndex


@dataclass(frozen=True, slots=True)
class Free:
    """No column is remembered."""


@dataclass(frozen=True, slots=True)
class Pinned:
    """The column the cursor wanted before a shorter line clamped it."""

    column: GraphemeIndex


StickyColumn = Union[Free, Pinned]


@dataclass(slots=True)
class Cursor:
    """Grapheme column plus viewport-relative row.

    ``sticky`` is ``Pinned`` only while a vertical move has clamped the cursor
    onto a line shorter than the column it came from. The pinned column is
    always >= ``column``.
    """

    column: GraphemeIndex = GraphemeIndex(0)
    row: int = 0
    sticky: StickyColumn = field(default_factory=Free)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.column, self.row)

    @property
    def remembered_column(self) -> Optional[GraphemeIndex]:
        if isinstance(self.sticky, Pinned):
            return self.sticky.column
        return None

    @property
    def is_pinned(self) -> bool:
        return isinstance(self.sticky, Pinned)

    def forget_column(self) -> None:
        self.sticky = Free()

    def preserve_column(self, last_index: int) -> bool:
        """Apply the sticky-column transition against a new line's last index.

        Returns ``True`` when the live column changed.
        """

        before = self.column
        sticky = self.sticky
        if isinstance(sticky, Pinned) and sticky.column <= last_index:
            # Line is wide enough again: snap back.
            self.column = sticky.column
            self.sticky = Free()
        elif self.column < last_index:
            if isinstance(sticky, Pinned):
                self.column = GraphemeIndex(last_index)
        elif self.column > last_index:
            if isinstance(sticky, Free):
                self.sticky = Pinned(self.column)
            self.column = GraphemeIndex(last_index)
        return self.column != before


__all__ = ["Cursor", "Free", "Pinned", "StickyColumn"]
