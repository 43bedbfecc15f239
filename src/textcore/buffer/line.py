"""A single editable line and its rendered form."""

from __future__ import annotations

from typing import List

import grapheme
from wcwidth import wcswidth, wcwidth

from .coords import TAB_STOP, GraphemeIndex, TextOffset, VisualColumn
from .errors import EmptyLine
from .validation import ensure_index, ensure_position

_LINE_BREAKS = frozenset({"\n", "\r", "\r\n"})
_EMOJI_JOINERS = frozenset({"\ufe0f", "\u200d"})  # VS16, ZWJ


def _is_emoji_modifier(char: str) -> bool:
    code = ord(char)
    # skin tones, regional indicators
    return 0x1F3FB <= code <= 0x1F3FF or 0x1F1E6 <= code <= 0x1F1FF


def _cluster_width(cluster: str) -> int:
    """Screen columns for one grapheme cluster, never less than one.

    Multi code point emoji sequences (VS16 presentation, ZWJ joins, skin
    tones, flags) take two columns; everything else goes through ``wcswidth``.
    """

    if len(cluster) > 1 and any(
        char in _EMOJI_JOINERS or _is_emoji_modifier(char) for char in cluster
    ):
        return 2
    width = wcswidth(cluster)
    if width < 1:
        width = wcwidth(cluster[0])
    return width if width > 0 else 1


class Line:
    """One line of text addressed by grapheme index.

    ``raw`` is the source of truth. ``render()`` rebuilds the derived state:

    ``rendered`` -- ``raw`` with tabs expanded to the next multiple of
    ``TAB_STOP``
    ``grapheme_offsets`` -- grapheme index -> offset into ``raw``; left empty
    when every grapheme is a single code point
    ``visual_widths`` -- grapheme index -> screen columns it occupies
    """

    __slots__ = (
        "raw",
        "rendered",
        "grapheme_offsets",
        "visual_widths",
        "_render_offsets",
        "_length",
    )

    def __init__(self, raw: str = "") -> None:
        self.raw = raw
        self.rendered = ""
        self.grapheme_offsets: List[TextOffset] = []
        self.visual_widths: List[int] = []
        self._render_offsets: List[int] = []
        self._length = 0
        self.render()

    @classmethod
    def empty(cls) -> "Line":
        return cls()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"Line({self.raw!r})"

    def length(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    @property
    def last_index(self) -> GraphemeIndex:
        """Last index a cursor may rest on; 0 for an empty line."""

        return GraphemeIndex(max(0, self._length - 1))

    def render(self) -> None:
        """Recompute ``rendered`` and both coordinate tables from ``raw``."""

        pieces: List[str] = []
        offsets: List[TextOffset] = []
        widths: List[int] = []
        starts: List[int] = []
        column = 0
        offset = 0
        rendered_length = 0
        for cluster in grapheme.graphemes(self.raw):
            offsets.append(TextOffset(offset))
            starts.append(rendered_length)
            offset += len(cluster)
            if cluster == "\t":
                width = TAB_STOP - column % TAB_STOP
                piece = " " * width
            else:
                width = _cluster_width(cluster)
                piece = cluster
            pieces.append(piece)
            rendered_length += len(piece)
            widths.append(width)
            column += width

        self.rendered = "".join(pieces)
        self.visual_widths = widths
        self._render_offsets = starts
        self._length = len(widths)
        self.grapheme_offsets = [] if self._length == len(self.raw) else offsets

    def rendered_offset(self, index: int) -> int:
        """Index into ``rendered`` where grapheme ``index`` starts."""

        ensure_position(index, self._length, what="grapheme index")
        if index == self._length:
            return len(self.rendered)
        return self._render_offsets[index]

    def graphemes(self) -> List[str]:
        return list(grapheme.graphemes(self.raw))

    def offset_of(self, index: int) -> TextOffset:
        """Translate a grapheme position (``0..len``) into a ``raw`` offset."""

        ensure_position(index, self._length, what="grapheme index")
        if not self.grapheme_offsets:
            return TextOffset(index)
        if index == self._length:
            return TextOffset(len(self.raw))
        return self.grapheme_offsets[index]

    def grapheme_at(self, index: int) -> str:
        ensure_index(index, self._length, what="grapheme index")
        return self.raw[self.offset_of(index) : self.offset_of(index + 1)]

    def visual_distance(self, a: int, b: int) -> VisualColumn:
        """Screen columns between two grapheme positions, in either order."""

        low, high = (a, b) if a <= b else (b, a)
        ensure_position(low, self._length, what="grapheme index")
        ensure_position(high, self._length, what="grapheme index")
        return VisualColumn(sum(self.visual_widths[low:high]))

    def visual_column(self, index: int) -> VisualColumn:
        return self.visual_distance(0, index)

    def first_nonblank(self) -> GraphemeIndex:
        for index, cluster in enumerate(grapheme.graphemes(self.raw)):
            if not cluster.isspace():
                return GraphemeIndex(index)
        return GraphemeIndex(0)

    def insert_at(self, index: int, character: str) -> None:
        """Insert one grapheme before ``index``; ``index == len`` appends.

        The character must stay a grapheme of its own once spliced in. A
        combining mark or joiner that would fuse with a neighbour is refused
        with ``ValueError`` and the line is left untouched.
        """

        if grapheme.length(character) != 1:
            raise ValueError(f"expected a single grapheme, got {character!r}")
        if character in _LINE_BREAKS:
            raise ValueError("line breaks cannot be inserted into a line")
        at = self.offset_of(index)
        before, length = self.raw, self._length
        self.raw = before[:at] + character + before[at:]
        self.render()
        if self._length != length + 1 or self.grapheme_at(index) != character:
            self.raw = before
            self.render()
            raise ValueError(
                f"{character!r} would merge with a neighbouring grapheme at {index}"
            )

    def remove_at(self, index: int) -> str:
        """Remove the grapheme at ``index`` and return it."""

        if self.is_empty():
            raise EmptyLine("cannot remove a grapheme from an empty line")
        ensure_index(index, self._length, what="grapheme index")
        start = self.offset_of(index)
        end = self.offset_of(index + 1)
        removed = self.raw[start:end]
        self.raw = self.raw[:start] + self.raw[end:]
        self.render()
        return removed


__all__ = ["Line"]
