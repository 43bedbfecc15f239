"""Buffer façade combining lines, viewport scrolling, and the cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, List, Optional, Sequence, Tuple

from textcore.runtime import telemetry

from .coords import FILLER, GraphemeIndex, VisualColumn, saturating_sub
from .cursor import Cursor
from .document import split_lines, split_text
from .errors import EmptyLine, TextCoreError
from .line import Line
from .sync import BufferMirror
from .validation import ensure_index


@dataclass(frozen=True, slots=True)
class Motion:
    """Where the cursor ended up and how far it travelled on screen."""

    column: GraphemeIndex
    row: int
    distance: VisualColumn = VisualColumn(0)
    scrolled: bool = False
    moved: bool = False


@dataclass(frozen=True, slots=True)
class Edit:
    """Outcome of a mutation; ``error`` is set when the edit was refused."""

    motion: Motion
    text: str = ""
    error: Optional[TextCoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    cursor: Tuple[int, int]  # (grapheme column, absolute line)
    viewport_offset: int


class Buffer:
    """Ordered lines, a vertical scroll offset, and one cursor.

    The cursor row is relative to the viewport; the addressed line is
    ``viewport_offset + cursor.row``. Routine edges (line start/end, document
    start/end, empty lines) are no-ops, never errors.
    """

    def __init__(
        self, lines: Optional[Iterable[Line]] = None, *, name: str = "default"
    ) -> None:
        self.name = name
        self._lines: List[Line] = list(lines or ()) or [Line()]
        self.viewport_offset = 0
        self.cursor = Cursor()
        self.version = 0

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls((Line(raw) for raw in split_text(text)), name=name)

    @classmethod
    def from_bytes(
        cls, data: bytes, *, name: str = "default", encoding: str = "utf-8"
    ) -> "Buffer":
        lines = split_lines(data, encoding=encoding)
        return cls((Line(raw) for raw in lines), name=name)

    @property
    def lines(self) -> Sequence[Line]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def line_index(self) -> int:
        return self.viewport_offset + self.cursor.row

    def line(self, index: int) -> Line:
        ensure_index(index, len(self._lines), what="line")
        return self._lines[index]

    def current_line(self) -> Line:
        return self._lines[self.line_index]

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.version,
            text="\n".join(line.raw for line in self._lines),
            cursor=(self.cursor.column, self.line_index),
            viewport_offset=self.viewport_offset,
        )

    # -- output -------------------------------------------------------------

    def render_viewport(self, height: int) -> List[str]:
        """Rendered rows of the visible window, padded with the filler glyph."""

        if height < 0:
            raise ValueError("viewport height cannot be negative")
        start = self.viewport_offset
        rows = [line.rendered for line in self._lines[start : start + height]]
        rows.extend(FILLER for _ in range(height - len(rows)))
        return rows

    def caret(self) -> Tuple[VisualColumn, int]:
        """Screen position of the cursor: (visual column, viewport row)."""

        line = self.current_line()
        column = min(self.cursor.column, len(line))
        return (line.visual_column(column), self.cursor.row)

    def mirror(
        self, height: int, *, attributes: Optional[dict[str, str]] = None
    ) -> BufferMirror:
        line = self.current_line()
        column = min(self.cursor.column, len(line))
        return BufferMirror(
            rows=tuple(self.render_viewport(height)),
            caret=(line.visual_column(column), self.cursor.row),
            line_index=self.line_index,
            caret_offset=line.rendered_offset(column),
            attributes=dict(attributes or {}),
        )

    # -- vertical movement --------------------------------------------------

    def move_down(self, count: int, viewport_height: int) -> Motion:
        self.fit_viewport(viewport_height)
        steps = min(max(count, 0), self.line_count - 1 - self.line_index)
        if steps == 0:
            return self._motion()

        cursor = self.cursor
        scrolled = False
        if cursor.row + steps < viewport_height:
            cursor.row += steps
        else:
            self.viewport_offset += cursor.row + steps - (viewport_height - 1)
            cursor.row = viewport_height - 1
            scrolled = True
        return self._after_vertical(scrolled)

    def move_up(self, count: int = 1) -> Motion:
        steps = min(max(count, 0), self.line_index)
        if steps == 0:
            return self._motion()

        cursor = self.cursor
        scrolled = False
        if cursor.row >= steps:
            cursor.row -= steps
        else:
            self.viewport_offset -= steps - cursor.row
            cursor.row = 0
            scrolled = True
        return self._after_vertical(scrolled)

    def _after_vertical(self, scrolled: bool) -> Motion:
        self.cursor.preserve_column(self.current_line().last_index)
        if scrolled:
            telemetry.record_event(
                "viewport.scroll",
                level="debug",
                data={"buffer": self.name, "offset": self.viewport_offset},
            )
        return self._motion(scrolled=scrolled, moved=True)

    def fit_viewport(self, viewport_height: int) -> bool:
        """Scroll so the cursor row lies inside a viewport of this height.

        Returns ``True`` when the viewport had to scroll.
        """

        if viewport_height < 1:
            raise ValueError("viewport height must be at least one row")
        overflow = self.cursor.row - (viewport_height - 1)
        if overflow <= 0:
            return False
        self.viewport_offset += overflow
        self.cursor.row -= overflow
        return True

    # -- horizontal movement ------------------------------------------------

    def move_right(self, count: int = 1) -> Motion:
        self.cursor.forget_column()
        line = self.current_line()
        if line.is_empty() or self.cursor.column >= line.last_index:
            return self._motion()
        target = min(self.cursor.column + max(count, 0), line.last_index)
        return self._move_to(line, GraphemeIndex(target))

    def move_right_forced(self, count: int = 1) -> Motion:
        """Like ``move_right`` but may stop one past the last grapheme."""

        line = self.current_line()
        if line.is_empty():
            return self._motion()
        self.cursor.forget_column()
        target = min(self.cursor.column + max(count, 0), len(line))
        return self._move_to(line, GraphemeIndex(target))

    def move_left(self, count: int = 1) -> Motion:
        self.cursor.forget_column()
        if self.cursor.column == 0:
            return self._motion()
        line = self.current_line()
        start = min(self.cursor.column, len(line))
        target = saturating_sub(start, max(count, 0))
        return self._move_to(line, GraphemeIndex(target))

    def move_to_first_nonblank(self) -> Motion:
        self.cursor.forget_column()
        line = self.current_line()
        return self._move_to(line, line.first_nonblank())

    def move_to_line_start(self) -> Motion:
        return self.move_left(len(self.current_line()))

    def move_to_line_end(self) -> Motion:
        return self.move_right(len(self.current_line()))

    def _move_to(self, line: Line, target: GraphemeIndex) -> Motion:
        start = min(self.cursor.column, len(line))
        distance = line.visual_distance(start, target)
        moved = target != self.cursor.column
        self.cursor.column = target
        return self._motion(distance=distance, moved=moved)

    # -- edits --------------------------------------------------------------

    def insert_char(self, character: str) -> Edit:
        with Transaction(self, "insert_char"):
            line = self.current_line()
            self.cursor.column = GraphemeIndex(min(self.cursor.column, len(line)))
            line.insert_at(self.cursor.column, character)
            motion = self.move_right_forced(1)
        return Edit(motion=motion, text=character)

    def delete_char_at_cursor(self) -> Edit:
        line = self.current_line()
        if line.is_empty():
            return Edit(
                motion=self._motion(), error=EmptyLine("no grapheme under cursor")
            )
        with Transaction(self, "delete_char"):
            self.cursor.column = GraphemeIndex(
                min(self.cursor.column, line.last_index)
            )
            removed = line.remove_at(self.cursor.column)
            if self.cursor.column >= len(line):
                motion = self.move_left(1)
            else:
                motion = self._motion()
        return Edit(motion=motion, text=removed)

    def delete_char_before_cursor(self) -> Edit:
        if self.cursor.column == 0:
            return Edit(motion=self._motion())
        line = self.current_line()
        if line.is_empty():
            return Edit(
                motion=self._motion(), error=EmptyLine("no grapheme before cursor")
            )
        with Transaction(self, "delete_char_before"):
            motion = self.move_left(1)
            removed = line.remove_at(self.cursor.column)
        return Edit(motion=motion, text=removed)

    def insert_line_after(self, viewport_height: int) -> Edit:
        with Transaction(self, "insert_line_after"):
            self._lines.insert(self.line_index + 1, Line())
            moved = self.move_down(1, viewport_height)
            self.cursor.column = GraphemeIndex(0)
            self.cursor.forget_column()
        return Edit(motion=self._motion(scrolled=moved.scrolled, moved=True))

    def insert_line_before(self) -> Edit:
        with Transaction(self, "insert_line_before"):
            self.move_to_line_start()
            self._lines.insert(self.line_index, Line())
        return Edit(motion=self._motion(moved=True))

    def _motion(
        self,
        *,
        distance: VisualColumn = VisualColumn(0),
        scrolled: bool = False,
        moved: bool = False,
    ) -> Motion:
        return Motion(
            column=self.cursor.column,
            row=self.cursor.row,
            distance=distance,
            scrolled=scrolled,
            moved=moved,
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Profiles one mutation and bumps the buffer version when it succeeds."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "line": self.buffer.line_index},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer.version += 1
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferView", "Edit", "Motion", "Transaction"]
