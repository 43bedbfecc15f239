"""Line, cursor, and buffer model with grapheme-safe editing."""

from .buffer import Buffer, BufferView, Edit, Motion, Transaction
from .coords import FILLER, TAB_STOP, GraphemeIndex, TextOffset, VisualColumn
from .cursor import Cursor, Free, Pinned, StickyColumn
from .document import split_lines, split_text
from .errors import EmptyLine, Malformed, OutOfBounds, TextCoreError
from .line import Line
from .sync import BufferMirror, BufferSync
from .validation import ensure_index, ensure_position

__all__ = [
    "Buffer",
    "BufferView",
    "BufferMirror",
    "BufferSync",
    "Cursor",
    "Edit",
    "EmptyLine",
    "FILLER",
    "Free",
    "GraphemeIndex",
    "Line",
    "Malformed",
    "Motion",
    "OutOfBounds",
    "Pinned",
    "StickyColumn",
    "TAB_STOP",
    "TextCoreError",
    "TextOffset",
    "Transaction",
    "VisualColumn",
    "ensure_index",
    "ensure_position",
    "split_lines",
    "split_text",
]
