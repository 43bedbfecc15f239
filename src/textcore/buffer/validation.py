"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .errors import OutOfBounds


def ensure_index(index: int, limit: int, *, what: str = "index") -> int:
    """Return ``index`` if ``0 <= index < limit`` else raise ``OutOfBounds``."""

    if index < 0 or index >= limit:
        raise OutOfBounds(
            f"{what} {index} out of range (limit {limit})", index=index, limit=limit
        )
    return index


def ensure_position(index: int, length: int, *, what: str = "position") -> int:
    """Like ``ensure_index`` but also accepts the one-past-the-end position."""

    if index < 0 or index > length:
        raise OutOfBounds(
            f"{what} {index} out of range (length {length})",
            index=index,
            limit=length,
        )
    return index
