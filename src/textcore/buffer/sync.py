"""Adapter boundary types for painting buffers in host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Tuple


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of what should be on screen."""

    rows: Tuple[str, ...]
    caret: Tuple[int, int]  # (visual column, viewport row)
    line_index: int
    caret_offset: int = 0  # index into rows[caret row]
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.rows)


class BufferSync(Protocol):
    """Anything a display collaborator can pull a viewport from."""

    def mirror(
        self, height: int, *, attributes: Optional[dict[str, str]] = None
    ) -> BufferMirror:
        """Return the rows and caret the host should render."""
        ...


__all__ = ["BufferMirror", "BufferSync"]
