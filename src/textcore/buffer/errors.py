"""Error taxonomy for the text model."""

from __future__ import annotations

from typing import Optional


class TextCoreError(RuntimeError):
    """Base class for every error raised by the buffer layer."""


class OutOfBounds(TextCoreError):
    """Raised when an index lies beyond a line or document extent."""

    def __init__(
        self, message: str, *, index: int | None = None, limit: int | None = None
    ) -> None:
        super().__init__(message)
        self.index = index
        self.limit = limit


class EmptyLine(TextCoreError):
    """Raised when a mutation needs a grapheme but the line has none."""


class Malformed(TextCoreError):
    """Raised at load time when content does not decode as text."""

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        position: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.position = position


__all__ = ["TextCoreError", "OutOfBounds", "EmptyLine", "Malformed"]
