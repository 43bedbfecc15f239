"""Grapheme-safe line buffer and cursor model for a modal text editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
