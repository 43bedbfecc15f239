"""Host adapters that paint buffers and feed key events."""
