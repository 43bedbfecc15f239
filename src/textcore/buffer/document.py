"""Turn raw document bytes into the line list a buffer is built from."""

from __future__ import annotations

from typing import List

from textcore.runtime import telemetry

from .errors import Malformed


def split_lines(data: bytes, *, encoding: str = "utf-8") -> List[str]:
    """Decode ``data`` and split it into lines.

    Lines end at ``\\n`` with one trailing ``\\r`` stripped. A final newline
    does not start an extra line, and empty input yields a single empty line.
    """

    if not data:
        return [""]
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as exc:
        line_number = data.count(b"\n", 0, exc.start) + 1
        telemetry.record_event(
            "document.malformed",
            level="warning",
            data={"line": line_number, "position": exc.start, "encoding": encoding},
        )
        raise Malformed(
            f"content is not valid {encoding} (line {line_number}, byte {exc.start})",
            line_number=line_number,
            position=exc.start,
        ) from exc

    return split_text(text)


def split_text(text: str) -> List[str]:
    if not text:
        return [""]
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


__all__ = ["split_lines", "split_text"]
