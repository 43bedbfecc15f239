"""Executable Textual app that hosts the textcore editor."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

import grapheme

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textcore.adapters.textual.app"
    ) from exc

from textcore.buffer import Buffer, BufferMirror, Malformed
from textcore.modes import ModeBus, ModeContext, ModeManager, create_default_manager
from textcore.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "backspace": "BACKSPACE",
    "tab": "TAB",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
}


def load_buffer(path: Optional[str]) -> Buffer:
    """Read ``path`` into a buffer; a missing file opens as an empty document."""

    if not path:
        return Buffer(name="[scratch]")
    file = Path(path)
    data = file.read_bytes() if file.exists() else b""
    return Buffer.from_bytes(data, name=file.name)


def paint(mirror: BufferMirror) -> Text:
    """Rich text for the viewport with the caret cell shown in reverse video."""

    content = Text(no_wrap=True)
    caret_row = mirror.caret[1]
    for index, row in enumerate(mirror.rows):
        if index:
            content.append("\n")
        if index != caret_row:
            content.append(row)
            continue
        head, tail = row[: mirror.caret_offset], row[mirror.caret_offset :]
        cell = next(grapheme.graphemes(tail), "")
        content.append(head)
        content.append(cell or " ", style="reverse")
        content.append(tail[len(cell) :])
    return content


class TextcoreApp(App[None]):
    """Single-buffer modal editor view."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		overflow: hidden;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, buffer: Buffer) -> None:
        super().__init__()
        self.manager: ModeManager = create_default_manager(
            ModeContext(buffer=buffer, bus=ModeBus())
        )
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_viewport=self._update_viewport,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)
        self._update_status(self.adapter.status_line())
        self.call_after_refresh(self._sync_viewport_height)

    def on_resize(self, event: events.Resize) -> None:
        del event
        self.call_after_refresh(self._sync_viewport_height)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _sync_viewport_height(self) -> None:
        if self.adapter and self._buffer_widget:
            self.adapter.resize(self._buffer_widget.content_size.height)

    def _update_viewport(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(paint(mirror))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        del payload
        if name == "editor.quit":
            self.exit()

    def _log_line(self, line: str) -> None:
        telemetry.record_event("app.trace", level="debug", data={"line": line})

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key == "ctrl+q":
            return None
        if key in NAMED_KEYS:
            text = "\t" if key == "tab" else None
            return (NAMED_KEYS[key], text, ())
        if key.startswith("ctrl+"):
            return (key[len("ctrl+") :], None, ("CTRL",))
        if event.character and event.is_printable:
            return (event.character, event.character, ())
        return (key.upper(), None, ())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a file with textcore.")
    parser.add_argument(
        "path",
        nargs="?",
        help="File to open; a missing file starts an empty document",
    )
    parser.add_argument(
        "--log-preset",
        default=os.environ.get("TEXTCORE_LOG_PRESET", "quiet"),
        choices=sorted(telemetry.PRESETS),
        help="Telemetry preset (default: quiet, keeps the terminal clean)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    try:
        buffer = load_buffer(args.path)
    except Malformed as exc:
        raise SystemExit(f"textcore: {args.path}: {exc}") from exc
    TextcoreApp(buffer).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
