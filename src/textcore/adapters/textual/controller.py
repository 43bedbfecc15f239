"""Textual-facing controller: key events in, viewport mirrors out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from textcore.buffer import BufferMirror
from textcore.modes import KeyInput, ModeManager, ModeResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_viewport: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges a ModeManager and its bus to a Textual-friendly surface."""

    EVENTS = ("mode.switch", "buffer.delete", "editor.quit")

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        for event in self.EVENTS:
            manager.context.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        self.refresh()

    @property
    def viewport_height(self) -> int:
        return self.manager.context.viewport_height

    def resize(self, height: int) -> None:
        """Adopt a new viewport height and repaint."""

        height = max(1, height)
        self.manager.context.viewport_height = height
        self.manager.context.buffer.fit_viewport(height)
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized or None)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized)
        )
        self.hooks.update_status(self.status_line(result))
        self.refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def refresh(self) -> BufferMirror:
        mirror = self.manager.context.buffer.mirror(
            self.viewport_height, attributes={"mode": self._mode_name()}
        )
        self.hooks.update_viewport(mirror)
        return mirror

    def status_line(self, result: Optional[ModeResult] = None) -> str:
        buffer = self.manager.context.buffer
        column, _row = buffer.caret()
        parts = [
            f"-- {self._mode_name().upper()} --",
            f"{buffer.line_index + 1}:{buffer.cursor.column + 1}",
            f"col {column + 1}",
        ]
        if result is not None and result.message:
            parts.append(result.message)
        return "  ".join(parts)

    def _mode_name(self) -> str:
        active = self.manager.active_mode
        return active.name if active else "?"

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        buffer = self.manager.context.buffer
        snapshot: Dict[str, object] = {
            "mode": self._mode_name(),
            "cursor": buffer.cursor.position,
            "sticky": buffer.cursor.remembered_column,
            "offset": buffer.viewport_offset,
            "version": buffer.version,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
