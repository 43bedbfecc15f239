"""Insert-mode verbs that are not plain text entry."""

from __future__ import annotations

from typing import Dict

from textcore.modes.base_mode import KeyInput, ModeContext, ModeResult
from textcore.modes.keymap_helpers import Action


def exit_insert(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    # Step back onto the last typed grapheme, as vi does.
    context.buffer.move_left(1)
    return ModeResult(consumed=True, switch_to="normal", message="exit_insert")


def backspace(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    edit = context.buffer.delete_char_before_cursor()
    if not edit.text:
        return ModeResult(consumed=True, status="noop")
    return ModeResult(consumed=True, status="deleted", message=edit.text)


def cursor_right(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    motion = context.buffer.move_right_forced(1)
    return ModeResult(consumed=True, status="moved" if motion.moved else "noop")


def cursor_left(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    motion = context.buffer.move_left(1)
    return ModeResult(consumed=True, status="moved" if motion.moved else "noop")


INSERT_ACTIONS: Dict[str, Action] = {
    "ESC": exit_insert,
    "BACKSPACE": backspace,
    "RIGHT": cursor_right,
    "LEFT": cursor_left,
}


__all__ = [
    "INSERT_ACTIONS",
    "exit_insert",
    "backspace",
    "cursor_right",
    "cursor_left",
]
