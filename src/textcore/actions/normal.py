"""Normal-mode verbs: motions, single-grapheme edits, line openers."""

from __future__ import annotations

from typing import Dict

from textcore.buffer import Edit, Motion
from textcore.modes.base_mode import KeyInput, ModeContext, ModeResult
from textcore.modes.keymap_helpers import Action


def _motion_result(motion: Motion) -> ModeResult:
    return ModeResult(consumed=True, status="moved" if motion.moved else "noop")


def _enter_insert(message: str) -> ModeResult:
    return ModeResult(consumed=True, switch_to="insert", message=message)


def move_down(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    return _motion_result(context.buffer.move_down(1, context.viewport_height))


def move_up(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    return _motion_result(context.buffer.move_up(1))


def move_right(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    return _motion_result(context.buffer.move_right(1))


def move_left(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    return _motion_result(context.buffer.move_left(1))


def move_to_first_nonblank(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    return _motion_result(context.buffer.move_to_first_nonblank())


def move_to_line_start(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    return _motion_result(context.buffer.move_to_line_start())


def move_to_line_end(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    return _motion_result(context.buffer.move_to_line_end())


def insert_before_cursor(context: ModeContext, key: KeyInput) -> ModeResult:
    del context, key
    return _enter_insert("enter_insert")


def insert_at_first_nonblank(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    context.buffer.move_to_first_nonblank()
    return _enter_insert("enter_insert")


def append_after_cursor(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    context.buffer.move_right_forced(1)
    return _enter_insert("enter_append")


def append_at_line_end(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    context.buffer.move_to_line_end()
    context.buffer.move_right_forced(1)
    return _enter_insert("enter_append")


def delete_char(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    edit: Edit = context.buffer.delete_char_at_cursor()
    if not edit.ok:
        return ModeResult(consumed=True, status="empty_line")
    context.bus.emit("buffer.delete", {"text": edit.text})
    return ModeResult(consumed=True, status="deleted", message=edit.text)


def open_line_below(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    context.buffer.insert_line_after(context.viewport_height)
    return _enter_insert("open_line")


def open_line_above(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    context.buffer.insert_line_before()
    return _enter_insert("open_line")


def quit_editor(context: ModeContext, key: KeyInput) -> ModeResult:
    del key
    context.bus.emit("editor.quit", {"buffer": context.buffer.name})
    return ModeResult(consumed=True, status="quit", message="quit")


NORMAL_ACTIONS: Dict[str, Action] = {
    "j": move_down,
    "k": move_up,
    "l": move_right,
    "h": move_left,
    "DOWN": move_down,
    "UP": move_up,
    "RIGHT": move_right,
    "LEFT": move_left,
    "_": move_to_first_nonblank,
    "0": move_to_line_start,
    "$": move_to_line_end,
    "i": insert_before_cursor,
    "I": insert_at_first_nonblank,
    "a": append_after_cursor,
    "A": append_at_line_end,
    "x": delete_char,
    "o": open_line_below,
    "O": open_line_above,
    "q": quit_editor,
}


__all__ = [
    "NORMAL_ACTIONS",
    "move_down",
    "move_up",
    "move_right",
    "move_left",
    "move_to_first_nonblank",
    "move_to_line_start",
    "move_to_line_end",
    "insert_before_cursor",
    "insert_at_first_nonblank",
    "append_after_cursor",
    "append_at_line_end",
    "delete_char",
    "open_line_below",
    "open_line_above",
    "quit_editor",
]
