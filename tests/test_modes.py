from __future__ import annotations

from typing import List, Tuple

import pytest

from textcore.buffer import Buffer
from textcore.modes import (
    InsertMode,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeResult,
    NormalMode,
    create_default_manager,
)
from textcore.modes.defaults import load_default_actions


def make_manager(*lines: str, height: int = 24) -> ModeManager:
    context = ModeContext(
        buffer=Buffer.from_text("\n".join(lines)),
        bus=ModeBus(),
        viewport_height=height,
    )
    return create_default_manager(context)


def press(manager: ModeManager, *keys: str) -> ModeResult:
    result = ModeResult(consumed=False)
    for key in keys:
        text = key if len(key) == 1 else None
        result = manager.handle_key(KeyInput(key=key, text=text))
    return result


def mode_name(manager: ModeManager) -> str:
    assert manager.active_mode is not None
    return manager.active_mode.name


def test_default_manager_starts_in_normal_mode() -> None:
    manager = make_manager("abc")

    assert mode_name(manager) == "normal"
    assert manager.context.extras["mode_manager"] is manager


def test_insert_then_escape_steps_back() -> None:
    manager = make_manager("abc")

    result = press(manager, "i")
    assert result.switch_to == "insert"
    assert mode_name(manager) == "insert"

    press(manager, "x", "y")
    press(manager, "ESC")

    buffer = manager.context.buffer
    assert buffer.current_line().raw == "xyabc"
    assert buffer.cursor.column == 1
    assert mode_name(manager) == "normal"


def test_append_at_line_end() -> None:
    manager = make_manager("abc")

    press(manager, "A", "d", "e")

    buffer = manager.context.buffer
    assert buffer.current_line().raw == "abcde"
    assert buffer.cursor.column == 5

    press(manager, "ESC")
    assert buffer.cursor.column == 4


def test_append_on_empty_line_inserts_at_start() -> None:
    manager = make_manager("")

    press(manager, "a", "z")

    assert manager.context.buffer.current_line().raw == "z"


def test_insert_at_first_nonblank() -> None:
    manager = make_manager("    code")
    press(manager, "$")

    press(manager, "I", "#")

    assert manager.context.buffer.current_line().raw == "    #code"


def test_motion_keys_report_status() -> None:
    manager = make_manager("ab", "cd")

    assert press(manager, "l").status == "moved"
    assert press(manager, "l").status == "noop"
    assert press(manager, "j").status == "moved"
    assert press(manager, "DOWN").status == "noop"
    assert press(manager, "0").status == "moved"
    assert manager.context.buffer.cursor.position == (0, 1)


def test_motions_use_context_viewport_height() -> None:
    manager = make_manager("a", "b", "c", "d", height=2)

    press(manager, "j", "j", "j")

    buffer = manager.context.buffer
    assert buffer.viewport_offset == 2
    assert buffer.cursor.row == 1


def test_delete_char_emits_event() -> None:
    manager = make_manager("abc")
    deleted: List[object] = []
    manager.context.bus.subscribe("buffer.delete", deleted.append)

    result = press(manager, "x")

    assert result.status == "deleted"
    assert result.message == "a"
    assert deleted == [{"text": "a"}]
    assert manager.context.buffer.current_line().raw == "bc"


def test_delete_on_empty_line_reports_without_event() -> None:
    manager = make_manager("")
    deleted: List[object] = []
    manager.context.bus.subscribe("buffer.delete", deleted.append)

    result = press(manager, "x")

    assert result.consumed is True
    assert result.status == "empty_line"
    assert deleted == []


def test_open_line_below_and_above() -> None:
    manager = make_manager("one", "two")

    press(manager, "o", "x", "ESC")
    press(manager, "O", "y", "ESC")

    buffer = manager.context.buffer
    assert [line.raw for line in buffer.lines] == ["one", "y", "x", "two"]
    assert buffer.line_index == 1


def test_quit_emits_editor_quit() -> None:
    manager = make_manager("abc")
    events: List[object] = []
    manager.context.bus.subscribe("editor.quit", events.append)

    result = press(manager, "q")

    assert result.status == "quit"
    assert events == [{"buffer": "default"}]


def test_unbound_normal_key_is_not_consumed() -> None:
    manager = make_manager("abc")

    result = press(manager, "Z")

    assert result.consumed is False
    assert result.status == "unbound"
    assert result.message == "Z"
    assert manager.context.buffer.version == 0


def test_insert_mode_backspace_and_arrows() -> None:
    manager = make_manager("ab")
    press(manager, "i")

    assert press(manager, "BACKSPACE").status == "noop"
    assert press(manager, "RIGHT", "RIGHT").status == "moved"
    assert press(manager, "BACKSPACE").message == "b"
    assert press(manager, "LEFT").status == "moved"
    assert manager.context.buffer.current_line().raw == "a"


def test_insert_mode_accepts_tab_and_clusters() -> None:
    manager = make_manager("")
    press(manager, "i")

    manager.handle_key(KeyInput(key="TAB", text="\t"))
    result = manager.handle_key(KeyInput(key="y", text="y\u0306"))

    buffer = manager.context.buffer
    assert result.status == "inserted"
    assert buffer.current_line().raw == "\ty\u0306"
    assert buffer.cursor.column == 2


def test_insert_mode_ignores_control_text_and_modified_keys() -> None:
    manager = make_manager("ab")
    press(manager, "i")

    control = manager.handle_key(KeyInput(key="a", text="\x01"))
    modified = manager.handle_key(KeyInput(key="s", text="s", modifiers=("CTRL",)))

    assert control.consumed is False
    assert modified.status == "unbound"
    assert manager.context.buffer.current_line().raw == "ab"


def test_mode_switch_is_published_on_bus() -> None:
    manager = make_manager("abc")
    switches: List[object] = []
    manager.context.bus.subscribe("mode.switch", switches.append)

    press(manager, "i", "ESC")

    assert switches == ["insert", "normal"]


def test_register_and_switch_errors() -> None:
    manager = make_manager("abc")

    with pytest.raises(ValueError):
        manager.register_mode(NormalMode)
    with pytest.raises(KeyError):
        manager.switch_mode("visual")


def test_manager_without_modes_refuses_keys() -> None:
    manager = ModeManager(ModeContext(buffer=Buffer(), bus=ModeBus()))

    with pytest.raises(RuntimeError):
        manager.handle_key(KeyInput(key="j"))


def test_custom_action_table_overrides_defaults() -> None:
    calls: List[Tuple[str, str]] = []

    def record(context: ModeContext, key: KeyInput) -> ModeResult:
        calls.append((context.buffer.name, key.key))
        return ModeResult(consumed=True, status="custom")

    context = ModeContext(buffer=Buffer(name="scratch"), bus=ModeBus())
    manager = ModeManager(context)
    manager.register_mode(InsertMode, actions={"ESC": record})

    assert manager.handle_key(KeyInput(key="ESC")).status == "custom"
    assert calls == [("scratch", "ESC")]


def test_load_default_actions_rejects_unknown_mode() -> None:
    assert "x" in load_default_actions("normal")
    with pytest.raises(KeyError):
        load_default_actions("visual")


def test_insert_mode_rejects_marks_that_would_merge() -> None:
    manager = make_manager("ab")
    press(manager, "a")

    result = manager.handle_key(KeyInput(key="\u0301", text="\u0301"))

    buffer = manager.context.buffer
    assert result.consumed is True
    assert result.status == "rejected"
    assert buffer.current_line().raw == "ab"
    assert buffer.cursor.column == 1


def test_base_mode_exposes_buffer_but_handles_no_keys() -> None:
    context = ModeContext(buffer=Buffer(name="scratch"), bus=ModeBus())
    mode = Mode(context)

    assert mode.buffer is context.buffer
    with pytest.raises(NotImplementedError):
        mode.handle_key(KeyInput(key="j"))
