"""Helpers for table-driven modes."""

from __future__ import annotations

from typing import Callable, Mapping

from textcore.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult

Action = Callable[[ModeContext, KeyInput], ModeResult]


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifier = "+".join(key.modifiers)
        return f"{modifier}+{key.key}"
    return key.key


def dispatch(
    mode_name: str,
    actions: Mapping[str, Action],
    context: ModeContext,
    key: KeyInput,
) -> ModeResult | None:
    """Run the action bound to ``key``; ``None`` when nothing is bound."""

    token = key_to_token(key)
    action = actions.get(token)
    if action is None:
        return None
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"mode": mode_name, "key": token, "action": action.__name__},
    ):
        return action(context, key)


__all__ = ["Action", "dispatch", "key_to_token"]
