"""Default key tables for the built-in modes."""

from __future__ import annotations

from typing import Dict

from .keymap_helpers import Action


def load_default_actions(mode_name: str) -> Dict[str, Action]:
    # Imported lazily: the action modules depend on the mode types.
    from textcore.actions.insert import INSERT_ACTIONS
    from textcore.actions.normal import NORMAL_ACTIONS

    tables = {"normal": NORMAL_ACTIONS, "insert": INSERT_ACTIONS}
    if mode_name not in tables:
        raise KeyError(f"No default actions for mode '{mode_name}'")
    return dict(tables[mode_name])


__all__ = ["load_default_actions"]
