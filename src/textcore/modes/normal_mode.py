"""Normal (command) mode: single keys map to motions and edits."""

from __future__ import annotations

from typing import Mapping, Optional

from textcore.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .defaults import load_default_actions
from .keymap_helpers import Action, dispatch


class NormalMode(Mode):
    name = "normal"

    def __init__(
        self,
        context: ModeContext,
        *,
        actions: Optional[Mapping[str, Action]] = None,
    ) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("textcore.modes.normal")
        self._actions = (
            load_default_actions(self.name) if actions is None else dict(actions)
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = dispatch(self.name, self._actions, self.context, key)
        if result is None:
            return ModeResult(consumed=False, status="unbound", message=key.key)
        return result
