"""Insert mode: typed text goes into the buffer at the cursor."""

from __future__ import annotations

from typing import Mapping, Optional

import grapheme

from textcore.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .defaults import load_default_actions
from .keymap_helpers import Action, dispatch


def _insertable(cluster: str) -> bool:
    first = cluster[0]
    return cluster == "\t" or not (first < " " or first == "\x7f")


class InsertMode(Mode):
    name = "insert"

    def __init__(
        self,
        context: ModeContext,
        *,
        actions: Optional[Mapping[str, Action]] = None,
    ) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("textcore.modes.insert")
        self._actions = (
            load_default_actions(self.name) if actions is None else dict(actions)
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = dispatch(self.name, self._actions, self.context, key)
        if result is not None:
            return result
        if key.text and not key.modifiers:
            return self._insert_text(key.text)
        return ModeResult(consumed=False, status="unbound", message=key.key)

    def _insert_text(self, text: str) -> ModeResult:
        clusters = [c for c in grapheme.graphemes(text) if _insertable(c)]
        if not clusters:
            return ModeResult(consumed=False, status="unbound", message=text)
        inserted = []
        for cluster in clusters:
            try:
                self.buffer.insert_char(cluster)
            except ValueError as exc:
                telemetry.record_event(
                    "insert.rejected",
                    level="debug",
                    data={"text": cluster, "reason": str(exc)},
                )
                continue
            inserted.append(cluster)
        if not inserted:
            return ModeResult(consumed=True, status="rejected", message=text)
        return ModeResult(consumed=True, status="inserted", message="".join(inserted))
