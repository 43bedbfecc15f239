"""Key, result, and context types shared by every mode."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from textcore.buffer import Buffer

DEFAULT_VIEWPORT_HEIGHT = 24

Listener = Callable[[object], None]


@dataclass(slots=True)
class KeyInput:
    """A key as the host reports it.

    ``key`` is the binding token (``"j"``, ``"ESC"``); ``text`` carries what
    the key would type, if anything.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Buffer and bus handed to every action.

    The host keeps ``viewport_height`` in step with the screen so vertical
    motions scroll at the right row.
    """

    buffer: Buffer
    bus: "ModeBus"
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Named events fanned out to listeners in subscription order."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def subscribe(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def emit(self, event: str, payload: object | None = None) -> None:
        for listener in self._listeners.get(event, ()):
            listener(payload)


class Mode:
    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    def handle_key(self, key: KeyInput) -> ModeResult:
        raise NotImplementedError(f"{type(self).__name__} does not handle keys")
