"""Modal dispatch: key events in, buffer operations out."""

from .base_mode import (
    DEFAULT_VIEWPORT_HEIGHT,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
)
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .mode_manager import ModeManager, create_default_manager

__all__ = [
    "DEFAULT_VIEWPORT_HEIGHT",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "ModeManager",
    "create_default_manager",
]
