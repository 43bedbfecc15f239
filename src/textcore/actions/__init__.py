"""Editing verbs bound to keys by the modes."""

from .insert import INSERT_ACTIONS
from .normal import NORMAL_ACTIONS

__all__ = ["INSERT_ACTIONS", "NORMAL_ACTIONS"]
