"""Lifecycle states sequenced by the controller."""

from .base import State
from .init_state import InitState
from .start_state import StartState
from .stop_state import StopState

__all__ = ["State", "InitState", "StartState", "StopState"]
