"""tick-fsm - Finite state machine primitives for the tick engine."""
from __future__ import annotations

from tick_fsm.machine import InvalidTransition, StateMachine

__all__ = ["InvalidTransition", "StateMachine"]
