"""tick-command — Typed command queue for the tick engine."""
from tick_command.queue import CommandQueue
from tick_command.system import make_command_system

__all__ = [
    "CommandQueue",
    "make_command_system",
]
