"""tick - A minimal fixed-timestep engine with a cancellable scheduler."""

from tick.clock import Clock
from tick.engine import Engine
from tick.scheduler import Handle, Scheduler
from tick.types import Callback, System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "Scheduler",
    "Handle",
    "TickContext",
    "Callback",
    "System",
]
