"""tick-signal - In-process event bus for the tick engine."""
from __future__ import annotations

from tick_signal.bus import ANY, SignalBus
from tick_signal.systems import make_signal_system

__all__ = ["ANY", "SignalBus", "make_signal_system"]
