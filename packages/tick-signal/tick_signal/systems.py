"""System factories for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_signal.bus import SignalBus

if TYPE_CHECKING:
    from tick import TickContext


def make_signal_system(bus: SignalBus) -> Callable[[TickContext], None]:
    """Return a system that flushes *bus* once per tick. Register it last."""

    def signal_system(ctx: TickContext) -> None:
        bus.flush()

    return signal_system
