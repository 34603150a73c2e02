"""Integration tests for signal system with tick engine."""
from __future__ import annotations

from tick_signal import SignalBus, make_signal_system
from tick import Engine


def test_system_flushes_bus():
    """Signals published by an earlier system are delivered in the same tick."""
    bus = SignalBus()
    engine = Engine(tps=20, seed=42)
    received = []

    bus.subscribe("test_event", lambda name, data: received.append((name, data)))
    engine.add_system(lambda ctx: bus.publish("test_event", tick=ctx.tick_number))
    engine.add_system(make_signal_system(bus))

    engine.run(1)

    assert received == [("test_event", {"tick": 1})]


def test_scheduled_callbacks_flush_same_tick():
    """Scheduler callbacks run before systems, so their signals flush that tick."""
    bus = SignalBus()
    engine = Engine(tps=20, seed=42)
    received = []

    bus.subscribe("timer", lambda name, data: received.append(engine.clock.tick_number))
    engine.scheduler.after(3, lambda: bus.publish("timer"))
    engine.add_system(make_signal_system(bus))

    engine.run(5)
    assert received == [3]
