"""Unit tests for SignalBus."""
from __future__ import annotations

from tick_signal import ANY, SignalBus


def test_subscribe_and_flush():
    """Subscribe handler, publish signal, flush dispatches to handler."""
    bus = SignalBus()
    received = []

    bus.subscribe("test_signal", lambda name, data: received.append((name, data)))
    bus.publish("test_signal", value=42)
    assert received == []
    assert bus.flush() == 1

    assert received == [("test_signal", {"value": 42})]


def test_publish_without_subscribe():
    bus = SignalBus()
    bus.publish("no_subscribers", value=123)
    assert bus.flush() == 1


def test_fifo_ordering():
    bus = SignalBus()
    received = []
    bus.subscribe("a", lambda name, data: received.append(data["n"]))
    for n in range(5):
        bus.publish("a", n=n)
    bus.flush()
    assert received == [0, 1, 2, 3, 4]


def test_wildcard_receives_everything():
    bus = SignalBus()
    received = []
    bus.subscribe(ANY, lambda name, data: received.append(name))
    bus.publish("puzzle.step")
    bus.publish("snake.ate")
    bus.flush()
    assert received == ["puzzle.step", "snake.ate"]


def test_signals_published_during_flush_wait():
    """A handler that publishes does not extend the current flush."""
    bus = SignalBus()
    received = []

    def echo(name, data):
        received.append(name)
        if name == "first":
            bus.publish("second")

    bus.subscribe("first", echo)
    bus.subscribe("second", echo)
    bus.publish("first")
    bus.flush()
    assert received == ["first"]
    assert bus.pending() == 1
    bus.flush()
    assert received == ["first", "second"]


def test_clear_without_dispatch():
    bus = SignalBus()
    received = []
    bus.subscribe("x", lambda name, data: received.append(name))
    bus.publish("x")
    bus.clear()
    assert bus.flush() == 0
    assert received == []


def test_unsubscribe():
    bus = SignalBus()
    received = []

    def handler(name, data):
        received.append(name)

    bus.subscribe("x", handler)
    bus.unsubscribe("x", handler)
    bus.publish("x")
    bus.flush()
    assert received == []


def test_unsubscribe_noop():
    """Unsubscribing an unknown handler or name does not raise."""
    bus = SignalBus()
    bus.unsubscribe("missing", lambda name, data: None)
    bus.subscribe("x", lambda name, data: None)
    bus.unsubscribe("x", lambda name, data: None)
