"""In-memory pub/sub event bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

# Subscribing to this name receives every signal.
ANY = "*"


class SignalBus:
    """Queues published signals and dispatches them on ``flush()``.

    Publishers never call into subscribers directly, so a simulator can
    publish from inside a scheduled callback without re-entering the UI.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Dispatch queued signals in FIFO order. Returns how many were dispatched.

        Signals published by handlers during the flush wait for the next one.
        """
        batch = self._queue
        self._queue = []
        for signal_name, data in batch:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
            for handler in list(self._subscribers.get(ANY, ())):
                handler(signal_name, data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()
