"""Scheduler - tick-driven one-shot and recurring callbacks with cancel handles."""

from __future__ import annotations

import heapq

from tick.types import Callback


class Handle:
    """Cancellation handle returned by :meth:`Scheduler.after` and :meth:`Scheduler.every`.

    ``cancel()`` is idempotent: cancelling a fired one-shot or an already
    cancelled handle does nothing.
    """

    __slots__ = ("_callback", "_interval", "_due", "_cancelled", "_done")

    def __init__(self, callback: Callback, due: int, interval: int | None) -> None:
        self._callback = callback
        self._interval = interval
        self._due = due
        self._cancelled = False
        self._done = False

    @property
    def due(self) -> int:
        return self._due

    @property
    def interval(self) -> int | None:
        return self._interval

    @property
    def periodic(self) -> bool:
        return self._interval is not None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not (self._cancelled or self._done)

    def cancel(self) -> None:
        self._cancelled = True

    def __repr__(self) -> str:
        kind = f"every {self._interval}" if self._interval is not None else "once"
        state = "active" if self.active else "inactive"
        return f"Handle(due={self._due}, {kind}, {state})"


class Scheduler:
    """Fires callbacks after a delay or on a fixed interval, counted in ticks.

    Entries fire in order of due tick, then scheduling order.  A callback
    scheduled while another is firing is never due before the next tick,
    so one ``advance()`` cannot cascade into itself.
    """

    def __init__(self) -> None:
        self._now = 0
        self._seq = 0
        self._heap: list[tuple[int, int, Handle]] = []

    @property
    def now(self) -> int:
        return self._now

    def after(self, delay: int, callback: Callback) -> Handle:
        if delay < 1:
            raise ValueError(f"delay must be at least 1 tick, got {delay}")
        handle = Handle(callback, self._now + delay, None)
        self._push(handle)
        return handle

    def every(self, interval: int, callback: Callback) -> Handle:
        if interval < 1:
            raise ValueError(f"interval must be at least 1 tick, got {interval}")
        handle = Handle(callback, self._now + interval, interval)
        self._push(handle)
        return handle

    def _push(self, handle: Handle) -> None:
        heapq.heappush(self._heap, (handle._due, self._seq, handle))
        self._seq += 1

    def advance(self, ticks: int = 1) -> int:
        """Move time forward and fire everything that came due.

        Returns the number of callbacks invoked.
        """
        fired = 0
        for _ in range(ticks):
            self._now += 1
            while self._heap and self._heap[0][0] <= self._now:
                _, _, handle = heapq.heappop(self._heap)
                if not handle.active:
                    continue
                if handle._interval is None:
                    handle._done = True
                handle._callback()
                fired += 1
                if handle._interval is not None and not handle._cancelled:
                    handle._due += handle._interval
                    self._push(handle)
        return fired

    def pending(self) -> int:
        """Return the number of live (not cancelled, not fired) entries."""
        return sum(1 for _, _, handle in self._heap if handle.active)

    def cancel_all(self) -> None:
        for _, _, handle in self._heap:
            handle.cancel()
        self._heap.clear()
