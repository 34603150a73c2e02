"""Engine - core loop, pacing, and lifecycle hooks."""

import os
import random
import time
from typing import Callable

from tick.clock import Clock
from tick.scheduler import Scheduler
from tick.types import System, TickContext


class Engine:
    """Fixed-timestep driver.

    Each tick advances the clock, fires due scheduler entries, then runs
    systems in registration order.
    """

    def __init__(self, tps: int = 20, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._scheduler = Scheduler()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        self._scheduler.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Callable[[TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)

    def shutdown(self) -> None:
        """Cancel every scheduled callback. Safe to call more than once."""
        self._scheduler.cancel_all()
