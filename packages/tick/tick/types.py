"""Shared type aliases for the tick engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


Callback = Callable[[], None]

System = Callable[[TickContext], None]
