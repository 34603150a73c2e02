"""ScoreKeeper - running point total for a play session."""
from __future__ import annotations


class ScoreKeeper:
    def __init__(self) -> None:
        self._total = 0

    def add(self, points: int) -> int:
        """Add *points* (must be non-negative). Returns the new total."""
        if points < 0:
            raise ValueError(f"Cannot add negative points ({points})")
        self._total += points
        return self._total

    def reset(self) -> None:
        self._total = 0

    def current(self) -> int:
        return self._total

    def __repr__(self) -> str:
        return f"ScoreKeeper({self._total})"
