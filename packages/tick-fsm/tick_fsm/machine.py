"""StateMachine - a single explicit state with a whitelisted transition table."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Generic, Iterable, Mapping, TypeVar

S = TypeVar("S", bound=Enum)


class InvalidTransition(RuntimeError):
    """Raised when a transition is not listed in the machine's table."""

    def __init__(self, source: Enum, target: Enum) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Illegal transition {source.name} -> {target.name}")


class StateMachine(Generic[S]):
    """Holds one enum state and only moves along declared edges.

    ``transitions`` maps each state to the states reachable from it.  A
    state with no entry is terminal.  Listeners registered with
    :meth:`on_transition` receive ``(old, new)`` after every move,
    including self-transitions.
    """

    def __init__(self, initial: S, transitions: Mapping[S, Iterable[S]]) -> None:
        self._initial = initial
        self._state = initial
        self._edges: dict[S, frozenset[S]] = {
            src: frozenset(targets) for src, targets in transitions.items()
        }
        self._listeners: list[Callable[[S, S], None]] = []

    @property
    def state(self) -> S:
        return self._state

    @property
    def initial(self) -> S:
        return self._initial

    def is_in(self, *states: S) -> bool:
        return self._state in states

    def can(self, target: S) -> bool:
        return target in self._edges.get(self._state, frozenset())

    def targets(self) -> frozenset[S]:
        return self._edges.get(self._state, frozenset())

    def go(self, target: S) -> S:
        """Move to *target*. Raises InvalidTransition if the edge is undeclared."""
        if not self.can(target):
            raise InvalidTransition(self._state, target)
        old = self._state
        self._state = target
        for listener in list(self._listeners):
            listener(old, target)
        return old

    def on_transition(self, listener: Callable[[S, S], None]) -> None:
        self._listeners.append(listener)

    def off_transition(self, listener: Callable[[S, S], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
