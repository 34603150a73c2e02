"""CommandQueue — typed command routing with FIFO ordering."""
from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from tick import TickContext

logger = logging.getLogger(__name__)

Handler = Callable[[Any, "TickContext"], bool]


class CommandQueue:
    """Routes input-layer commands to typed handlers during the tick loop.

    Commands are user-defined frozen dataclasses, dispatched by exact type.
    A handler returns True to accept, False to reject; rejection is a normal
    outcome, not an error.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Handler] = {}
        self._pending: deque[Any] = deque()

    def handle(self, cmd_type: type[Any], handler: Handler) -> None:
        """Register ``handler(cmd, ctx) -> bool`` for *cmd_type*. Later calls overwrite."""
        self._handlers[cmd_type] = handler

    def handles(self, cmd_type: type[Any]) -> bool:
        return cmd_type in self._handlers

    def enqueue(self, cmd: Any) -> None:
        """Add a command to the queue.  Safe to call between ticks."""
        self._pending.append(cmd)

    def pending(self) -> int:
        return len(self._pending)

    def discard(self) -> int:
        """Drop every pending command without dispatching. Returns how many were dropped."""
        dropped = len(self._pending)
        self._pending.clear()
        return dropped

    def drain(self, ctx: TickContext) -> list[tuple[Any, bool]]:
        """Process all pending commands.  Returns ``[(cmd, accepted), ...]``.

        Raises ``TypeError`` if no handler is registered for a command's type;
        the offending command is consumed, later ones stay queued.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            cmd_type = type(cmd)
            handler = self._handlers.get(cmd_type)
            if handler is None:
                raise TypeError(
                    f"No handler registered for {cmd_type.__qualname__}"
                )
            accepted = bool(handler(cmd, ctx))
            if not accepted:
                logger.debug("Rejected %r at tick %d", cmd, ctx.tick_number)
            results.append((cmd, accepted))
        return results
