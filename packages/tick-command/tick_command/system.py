"""System factory for the command queue."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from tick_command.queue import CommandQueue

if TYPE_CHECKING:
    from tick import TickContext


def make_command_system(
    queue: CommandQueue,
    on_accept: Callable[[Any], None] | None = None,
    on_reject: Callable[[Any], None] | None = None,
) -> Callable[[TickContext], None]:
    """Return a system that drains the command queue each tick.

    ``on_accept(cmd)`` fires after a handler returns True.
    ``on_reject(cmd)`` fires after a handler returns False.
    """

    def command_system(ctx: TickContext) -> None:
        for cmd, accepted in queue.drain(ctx):
            callback = on_accept if accepted else on_reject
            if callback is not None:
                callback(cmd)

    return command_system
