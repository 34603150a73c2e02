"""Tests for make_command_system with the engine."""
from __future__ import annotations

from dataclasses import dataclass

from tick import Engine
from tick_command import CommandQueue, make_command_system


@dataclass(frozen=True)
class Ping:
    ok: bool


def test_system_drains_each_tick():
    engine = Engine(tps=20, seed=42)
    queue = CommandQueue()
    ticks = []

    def on_ping(cmd, ctx):
        ticks.append(ctx.tick_number)
        return cmd.ok

    queue.handle(Ping, on_ping)
    engine.add_system(make_command_system(queue))

    queue.enqueue(Ping(True))
    engine.step()
    queue.enqueue(Ping(True))
    engine.step()
    engine.step()
    assert ticks == [1, 2]


def test_accept_and_reject_callbacks():
    engine = Engine(tps=20, seed=42)
    queue = CommandQueue()
    accepted, rejected = [], []

    queue.handle(Ping, lambda cmd, ctx: cmd.ok)
    engine.add_system(make_command_system(
        queue, on_accept=accepted.append, on_reject=rejected.append,
    ))
    queue.enqueue(Ping(True))
    queue.enqueue(Ping(False))
    engine.step()
    assert accepted == [Ping(True)]
    assert rejected == [Ping(False)]


def test_callbacks_optional():
    engine = Engine(tps=20, seed=42)
    queue = CommandQueue()
    queue.handle(Ping, lambda cmd, ctx: cmd.ok)
    engine.add_system(make_command_system(queue))
    queue.enqueue(Ping(False))
    engine.step()
    assert queue.pending() == 0
