"""Tests for command handlers routing input to the simulators."""
from __future__ import annotations

import random

import pytest
from tick import Engine, Scheduler
from tick_command import CommandQueue
from tick_grid import GridWorld, Instruction, Level

from tick_arcade import (
    ClearProgram,
    InstructionInterpreter,
    PuzzleState,
    QueueInstruction,
    ResetRound,
    RestartGame,
    RunProgram,
    SelectDifficulty,
    SnakeState,
    Steer,
    TickSimulator,
    UndoInstruction,
    register_puzzle_handlers,
    register_snake_handlers,
)


@pytest.fixture
def ctx():
    engine = Engine(tps=20, seed=42)
    return engine.clock.context(lambda: None, engine.rng)


@pytest.fixture
def puzzle_queue():
    sched = Scheduler()
    level = Level(GridWorld(10, 10), (0, 4), (9, 4))
    puzzle = InstructionInterpreter(sched, rng=random.Random(1), level=level)
    queue = CommandQueue()
    register_puzzle_handlers(queue, puzzle)
    return sched, puzzle, queue


class TestPuzzleHandlers:
    def test_queue_and_undo(self, puzzle_queue, ctx):
        _, puzzle, queue = puzzle_queue
        queue.enqueue(QueueInstruction("right"))
        queue.enqueue(QueueInstruction("ArrowDown"))
        queue.enqueue(UndoInstruction())
        results = queue.drain(ctx)
        assert [ok for _, ok in results] == [True, True, True]
        assert puzzle.program == (Instruction.RIGHT,)

    def test_unknown_direction_rejected(self, puzzle_queue, ctx):
        _, puzzle, queue = puzzle_queue
        queue.enqueue(QueueInstruction("diagonal"))
        assert queue.drain(ctx) == [(QueueInstruction("diagonal"), False)]
        assert puzzle.program == ()

    def test_run_then_edits_rejected(self, puzzle_queue, ctx):
        _, puzzle, queue = puzzle_queue
        queue.enqueue(QueueInstruction("right"))
        queue.enqueue(RunProgram())
        queue.enqueue(QueueInstruction("right"))
        queue.enqueue(ClearProgram())
        queue.enqueue(RunProgram())
        results = queue.drain(ctx)
        assert [ok for _, ok in results] == [True, True, False, False, False]
        assert puzzle.state is PuzzleState.EXECUTING

    def test_select_difficulty(self, puzzle_queue, ctx):
        _, puzzle, queue = puzzle_queue
        queue.enqueue(SelectDifficulty("medium"))
        queue.enqueue(SelectDifficulty("impossible"))
        results = queue.drain(ctx)
        assert [ok for _, ok in results] == [True, False]
        assert puzzle.level.width == 15

    def test_select_difficulty_rejected_mid_run(self, puzzle_queue, ctx):
        _, puzzle, queue = puzzle_queue
        puzzle.enqueue(Instruction.RIGHT)
        puzzle.run()
        queue.enqueue(SelectDifficulty("hard"))
        assert queue.drain(ctx)[0][1] is False
        assert puzzle.level.width == 10

    def test_reset_and_restart(self, puzzle_queue, ctx):
        sched, puzzle, queue = puzzle_queue
        puzzle.run()
        assert puzzle.state is PuzzleState.FAILURE
        queue.enqueue(ResetRound())
        queue.drain(ctx)
        assert puzzle.state is PuzzleState.IDLE

        puzzle.score.add(40)
        queue.enqueue(RestartGame())
        queue.drain(ctx)
        assert puzzle.score.current() == 0
        assert puzzle.round_number == 1


class TestSnakeHandlers:
    def test_steer_and_reverse_rejection(self, ctx):
        snake = TickSimulator(Scheduler(), rng=random.Random(2),
                              body=[(5, 5), (4, 5)], direction=(1, 0))
        queue = CommandQueue()
        register_snake_handlers(queue, snake)
        queue.enqueue(Steer(-1, 0))
        queue.enqueue(Steer(0, -1))
        results = queue.drain(ctx)
        assert [ok for _, ok in results] == [False, True]
        assert snake.direction == (0, -1)

    def test_restart_resets_snake(self, ctx):
        snake = TickSimulator(Scheduler(), rng=random.Random(2),
                              body=[(0, 5)], direction=(-1, 0))
        queue = CommandQueue()
        register_snake_handlers(queue, snake)
        snake.tick()
        assert snake.state is SnakeState.GAME_OVER
        queue.enqueue(RestartGame())
        queue.drain(ctx)
        assert snake.state is SnakeState.RUNNING
        assert snake.length == 1
