"""Command handlers wiring the input queue to the simulators."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_command import CommandQueue

from tick_arcade.commands import (
    ClearProgram,
    QueueInstruction,
    ResetRound,
    RestartGame,
    RunProgram,
    SelectDifficulty,
    Steer,
    UndoInstruction,
)
from tick_arcade.config import Difficulty
from tick_arcade.states import PuzzleState
from tick_grid import Instruction

if TYPE_CHECKING:
    from tick import TickContext

    from tick_arcade.interpreter import InstructionInterpreter
    from tick_arcade.snake import TickSimulator


def register_puzzle_handlers(queue: CommandQueue, puzzle: InstructionInterpreter) -> None:
    """Route puzzle commands to *puzzle*. Unknown names are rejected, not raised."""

    def handle_queue(cmd: QueueInstruction, ctx: TickContext) -> bool:
        try:
            instruction = Instruction.from_name(cmd.direction)
        except ValueError:
            return False
        return puzzle.enqueue(instruction)

    def handle_undo(cmd: UndoInstruction, ctx: TickContext) -> bool:
        return puzzle.undo()

    def handle_clear(cmd: ClearProgram, ctx: TickContext) -> bool:
        return puzzle.clear()

    def handle_run(cmd: RunProgram, ctx: TickContext) -> bool:
        return puzzle.run()

    def handle_reset(cmd: ResetRound, ctx: TickContext) -> bool:
        puzzle.reset_round()
        return True

    def handle_restart(cmd: RestartGame, ctx: TickContext) -> bool:
        puzzle.restart()
        return True

    def handle_difficulty(cmd: SelectDifficulty, ctx: TickContext) -> bool:
        try:
            difficulty = Difficulty(cmd.difficulty)
        except ValueError:
            return False
        # Switching mid-run would discard the player's program under them.
        if puzzle.state is PuzzleState.EXECUTING:
            return False
        puzzle.set_difficulty(difficulty)
        return True

    queue.handle(QueueInstruction, handle_queue)
    queue.handle(UndoInstruction, handle_undo)
    queue.handle(ClearProgram, handle_clear)
    queue.handle(RunProgram, handle_run)
    queue.handle(ResetRound, handle_reset)
    queue.handle(RestartGame, handle_restart)
    queue.handle(SelectDifficulty, handle_difficulty)


def register_snake_handlers(queue: CommandQueue, snake: TickSimulator) -> None:
    """Route snake commands to *snake*."""

    def handle_steer(cmd: Steer, ctx: TickContext) -> bool:
        return snake.set_direction((cmd.dx, cmd.dy))

    def handle_restart(cmd: RestartGame, ctx: TickContext) -> bool:
        snake.reset()
        return True

    queue.handle(Steer, handle_steer)
    queue.handle(RestartGame, handle_restart)
