"""tick-arcade - Path-instruction puzzle and snake simulators on the tick engine."""
from __future__ import annotations

from tick_arcade.collectibles import Collectible, draw_tier, spawn_collectible
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
from tick_arcade.config import (
    DEFAULT_REWARDS,
    PRESETS,
    Difficulty,
    DifficultyPreset,
    PuzzleConfig,
    RewardTier,
    SnakeConfig,
    preset_for,
    validate_rewards,
)
from tick_arcade.handlers import register_puzzle_handlers, register_snake_handlers
from tick_arcade.interpreter import InstructionInterpreter
from tick_arcade.score import ScoreKeeper
from tick_arcade.snake import TickSimulator
from tick_arcade.snapshot import Outcome, PuzzleSnapshot, SnakeSnapshot
from tick_arcade.states import FailureReason, GameOverReason, PuzzleState, SnakeState

__all__ = [
    "Collectible",
    "draw_tier",
    "spawn_collectible",
    "ClearProgram",
    "QueueInstruction",
    "ResetRound",
    "RestartGame",
    "RunProgram",
    "SelectDifficulty",
    "Steer",
    "UndoInstruction",
    "DEFAULT_REWARDS",
    "PRESETS",
    "Difficulty",
    "DifficultyPreset",
    "PuzzleConfig",
    "RewardTier",
    "SnakeConfig",
    "preset_for",
    "validate_rewards",
    "register_puzzle_handlers",
    "register_snake_handlers",
    "InstructionInterpreter",
    "ScoreKeeper",
    "TickSimulator",
    "Outcome",
    "PuzzleSnapshot",
    "SnakeSnapshot",
    "FailureReason",
    "GameOverReason",
    "PuzzleState",
    "SnakeState",
]
