"""Simulator states and terminal reasons."""
from __future__ import annotations

from enum import Enum


class PuzzleState(Enum):
    IDLE = "idle"
    EXECUTING = "executing"
    SUCCESS = "success"
    FAILURE = "failure"


class FailureReason(Enum):
    WALL_HIT = "wall_hit"
    WRONG_ENDPOINT = "wrong_endpoint"


class SnakeState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameOverReason(Enum):
    WALL = "wall"
    SELF = "self"


PUZZLE_TRANSITIONS: dict[PuzzleState, tuple[PuzzleState, ...]] = {
    PuzzleState.IDLE: (PuzzleState.IDLE, PuzzleState.EXECUTING),
    PuzzleState.EXECUTING: (PuzzleState.SUCCESS, PuzzleState.FAILURE, PuzzleState.IDLE),
    PuzzleState.SUCCESS: (PuzzleState.IDLE,),
    PuzzleState.FAILURE: (PuzzleState.IDLE,),
}

SNAKE_TRANSITIONS: dict[SnakeState, tuple[SnakeState, ...]] = {
    SnakeState.RUNNING: (SnakeState.RUNNING, SnakeState.GAME_OVER),
    SnakeState.GAME_OVER: (SnakeState.RUNNING,),
}
