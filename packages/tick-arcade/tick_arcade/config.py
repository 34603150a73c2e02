"""Difficulty presets, reward tiers and simulator settings."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultyPreset:
    """Board size and obstacle density base for one difficulty."""

    width: int
    height: int
    obstacle_base: int


PRESETS: dict[Difficulty, DifficultyPreset] = {
    Difficulty.EASY: DifficultyPreset(width=10, height=10, obstacle_base=2),
    Difficulty.MEDIUM: DifficultyPreset(width=15, height=15, obstacle_base=4),
    Difficulty.HARD: DifficultyPreset(width=30, height=30, obstacle_base=6),
}


def preset_for(difficulty: Difficulty | str) -> DifficultyPreset:
    return PRESETS[Difficulty(difficulty)]


@dataclass(frozen=True)
class RewardTier:
    """A collectible class: points awarded and relative draw weight."""

    name: str
    points: int
    weight: float


DEFAULT_REWARDS: tuple[RewardTier, ...] = (
    RewardTier(name="apple", points=10, weight=0.85),
    RewardTier(name="golden", points=50, weight=0.15),
)


def validate_rewards(tiers: tuple[RewardTier, ...]) -> None:
    """Require two or more tiers where any rarer tier pays strictly more.

    Raises ValueError otherwise.
    """
    if len(tiers) < 2:
        raise ValueError("At least two reward tiers are required")
    for tier in tiers:
        if tier.points < 1:
            raise ValueError(f"Tier {tier.name!r} must award at least 1 point")
        if tier.weight <= 0:
            raise ValueError(f"Tier {tier.name!r} must have a positive weight")
    for a in tiers:
        for b in tiers:
            if a.weight < b.weight and a.points <= b.points:
                raise ValueError(
                    f"Rarer tier {a.name!r} must pay more than {b.name!r}"
                )


@dataclass(frozen=True)
class PuzzleConfig:
    difficulty: Difficulty = Difficulty.EASY
    step_seconds: float = 0.5
    points_per_round: int = 100
    unique_obstacles: bool = True
    require_path: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "difficulty", Difficulty(self.difficulty))
        if self.step_seconds < 0:
            raise ValueError("step_seconds must be non-negative")
        if self.points_per_round < 0:
            raise ValueError("points_per_round must be non-negative")

    @property
    def preset(self) -> DifficultyPreset:
        return PRESETS[self.difficulty]


@dataclass(frozen=True)
class SnakeConfig:
    width: int = 20
    height: int = 20
    tick_seconds: float = 0.15
    rewards: tuple[RewardTier, ...] = field(default=DEFAULT_REWARDS)

    def __post_init__(self) -> None:
        if self.tick_seconds < 0:
            raise ValueError("tick_seconds must be non-negative")
        validate_rewards(self.rewards)
