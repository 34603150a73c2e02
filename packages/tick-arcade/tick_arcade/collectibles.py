"""Collectible pickups and their weighted placement."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Collection

from tick_grid import GridWorld, Pos

from tick_arcade.config import RewardTier


@dataclass(frozen=True)
class Collectible:
    pos: Pos
    tier: RewardTier

    @property
    def points(self) -> int:
        return self.tier.points


def draw_tier(rng: random.Random, tiers: tuple[RewardTier, ...]) -> RewardTier:
    return rng.choices(tiers, weights=[t.weight for t in tiers], k=1)[0]


def spawn_collectible(
    grid: GridWorld,
    occupied: Collection[Pos],
    rng: random.Random,
    tiers: tuple[RewardTier, ...],
) -> Collectible | None:
    """Place a collectible on a uniformly random free cell.

    Returns None when every cell is occupied.
    """
    free = grid.free_cells(set(occupied))
    if not free:
        return None
    return Collectible(pos=rng.choice(free), tier=draw_tier(rng, tiers))
