"""Layout and color constants."""
from __future__ import annotations

FPS = 60
TPS = 20
TILE_SIZE = 28
HUD_H = 36

COLOR_BG = (20, 20, 30)
COLOR_FLOOR = (35, 40, 48)
COLOR_HEAD = (140, 240, 120)
COLOR_BODY = (70, 170, 70)
COLOR_TEXT = (200, 200, 200)
COLOR_GAME_OVER = (255, 80, 80)

TIER_COLORS: dict[str, tuple[int, int, int]] = {
    "apple": (220, 60, 60),
    "golden": (250, 210, 60),
}


def screen_size(width: int, height: int) -> tuple[int, int]:
    return width * TILE_SIZE, height * TILE_SIZE + HUD_H
