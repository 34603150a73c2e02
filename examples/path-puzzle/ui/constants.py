"""Layout and color constants."""
from __future__ import annotations

FPS = 60
TPS = 20

# Board area is fixed; tiles shrink as the difficulty grows the grid.
BOARD_PX = 600
SIDEBAR_W = 240
STATUS_H = 32
SCREEN_W = BOARD_PX + SIDEBAR_W
SCREEN_H = BOARD_PX + STATUS_H

COLOR_BG = (20, 20, 30)
COLOR_FLOOR = (45, 50, 60)
COLOR_GRID_LINE = (30, 30, 38)
COLOR_OBSTACLE = (110, 90, 70)
COLOR_START = (80, 160, 220)
COLOR_GOAL = (90, 210, 110)
COLOR_PATH = (230, 200, 80)
COLOR_AGENT = (250, 250, 250)
COLOR_HINT = (180, 120, 255)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_CURSOR = (255, 160, 60)

STATE_COLORS: dict[str, tuple[int, int, int]] = {
    "idle": (200, 200, 200),
    "executing": (230, 200, 80),
    "success": (100, 255, 100),
    "failure": (255, 80, 80),
}

ARROWS: dict[str, str] = {
    "up": "^",
    "down": "v",
    "left": "<",
    "right": ">",
}


def tile_size(width: int, height: int) -> int:
    return max(4, BOARD_PX // max(width, height))
