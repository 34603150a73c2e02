"""Snake board rendering. Reads snapshots only."""
from __future__ import annotations

import pygame

from tick_arcade import SnakeSnapshot, SnakeState

from ui.constants import (
    COLOR_BODY, COLOR_FLOOR, COLOR_GAME_OVER, COLOR_HEAD, COLOR_TEXT,
    HUD_H, TIER_COLORS, TILE_SIZE,
)


def draw_board(surface: pygame.Surface, snap: SnakeSnapshot) -> None:
    board = pygame.Rect(0, HUD_H, snap.width * TILE_SIZE, snap.height * TILE_SIZE)
    pygame.draw.rect(surface, COLOR_FLOOR, board)

    if snap.collectible is not None:
        x, y = snap.collectible.pos
        center = (x * TILE_SIZE + TILE_SIZE // 2, HUD_H + y * TILE_SIZE + TILE_SIZE // 2)
        color = TIER_COLORS.get(snap.collectible.tier.name, (200, 200, 200))
        pygame.draw.circle(surface, color, center, TILE_SIZE // 2 - 3)

    for i, (x, y) in enumerate(snap.body):
        rect = pygame.Rect(x * TILE_SIZE + 1, HUD_H + y * TILE_SIZE + 1, TILE_SIZE - 2, TILE_SIZE - 2)
        pygame.draw.rect(surface, COLOR_HEAD if i == 0 else COLOR_BODY, rect, border_radius=4)


def draw_hud(surface: pygame.Surface, snap: SnakeSnapshot, font: pygame.font.Font) -> None:
    text = f"Score {snap.score}   Length {snap.length}"
    surface.blit(font.render(text, True, COLOR_TEXT), (8, 10))
    if snap.state is SnakeState.GAME_OVER:
        reason = snap.reason.value if snap.reason is not None else "?"
        msg = font.render(f"GAME OVER ({reason}) - R to restart", True, COLOR_GAME_OVER)
        surface.blit(msg, (surface.get_width() - msg.get_width() - 8, 10))
