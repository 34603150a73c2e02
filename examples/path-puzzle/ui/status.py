"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import BOARD_PX, SCREEN_W, STATUS_H


class StatusBar:
    """Shows the latest message until the next one replaces it."""

    def __init__(self) -> None:
        self._message = "Arrows/WASD queue moves, Enter runs"
        self._color = (200, 200, 200)
        self._font: pygame.font.Font | None = None

    def set(self, message: str, color: tuple[int, int, int] = (200, 200, 200)) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        pygame.draw.rect(surface, (30, 30, 40), pygame.Rect(0, BOARD_PX, SCREEN_W, STATUS_H))
        if self._message:
            text = self._font.render(self._message, True, self._color)
            surface.blit(text, (8, BOARD_PX + 8))
