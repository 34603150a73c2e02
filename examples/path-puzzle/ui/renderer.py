"""Board and sidebar rendering. Reads snapshots only."""
from __future__ import annotations

import pygame

from tick_arcade import PuzzleSnapshot
from tick_grid import Instruction, Pos, add

from ui.constants import (
    ARROWS, BOARD_PX, COLOR_AGENT, COLOR_CURSOR, COLOR_FLOOR, COLOR_GOAL,
    COLOR_GRID_LINE, COLOR_HINT, COLOR_OBSTACLE, COLOR_PATH, COLOR_SIDEBAR_BG,
    COLOR_START, COLOR_TEXT, COLOR_TEXT_DIM, SIDEBAR_W, STATE_COLORS, tile_size,
)


def _cell_rect(pos: Pos, tile: int) -> pygame.Rect:
    return pygame.Rect(pos[0] * tile, pos[1] * tile, tile, tile)


def draw_board(surface: pygame.Surface, snap: PuzzleSnapshot) -> None:
    tile = tile_size(snap.width, snap.height)
    for y in range(snap.height):
        for x in range(snap.width):
            color = COLOR_OBSTACLE if (x, y) in snap.obstacles else COLOR_FLOOR
            pygame.draw.rect(surface, color, _cell_rect((x, y), tile))

    pygame.draw.rect(surface, COLOR_START, _cell_rect(snap.start, tile))
    pygame.draw.rect(surface, COLOR_GOAL, _cell_rect(snap.goal, tile))

    # Grid lines
    for x in range(snap.width + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (x * tile, 0), (x * tile, snap.height * tile))
    for y in range(snap.height + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (0, y * tile), (snap.width * tile, y * tile))


def draw_path(surface: pygame.Surface, snap: PuzzleSnapshot) -> None:
    """Trail walked so far plus the agent marker at the current cell."""
    tile = tile_size(snap.width, snap.height)
    half = tile // 2
    if len(snap.path) > 1:
        points = [(x * tile + half, y * tile + half) for x, y in snap.path]
        pygame.draw.lines(surface, COLOR_PATH, False, points, max(2, tile // 6))
    x, y = snap.position
    pygame.draw.circle(surface, COLOR_AGENT, (x * tile + half, y * tile + half), max(3, tile // 3))


def draw_hint(surface: pygame.Surface, snap: PuzzleSnapshot, hint: list[Instruction]) -> None:
    tile = tile_size(snap.width, snap.height)
    half = tile // 2
    pos = snap.start
    for instruction in hint:
        pos = add(pos, instruction.delta)
        pygame.draw.circle(surface, COLOR_HINT, (pos[0] * tile + half, pos[1] * tile + half), max(2, tile // 6))


def draw_sidebar(surface: pygame.Surface, snap: PuzzleSnapshot, font: pygame.font.Font) -> None:
    rect = pygame.Rect(BOARD_PX, 0, SIDEBAR_W, BOARD_PX)
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, rect)

    x = BOARD_PX + 12
    y = 12
    lines = [
        (f"Round {snap.round_number}  [{snap.difficulty}]", COLOR_TEXT),
        (f"Score {snap.score}", COLOR_TEXT),
        (snap.state.value.upper(), STATE_COLORS.get(snap.state.value, COLOR_TEXT)),
    ]
    if snap.failure is not None:
        lines.append((snap.failure.value.replace("_", " "), STATE_COLORS["failure"]))
    for text, color in lines:
        surface.blit(font.render(text, True, color), (x, y))
        y += 20

    y += 10
    surface.blit(font.render(f"Program ({len(snap.program)})", True, COLOR_TEXT_DIM), (x, y))
    y += 20

    # Wrap arrows eight to a row, highlighting the step about to run.
    per_row = 8
    for i, instruction in enumerate(snap.program):
        color = COLOR_CURSOR if snap.state.value == "executing" and i == snap.cursor else COLOR_TEXT
        glyph = font.render(ARROWS[instruction.value], True, color)
        surface.blit(glyph, (x + (i % per_row) * 24, y + (i // per_row) * 20))
        if y + (i // per_row) * 20 > BOARD_PX - 40:
            break
