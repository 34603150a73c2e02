"""Snake — steer with arrows or WASD, eat to grow, avoid walls and yourself.

Controls:
  Arrows / WASD   Steer
  R               Restart
  Escape          Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick import Engine
from tick_arcade import RestartGame, SnakeConfig, Steer, TickSimulator, register_snake_handlers
from tick_command import CommandQueue, make_command_system
from tick_grid import Instruction

from ui.constants import COLOR_BG, FPS, TPS, screen_size
from ui.renderer import draw_board, draw_hud

STEER_KEYS = {
    pygame.K_UP: Instruction.UP, pygame.K_w: Instruction.UP,
    pygame.K_DOWN: Instruction.DOWN, pygame.K_s: Instruction.DOWN,
    pygame.K_LEFT: Instruction.LEFT, pygame.K_a: Instruction.LEFT,
    pygame.K_RIGHT: Instruction.RIGHT, pygame.K_d: Instruction.RIGHT,
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Snake — tick-arcade demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=TPS, help=f"Ticks per second (default: {TPS})")
    p.add_argument("--size", type=int, default=20, help="Board width/height (5-40, default: 20)")
    p.add_argument("--tick-seconds", type=float, default=0.15,
                   help="Seconds per snake move (default: 0.15)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args()
    args.size = max(5, min(40, args.size))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = Engine(tps=args.tps, seed=args.seed)
    queue = CommandQueue()
    config = SnakeConfig(width=args.size, height=args.size, tick_seconds=args.tick_seconds)
    snake = TickSimulator.for_engine(engine, config)
    register_snake_handlers(queue, snake)
    engine.add_system(make_command_system(queue))
    snake.start()

    pygame.init()
    screen = pygame.display.set_mode(screen_size(config.width, config.height))
    pygame.display.set_caption(f"Snake (seed {engine.seed})")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)

    tick_interval = 1.0 / args.tps
    accumulator = 0.0

    running = True
    while running:
        accumulator += clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in STEER_KEYS:
                    dx, dy = STEER_KEYS[event.key].delta
                    queue.enqueue(Steer(dx, dy))
                elif event.key == pygame.K_r:
                    queue.enqueue(RestartGame())

        while accumulator >= tick_interval:
            engine.step()
            accumulator -= tick_interval

        snap = snake.snapshot()
        screen.fill(COLOR_BG)
        draw_board(screen, snap)
        draw_hud(screen, snap, font)
        pygame.display.flip()

    snake.close()
    engine.shutdown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
