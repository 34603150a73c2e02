"""Path Puzzle — queue moves, run the program, reach the goal.

Controls:
  Arrows / WASD   Queue a move
  Enter           Run the program
  Backspace       Undo last move
  C               Clear the program
  R               New level, same round
  N               Restart from round 1
  H               Show / hide the shortest path
  1 / 2 / 3       Easy / Medium / Hard
  Escape          Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick import Engine
from tick_arcade import (
    ClearProgram,
    Difficulty,
    InstructionInterpreter,
    PuzzleConfig,
    QueueInstruction,
    ResetRound,
    RestartGame,
    RunProgram,
    SelectDifficulty,
    UndoInstruction,
    events,
    register_puzzle_handlers,
)
from tick_command import CommandQueue, make_command_system
from tick_signal import SignalBus, make_signal_system

from ui.constants import COLOR_BG, FPS, SCREEN_H, SCREEN_W, TPS
from ui.renderer import draw_board, draw_hint, draw_path, draw_sidebar
from ui.status import StatusBar

MOVE_KEYS = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}

DIFFICULTY_KEYS = {
    pygame.K_1: Difficulty.EASY.value,
    pygame.K_2: Difficulty.MEDIUM.value,
    pygame.K_3: Difficulty.HARD.value,
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Path Puzzle — tick-arcade demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=TPS, help=f"Ticks per second (default: {TPS})")
    p.add_argument("--difficulty", choices=[d.value for d in Difficulty], default="easy")
    p.add_argument("--step-seconds", type=float, default=0.5,
                   help="Delay between program steps (default: 0.5)")
    p.add_argument("--require-path", action="store_true",
                   help="Only deal levels that have a solution")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = Engine(tps=args.tps, seed=args.seed)
    queue = CommandQueue()
    bus = SignalBus()
    config = PuzzleConfig(
        difficulty=args.difficulty,
        step_seconds=args.step_seconds,
        require_path=args.require_path,
    )
    puzzle = InstructionInterpreter.for_engine(engine, config, bus=bus)
    register_puzzle_handlers(queue, puzzle)

    status = StatusBar()
    hint: list | None = None
    show_hint = False

    def on_reject(cmd: object) -> None:
        status.set(f"Ignored: {type(cmd).__name__}", (255, 180, 80))

    engine.add_system(make_command_system(queue, on_reject=on_reject))
    engine.add_system(make_signal_system(bus))

    def on_success(signal: str, data: dict) -> None:
        status.set(
            f"Round {data['round_number']} solved! +{data['points']} (total {data['score']})",
            (100, 255, 100),
        )

    def on_failure(signal: str, data: dict) -> None:
        reason = data["reason"].replace("_", " ")
        status.set(f"Failed: {reason}. Press R for a new level.", (255, 80, 80))

    def on_level(signal: str, data: dict) -> None:
        nonlocal hint, show_hint
        hint = None
        show_hint = False

    bus.subscribe(events.PUZZLE_SUCCESS, on_success)
    bus.subscribe(events.PUZZLE_FAILURE, on_failure)
    bus.subscribe(events.PUZZLE_LEVEL, on_level)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(f"Path Puzzle (seed {engine.seed})")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    # Tick accumulator for fixed-rate engine ticks
    tick_interval = 1.0 / args.tps
    accumulator = 0.0

    running = True
    while running:
        accumulator += clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type != pygame.KEYDOWN:
                continue
            elif event.key == pygame.K_ESCAPE:
                running = False
            elif event.key in MOVE_KEYS:
                queue.enqueue(QueueInstruction(MOVE_KEYS[event.key]))
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                queue.enqueue(RunProgram())
            elif event.key == pygame.K_BACKSPACE:
                queue.enqueue(UndoInstruction())
            elif event.key == pygame.K_c:
                queue.enqueue(ClearProgram())
            elif event.key == pygame.K_r:
                queue.enqueue(ResetRound())
                status.set("New level", (200, 200, 200))
            elif event.key == pygame.K_n:
                queue.enqueue(RestartGame())
                status.set("Restarted", (200, 200, 200))
            elif event.key == pygame.K_h:
                show_hint = not show_hint
                if show_hint and hint is None:
                    hint = puzzle.hint()
                    if hint is None:
                        status.set("No path exists. Press R for a new level.", (255, 180, 80))
            elif event.key in DIFFICULTY_KEYS:
                queue.enqueue(SelectDifficulty(DIFFICULTY_KEYS[event.key]))

        # --- Tick engine at fixed rate ---
        while accumulator >= tick_interval:
            engine.step()
            accumulator -= tick_interval

        # --- Render ---
        snap = puzzle.snapshot()
        screen.fill(COLOR_BG)
        draw_board(screen, snap)
        if show_hint and hint:
            draw_hint(screen, snap, hint)
        draw_path(screen, snap)
        draw_sidebar(screen, snap, font)
        status.draw(screen)
        pygame.display.flip()

    puzzle.close()
    engine.shutdown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
