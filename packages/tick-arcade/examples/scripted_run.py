"""Scripted puzzle and snake runs -- no window, just the tick loop.

Demonstrates:
- Building an InstructionInterpreter and TickSimulator from an Engine
- Feeding input through a CommandQueue drained once per tick
- Watching outcomes arrive on a SignalBus flushed once per tick
- Pacing in seconds converted to ticks via PuzzleConfig / SnakeConfig

Run: python -m examples.scripted_run
"""

from tick import Engine
from tick_arcade import (
    InstructionInterpreter,
    PuzzleConfig,
    QueueInstruction,
    RunProgram,
    SnakeConfig,
    Steer,
    TickSimulator,
    events,
    register_puzzle_handlers,
    register_snake_handlers,
)
from tick_command import CommandQueue, make_command_system
from tick_signal import ANY, SignalBus, make_signal_system


def wire(engine: Engine) -> tuple[CommandQueue, SignalBus]:
    queue = CommandQueue()
    bus = SignalBus()
    engine.add_system(make_command_system(
        queue, on_reject=lambda cmd: print(f"    rejected {cmd}"),
    ))
    engine.add_system(make_signal_system(bus))
    return queue, bus


def puzzle_demo() -> None:
    print("--- Path puzzle (seed 42, require_path) ---")
    engine = Engine(tps=20, seed=42)
    queue, bus = wire(engine)
    puzzle = InstructionInterpreter.for_engine(
        engine, PuzzleConfig(step_seconds=0.1, require_path=True), bus=bus,
    )
    register_puzzle_handlers(queue, puzzle)

    def log(signal: str, data: dict) -> None:
        if signal == events.PUZZLE_STEP:
            return
        detail = data.get("reason") or data.get("points", "")
        print(f"    [tick {engine.clock.tick_number}] {signal} {detail}")

    bus.subscribe(ANY, log)

    # Round 1: a deliberately short program ends on the wrong cell.
    queue.enqueue(QueueInstruction("right"))
    queue.enqueue(RunProgram())
    engine.run(10)

    # Round 1 again: play the hint.
    puzzle.reset_round()
    hint = puzzle.hint() or []
    print(f"    playing hint of {len(hint)} moves")
    for instruction in hint:
        queue.enqueue(QueueInstruction(instruction.value))
    queue.enqueue(RunProgram())
    engine.run(2 * len(hint) + 4)

    snap = puzzle.snapshot()
    print(f"    round {snap.round_number}, score {snap.score}, state {snap.state.value}\n")
    puzzle.close()


def snake_demo() -> None:
    print("--- Snake (seed 7) ---")
    engine = Engine(tps=20, seed=7)
    queue, bus = wire(engine)
    snake = TickSimulator.for_engine(engine, SnakeConfig(width=10, height=10, tick_seconds=0.05), bus=bus)
    register_snake_handlers(queue, snake)
    bus.subscribe(events.SNAKE_ATE, lambda s, d: print(f"    ate {d['tier']} at {d['pos']} -> {d['score']}"))
    bus.subscribe(events.SNAKE_GAME_OVER, lambda s, d: print(f"    game over ({d['reason']}) score {d['score']}"))

    snake.start()
    # Sweep the board row by row. Steering lands after the next move, so
    # turns are queued one cell early.
    queue.enqueue(Steer(1, 0))
    last_col = snake.grid.width - 1
    for _ in range(200):
        engine.step()
        x, _ = snake.head
        if snake.direction == (1, 0) and x == last_col - 1:
            queue.enqueue(Steer(0, 1))
        elif snake.direction == (-1, 0) and x == 1:
            queue.enqueue(Steer(0, 1))
        elif snake.direction == (0, 1):
            queue.enqueue(Steer(-1, 0) if x == last_col else Steer(1, 0))
        if not snake.armed:
            break
    print(f"    final length {snake.length}, stopped at tick {engine.clock.tick_number}")
    snake.close()


def main() -> None:
    print("=== Scripted Runs ===\n")
    puzzle_demo()
    snake_demo()


if __name__ == "__main__":
    main()
