"""InstructionInterpreter - queued-program path puzzle on a generated grid.

The player queues moves while the interpreter is IDLE, then ``run()``
replays them from the start cell, one move per ``step_ticks`` scheduler
ticks.  A move off the board or onto an obstacle ends the run with
``WALL_HIT``; finishing anywhere but the goal ends it with
``WRONG_ENDPOINT``.  A successful run pays ``points_per_round * round``,
advances the round and deals a fresh level.
"""
from __future__ import annotations

import dataclasses
import logging
import random
from typing import TYPE_CHECKING, Any

from tick_fsm import StateMachine
from tick_grid import Instruction, Level, LevelGenerator, Pos, add
from tick_grid import path_to_instructions, pathfind

from tick_arcade import events
from tick_arcade.config import Difficulty, PuzzleConfig
from tick_arcade.score import ScoreKeeper
from tick_arcade.snapshot import Outcome, PuzzleSnapshot
from tick_arcade.states import PUZZLE_TRANSITIONS, FailureReason, PuzzleState

if TYPE_CHECKING:
    from tick import Engine, Handle, Scheduler
    from tick_signal import SignalBus

logger = logging.getLogger(__name__)


class InstructionInterpreter:
    def __init__(
        self,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        config: PuzzleConfig | None = None,
        score: ScoreKeeper | None = None,
        bus: SignalBus | None = None,
        step_ticks: int = 1,
        level: Level | None = None,
    ) -> None:
        if step_ticks < 1:
            raise ValueError(f"step_ticks must be at least 1, got {step_ticks}")
        self._scheduler = scheduler
        self._config = config if config is not None else PuzzleConfig()
        self._score = score if score is not None else ScoreKeeper()
        self._bus = bus
        self._step_ticks = step_ticks
        self._generator = LevelGenerator(
            rng,
            allow_duplicates=not self._config.unique_obstacles,
            require_path=self._config.require_path,
        )

        self._fsm: StateMachine[PuzzleState] = StateMachine(
            PuzzleState.IDLE, PUZZLE_TRANSITIONS,
        )
        self._fsm.on_transition(self._log_transition)

        self._round = 1
        self._program: list[Instruction] = []
        self._cursor = 0
        self._failure: FailureReason | None = None
        self._last_outcome: Outcome | None = None
        self._pending: Handle | None = None
        self._closed = False

        if level is None:
            level = self._generate()
        self._level = level
        self._path: list[Pos] = [level.start]

    @classmethod
    def for_engine(
        cls,
        engine: Engine,
        config: PuzzleConfig | None = None,
        score: ScoreKeeper | None = None,
        bus: SignalBus | None = None,
        level: Level | None = None,
    ) -> InstructionInterpreter:
        """Build an interpreter paced by *engine*'s clock and seeded by its rng."""
        config = config if config is not None else PuzzleConfig()
        return cls(
            engine.scheduler,
            rng=engine.rng,
            config=config,
            score=score,
            bus=bus,
            step_ticks=engine.clock.ticks_for(config.step_seconds),
            level=level,
        )

    # -- Read access --

    @property
    def state(self) -> PuzzleState:
        return self._fsm.state

    @property
    def executing(self) -> bool:
        return self._fsm.state is PuzzleState.EXECUTING

    @property
    def failure(self) -> FailureReason | None:
        return self._failure

    @property
    def last_outcome(self) -> Outcome | None:
        return self._last_outcome

    @property
    def level(self) -> Level:
        return self._level

    @property
    def round_number(self) -> int:
        return self._round

    @property
    def score(self) -> ScoreKeeper:
        return self._score

    @property
    def config(self) -> PuzzleConfig:
        return self._config

    @property
    def program(self) -> tuple[Instruction, ...]:
        return tuple(self._program)

    @property
    def path(self) -> tuple[Pos, ...]:
        return tuple(self._path)

    def snapshot(self) -> PuzzleSnapshot:
        return PuzzleSnapshot(
            width=self._level.width,
            height=self._level.height,
            start=self._level.start,
            goal=self._level.goal,
            obstacles=self._level.obstacles,
            path=tuple(self._path),
            program=tuple(self._program),
            state=self._fsm.state,
            failure=self._failure,
            score=self._score.current(),
            round_number=self._round,
            difficulty=self._config.difficulty.value,
            cursor=self._cursor,
        )

    # -- Program editing --

    def _editable(self) -> bool:
        return not self._closed and self._fsm.state is PuzzleState.IDLE

    def enqueue(self, instruction: Instruction | str) -> bool:
        """Append a move. Unknown direction names are rejected like any other input."""
        if not self._editable():
            return False
        if isinstance(instruction, str):
            try:
                instruction = Instruction.from_name(instruction)
            except ValueError:
                return False
        self._program.append(instruction)
        return True

    def undo(self) -> bool:
        if not self._editable() or not self._program:
            return False
        self._program.pop()
        return True

    def clear(self) -> bool:
        if not self._editable():
            return False
        self._program.clear()
        return True

    # -- Execution --

    def run(self) -> bool:
        if not self._editable():
            return False
        self._fsm.go(PuzzleState.EXECUTING)
        self._path = [self._level.start]
        self._cursor = 0
        self._failure = None
        if not self._program:
            self._finish()
        else:
            self._pending = self._scheduler.after(self._step_ticks, self._step)
        return True

    def _step(self) -> None:
        self._pending = None
        if self._fsm.state is not PuzzleState.EXECUTING:
            return
        instruction = self._program[self._cursor]
        self._cursor += 1
        candidate = add(self._path[-1], instruction.delta)
        grid = self._level.grid
        if not grid.in_bounds(candidate) or grid.is_obstacle(candidate):
            logger.debug("Step %d: %s blocked at %s", self._cursor, instruction.value, candidate)
            self._fail(FailureReason.WALL_HIT, blocked=candidate)
            return

        self._path.append(candidate)
        self._publish(
            events.PUZZLE_STEP,
            step=self._cursor, instruction=instruction.value, pos=candidate,
        )
        if self._cursor < len(self._program):
            self._pending = self._scheduler.after(self._step_ticks, self._step)
        else:
            self._finish()

    def _finish(self) -> None:
        if self._path[-1] == self._level.goal:
            self._succeed()
        else:
            self._fail(FailureReason.WRONG_ENDPOINT)

    def _succeed(self) -> None:
        points = self._config.points_per_round * self._round
        self._score.add(points)
        self._fsm.go(PuzzleState.SUCCESS)
        self._last_outcome = Outcome(
            success=True, reason=None, path=tuple(self._path),
            points=points, round_number=self._round,
        )
        logger.info("Round %d solved in %d steps (+%d, total %d)",
                    self._round, len(self._path) - 1, points, self._score.current())
        self._publish(
            events.PUZZLE_SUCCESS,
            round_number=self._round, points=points,
            score=self._score.current(), path=tuple(self._path),
        )
        self._round += 1
        self._reload()

    def _fail(self, reason: FailureReason, blocked: Pos | None = None) -> None:
        self._failure = reason
        self._fsm.go(PuzzleState.FAILURE)
        self._last_outcome = Outcome(
            success=False, reason=reason, path=tuple(self._path),
            points=0, round_number=self._round,
        )
        logger.info("Round %d failed: %s", self._round, reason.value)
        self._publish(
            events.PUZZLE_FAILURE,
            reason=reason.value, round_number=self._round,
            path=tuple(self._path), blocked=blocked,
        )

    # -- Resets --

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _generate(self) -> Level:
        preset = self._config.preset
        return self._generator.generate(
            preset.width,
            preset.height,
            preset.obstacle_base,
            self._round,
            self._config.difficulty.value,
        )

    def _reload(self, level: Level | None = None) -> None:
        self._cancel_pending()
        self._level = level if level is not None else self._generate()
        self._program.clear()
        self._path = [self._level.start]
        self._cursor = 0
        self._failure = None
        self._fsm.go(PuzzleState.IDLE)
        self._publish(
            events.PUZZLE_LEVEL,
            round_number=self._round,
            start=self._level.start,
            goal=self._level.goal,
            obstacles=self._level.obstacles,
        )

    def reset_round(self) -> None:
        """Deal a fresh level for the current round. Score and round are kept."""
        self._reload()

    def restart(self) -> None:
        """Full game reset: zero score, back to round 1, fresh level."""
        self._score.reset()
        self._round = 1
        self._last_outcome = None
        self._reload()

    def load_level(self, level: Level) -> None:
        """Replace the current level with *level* and return to IDLE."""
        self._reload(level)

    def set_difficulty(self, difficulty: Difficulty | str) -> None:
        """Switch presets and regenerate. Score and round are kept."""
        self._config = dataclasses.replace(self._config, difficulty=Difficulty(difficulty))
        self._reload()

    def hint(self) -> list[Instruction] | None:
        """Shortest program from start to goal, or None if the level is unsolvable."""
        path = pathfind(self._level.grid, self._level.start, self._level.goal)
        if path is None:
            return None
        return path_to_instructions(path)

    def close(self) -> None:
        """Cancel any scheduled step. Safe to call more than once."""
        self._cancel_pending()
        self._closed = True

    # -- Internals --

    def _publish(self, name: str, **data: Any) -> None:
        if self._bus is not None:
            self._bus.publish(name, **data)

    def _log_transition(self, old: PuzzleState, new: PuzzleState) -> None:
        logger.debug("Puzzle %s -> %s", old.value, new.value)
