"""TickSimulator - snake-style mobile entity advanced on a fixed interval."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any, Iterable, Sequence

from tick_fsm import StateMachine
from tick_grid import ZERO, GridWorld, Instruction, Pos, Vec, add, adjacent, is_unit

from tick_arcade import events
from tick_arcade.collectibles import Collectible, spawn_collectible
from tick_arcade.config import SnakeConfig
from tick_arcade.score import ScoreKeeper
from tick_arcade.snapshot import SnakeSnapshot
from tick_arcade.states import SNAKE_TRANSITIONS, GameOverReason, SnakeState

if TYPE_CHECKING:
    from tick import Engine, Handle, Scheduler
    from tick_signal import SignalBus

logger = logging.getLogger(__name__)


def _check_body(grid: GridWorld, body: Sequence[Pos]) -> None:
    if not body:
        raise ValueError("body must contain at least one cell")
    if len(set(body)) != len(body):
        raise ValueError("body cells must be distinct")
    for cell in body:
        if not grid.in_bounds(cell):
            raise ValueError(f"body cell {cell} is out of bounds")
    for a, b in zip(body, body[1:]):
        if not adjacent(a, b):
            raise ValueError(f"body cells {a} and {b} are not adjacent")


class TickSimulator:
    """Owns the snake body, its direction and the current collectible.

    ``tick()`` is normally driven by a periodic scheduler entry armed with
    ``start()``.  Collisions are evaluated before anything is committed, so
    a tick that ends the game leaves body, collectible and score untouched.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        config: SnakeConfig | None = None,
        score: ScoreKeeper | None = None,
        bus: SignalBus | None = None,
        body: Iterable[Pos] | None = None,
        direction: Vec = ZERO,
        interval_ticks: int = 1,
    ) -> None:
        if interval_ticks < 1:
            raise ValueError(f"interval_ticks must be at least 1, got {interval_ticks}")
        self._scheduler = scheduler
        self._rng = rng if rng is not None else random.Random()
        self._config = config if config is not None else SnakeConfig()
        self._score = score if score is not None else ScoreKeeper()
        self._bus = bus
        self._interval = interval_ticks
        self._grid = GridWorld(self._config.width, self._config.height)

        self._fsm: StateMachine[SnakeState] = StateMachine(
            SnakeState.RUNNING, SNAKE_TRANSITIONS,
        )
        self._reason: GameOverReason | None = None
        self._driver: Handle | None = None
        self._wants_driver = False

        self._body: list[Pos] = list(body) if body is not None else [self._centre()]
        _check_body(self._grid, self._body)
        if direction != ZERO and not is_unit(direction):
            raise ValueError(f"direction {direction} is not a unit vector")
        self._direction: Vec = direction
        self._collectible = self._spawn()

    @classmethod
    def for_engine(
        cls,
        engine: Engine,
        config: SnakeConfig | None = None,
        score: ScoreKeeper | None = None,
        bus: SignalBus | None = None,
        **kwargs: Any,
    ) -> TickSimulator:
        """Build a simulator paced by *engine*'s clock and seeded by its rng."""
        config = config if config is not None else SnakeConfig()
        return cls(
            engine.scheduler,
            rng=engine.rng,
            config=config,
            score=score,
            bus=bus,
            interval_ticks=engine.clock.ticks_for(config.tick_seconds),
            **kwargs,
        )

    # -- Read access --

    @property
    def state(self) -> SnakeState:
        return self._fsm.state

    @property
    def reason(self) -> GameOverReason | None:
        return self._reason

    @property
    def body(self) -> tuple[Pos, ...]:
        return tuple(self._body)

    @property
    def head(self) -> Pos:
        return self._body[0]

    @property
    def length(self) -> int:
        return len(self._body)

    @property
    def direction(self) -> Vec:
        return self._direction

    @property
    def collectible(self) -> Collectible | None:
        return self._collectible

    @property
    def grid(self) -> GridWorld:
        return self._grid

    @property
    def score(self) -> ScoreKeeper:
        return self._score

    @property
    def armed(self) -> bool:
        return self._driver is not None and self._driver.active

    def snapshot(self) -> SnakeSnapshot:
        return SnakeSnapshot(
            width=self._grid.width,
            height=self._grid.height,
            body=tuple(self._body),
            direction=self._direction,
            collectible=self._collectible,
            score=self._score.current(),
            state=self._fsm.state,
            reason=self._reason,
        )

    # -- Driver --

    def start(self) -> bool:
        """Arm the periodic driver. Rejected once the game is over."""
        if self._fsm.state is SnakeState.GAME_OVER:
            return False
        self._wants_driver = True
        if not self.armed:
            self._driver = self._scheduler.every(self._interval, self.tick)
        return True

    def _disarm(self) -> None:
        if self._driver is not None:
            self._driver.cancel()
            self._driver = None

    def stop(self) -> None:
        """Cancel the driver. Safe to call more than once."""
        self._wants_driver = False
        self._disarm()

    close = stop

    # -- Input --

    def set_direction(self, vec: Vec | Instruction) -> bool:
        """Steer. Ignores non-unit vectors, input after game over and
        direct reversals into the second segment."""
        if isinstance(vec, Instruction):
            vec = vec.delta
        if self._fsm.state is not SnakeState.RUNNING or not is_unit(vec):
            return False
        if len(self._body) > 1 and add(self._body[0], vec) == self._body[1]:
            return False
        self._direction = vec
        return True

    # -- Simulation --

    def tick(self) -> bool:
        """Advance one cell. Returns True when the body moved."""
        if self._fsm.state is not SnakeState.RUNNING or self._direction == ZERO:
            return False

        new_head = add(self._body[0], self._direction)
        if not self._grid.in_bounds(new_head):
            self._game_over(GameOverReason.WALL, new_head)
            return False

        eaten = self._collectible
        if eaten is not None and eaten.pos != new_head:
            eaten = None
        # The tail moves out of the way this tick unless the snake is growing.
        blocking = self._body if eaten is not None else self._body[:-1]
        if new_head in blocking:
            self._game_over(GameOverReason.SELF, new_head)
            return False

        self._body.insert(0, new_head)
        if eaten is not None:
            self._score.add(eaten.points)
            self._collectible = self._spawn()
            logger.debug("Ate %s at %s (+%d)", eaten.tier.name, eaten.pos, eaten.points)
            self._publish(
                events.SNAKE_ATE,
                pos=eaten.pos, tier=eaten.tier.name, points=eaten.points,
                score=self._score.current(), length=len(self._body),
            )
        else:
            self._body.pop()
        self._publish(events.SNAKE_MOVE, head=new_head, length=len(self._body))
        return True

    def _game_over(self, reason: GameOverReason, blocked: Pos) -> None:
        self._disarm()
        self._reason = reason
        self._fsm.go(SnakeState.GAME_OVER)
        logger.info("Game over (%s) at %s, length %d, score %d",
                    reason.value, blocked, len(self._body), self._score.current())
        self._publish(
            events.SNAKE_GAME_OVER,
            reason=reason.value, body=tuple(self._body),
            blocked=blocked, score=self._score.current(),
        )

    def reset(self) -> None:
        """Back to a length-1 snake at the centre with zero score and no direction."""
        self._disarm()
        self._body = [self._centre()]
        self._direction = ZERO
        self._reason = None
        self._score.reset()
        self._collectible = self._spawn()
        self._fsm.go(SnakeState.RUNNING)
        self._publish(events.SNAKE_RESET, head=self._body[0])
        if self._wants_driver:
            self._driver = self._scheduler.every(self._interval, self.tick)

    # -- Collectibles --

    def place_collectible(self, collectible: Collectible | None = None) -> Collectible | None:
        """Put *collectible* on the board, or draw a random one when omitted.

        Raises ValueError after game over, or for a cell that is off the
        board or under the body.
        """
        if self._fsm.state is SnakeState.GAME_OVER:
            raise ValueError("cannot place a collectible after game over; reset() first")
        if collectible is None:
            self._collectible = self._spawn()
            return self._collectible
        if not self._grid.in_bounds(collectible.pos):
            raise ValueError(f"collectible {collectible.pos} is out of bounds")
        if self._grid.is_occupied(collectible.pos, self._body):
            raise ValueError(f"collectible {collectible.pos} overlaps the body")
        self._collectible = collectible
        return collectible

    def _spawn(self) -> Collectible | None:
        return spawn_collectible(self._grid, self._body, self._rng, self._config.rewards)

    def _centre(self) -> Pos:
        return (self._grid.width // 2, self._grid.height // 2)

    def _publish(self, name: str, **data: Any) -> None:
        if self._bus is not None:
            self._bus.publish(name, **data)
