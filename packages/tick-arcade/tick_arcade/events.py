"""Signal names published on the SignalBus by the simulators."""

PUZZLE_STEP = "puzzle.step"
PUZZLE_SUCCESS = "puzzle.success"
PUZZLE_FAILURE = "puzzle.failure"
PUZZLE_LEVEL = "puzzle.level"

SNAKE_MOVE = "snake.move"
SNAKE_ATE = "snake.ate"
SNAKE_GAME_OVER = "snake.game_over"
SNAKE_RESET = "snake.reset"
