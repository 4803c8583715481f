# game.py
from enum import Enum
from typing import Iterator, NamedTuple, Optional, Tuple
import logging
import random

from .buffer import DirectionsBuffer
from .config import CFG, Config, DX, DY, RIGHT, is_opposite

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class TickOutcome(NamedTuple):
    ate_apple: bool
    alive: bool


# ---------- State ----------
class GameState:
    """
    Snake body, heading, apple, score and pacing for one game.

    The body is stored as the directions taken between consecutive cells,
    tail to head, in a ring buffer sized for a full board. Only the head and
    tail coordinates are kept; everything in between is recovered by walking
    the ring from the tail.
    """

    def __init__(self, cfg: Config = CFG, rng: Optional[random.Random] = None):
        if not 1 <= cfg.initial_length <= cfg.grid_w:
            raise ValueError(f"initial_length must be in [1, {cfg.grid_w}], got {cfg.initial_length}")
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.directions = DirectionsBuffer(cfg.grid_w * cfg.grid_h)

        # Initial body lies on row 0, tail at the origin, facing right.
        self.length = cfg.initial_length
        self.tail_index = 0
        self.head_index = self.length - 2
        self.heading = RIGHT
        self.head_x, self.head_y = self.length - 1, 0
        self.tail_x, self.tail_y = 0, 0

        self.apple: Cell = (0, 0)
        self.step_period = cfg.step_period_ms
        self.score = 0
        self.next_reward = cfg.first_reward

        self.teleport_apple()

    @property
    def head(self) -> Cell:
        return (self.head_x, self.head_y)

    @property
    def tail(self) -> Cell:
        return (self.tail_x, self.tail_y)

    def cells(self) -> Iterator[Cell]:
        """Yield body cells from tail to head."""
        x, y = self.tail_x, self.tail_y
        idx = self.tail_index
        yield (x, y)
        for _ in range(self.length - 1):
            code = self.directions.get_at(idx)
            idx = self.directions.next_index(idx)
            x += DX[code]
            y += DY[code]
            yield (x, y)

    # ---------- Queries ----------
    def will_eat_apple(self) -> bool:
        nx = self.head_x + DX[self.heading]
        ny = self.head_y + DY[self.heading]
        return (nx, ny) == self.apple

    def is_out_of_bounds(self) -> bool:
        return not (0 <= self.head_x < self.cfg.grid_w and 0 <= self.head_y < self.cfg.grid_h)

    def eats_itself(self) -> bool:
        # Every cell except the head, walking forward from the tail.
        x, y = self.tail_x, self.tail_y
        idx = self.tail_index
        for _ in range(self.length - 1):
            if x == self.head_x and y == self.head_y:
                return True
            code = self.directions.get_at(idx)
            idx = self.directions.next_index(idx)
            x += DX[code]
            y += DY[code]
        return False

    # ---------- Transitions ----------
    def _advance(self, growing: bool) -> None:
        self.head_index = self.directions.next_index(self.head_index)
        self.directions.set_at(self.head_index, self.heading)
        self.head_x += DX[self.heading]
        self.head_y += DY[self.heading]

        if growing:
            self.length += 1
        else:
            code = self.directions.get_at(self.tail_index)
            self.tail_x += DX[code]
            self.tail_y += DY[code]
            self.tail_index = self.directions.next_index(self.tail_index)

    def move_ahead(self) -> None:
        self._advance(growing=False)

    def grow(self) -> None:
        self._advance(growing=True)

    def change_direction(self, code: int) -> None:
        """Turn toward `code`; a 180° reversal is ignored."""
        if not 0 <= code <= 3:
            raise ValueError(f"invalid direction code {code}")
        if not is_opposite(self.heading, code):
            self.heading = code

    def teleport_apple(self) -> None:
        # May land on the body; the apple is never re-rolled against the snake.
        self.apple = (self.rng.randrange(self.cfg.grid_w), self.rng.randrange(self.cfg.grid_h))

    def speed_up_game(self) -> None:
        if self.step_period > self.cfg.min_step_ms:
            self.step_period -= self.cfg.speedup_ms

    def update_score(self) -> None:
        self.score += self.next_reward
        self.next_reward += self.cfg.reward_step


def new_game_state(cfg: Config = CFG, rng: Optional[random.Random] = None) -> GameState:
    return GameState(cfg, rng)


def step_game(state: GameState) -> TickOutcome:
    """
    Advance the game by one tick.
    Eating grows the snake, moves the apple, speeds up and scores, in that order.
    The collision check runs after the move.
    """
    ate = state.will_eat_apple()
    if ate:
        state.grow()
        state.teleport_apple()
        state.speed_up_game()
        state.update_score()
        logger.debug("apple eaten: score=%d period=%.0fms length=%d",
                     state.score, state.step_period, state.length)
    else:
        state.move_ahead()

    alive = not (state.is_out_of_bounds() or state.eats_itself())
    logger.debug("tick: head=%s heading=%d alive=%s", state.head, state.heading, alive)
    return TickOutcome(ate_apple=ate, alive=alive)
