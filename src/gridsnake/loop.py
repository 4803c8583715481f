# loop.py
from typing import Optional, Protocol
import logging
import random

from .config import CFG, Config
from .game import GameState, Phase, new_game_state, step_game
from .render import Display, repaint

logger = logging.getLogger(__name__)


class ScoreSink(Protocol):
    def write(self, score: int) -> None: ...


class FrameClock(Protocol):
    def next_frame(self) -> float: ...


class InputSource(Protocol):
    def dispatch(self, loop: "GameLoop") -> None: ...


class NullScoreSink:
    def write(self, score: int) -> None:
        pass


class GameLoop:
    """
    Fixed-timestep driver: at most one tick per frame, gated by the state's
    step period, with a repaint after every tick.

    Any keypress while the game is over starts a new game; an arrow key that
    triggered the restart is also applied as the first heading change.
    """

    def __init__(
        self,
        display: Display,
        score_sink: Optional[ScoreSink] = None,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.display = display
        self.score_sink = score_sink if score_sink is not None else NullScoreSink()
        self.state: GameState = new_game_state(cfg, self.rng)
        self.phase = Phase.PLAYING
        self.last_tick: Optional[float] = None
        self.running = True

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def restart(self) -> None:
        self.state = new_game_state(self.cfg, self.rng)
        self.phase = Phase.PLAYING
        self.score_sink.write(self.state.score)
        logger.info("game restarted")

    def stop(self) -> None:
        self.running = False

    def repaint(self) -> None:
        repaint(self.display, self.state, self.game_over)

    # ---------- Event handlers ----------
    def on_key(self, code: Optional[int]) -> None:
        """Handle a keypress; `code` is a direction, or None for any other key."""
        if self.game_over:
            self.restart()
        if code is not None:
            self.state.change_direction(code)

    def on_frame(self, now_ms: float) -> bool:
        """Process one frame timestamp. Returns True if a tick was applied."""
        if self.last_tick is None:
            self.last_tick = now_ms
            return False
        if self.game_over:
            return False
        if now_ms - self.last_tick < self.state.step_period:
            return False

        self.last_tick = now_ms
        outcome = step_game(self.state)
        if outcome.ate_apple:
            self.score_sink.write(self.state.score)
        if not outcome.alive:
            self.phase = Phase.GAME_OVER
            logger.info("game over: score=%d length=%d", self.state.score, self.state.length)
        self.repaint()
        return True

    # ---------- Driver ----------
    def run(
        self,
        clock: FrameClock,
        input_source: Optional[InputSource] = None,
        max_frames: Optional[int] = None,
    ) -> int:
        """Run until stop() or until max_frames frames; returns frames processed."""
        logger.info("game started: %dx%d grid, step period %.0fms",
                    self.cfg.grid_w, self.cfg.grid_h, self.state.step_period)
        self.repaint()
        frames = 0
        while self.running and (max_frames is None or frames < max_frames):
            if input_source is not None:
                input_source.dispatch(self)
                if not self.running:
                    break
            self.on_frame(clock.next_frame())
            frames += 1
        return frames
