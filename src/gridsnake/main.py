# main.py
import argparse
import logging
import sys
from typing import Optional, Sequence

import pygame  # type: ignore

from .config import Config, UP, DOWN, LEFT, RIGHT
from .loop import GameLoop
from .render import DisplaySetupError, open_display

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


class CaptionScoreSink:
    """Shows the current score in the window title."""

    def write(self, score: int) -> None:
        pygame.display.set_caption(f"Snake — score {score}")


class PygameFrameClock:
    def __init__(self, fps: int):
        self.fps = fps
        self.clock = pygame.time.Clock()

    def next_frame(self) -> float:
        self.clock.tick(self.fps)
        return float(pygame.time.get_ticks())


class PygameInput:
    """Drain pygame events into the loop: arrows turn, any key restarts, quit stops."""

    def dispatch(self, loop: GameLoop) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                loop.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    loop.stop()
                else:
                    loop.on_key(ARROW_KEYS.get(event.key))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game")
    parser.add_argument("--seed", type=int, default=None, help="seed for apple placement")
    parser.add_argument("--fps", type=int, default=60, help="frame rate cap (ticks are paced separately)")
    parser.add_argument("--cell-size", type=int, default=10, help="pixels per grid cell")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(seed=args.seed, fps=args.fps, cell_size=args.cell_size)

    try:
        display = open_display(cfg)
    except DisplaySetupError as exc:
        logger.error("startup failed: %s", exc)
        return 1

    sink = CaptionScoreSink()
    sink.write(0)
    loop = GameLoop(display, sink, cfg)
    try:
        loop.run(PygameFrameClock(cfg.fps), PygameInput())
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
