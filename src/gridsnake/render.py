# render.py
from typing import Protocol, Tuple
import pygame  # type: ignore

from .config import BG, GREEN, RED, GAME_OVER_TEXT, Config
from .game import GameState

Color = Tuple[int, int, int]


class DisplaySetupError(RuntimeError):
    """The window, surface or font could not be created."""


class Display(Protocol):
    def clear(self, color: Color) -> None: ...
    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None: ...
    def draw_centered_text(self, message: str, color: Color) -> None: ...
    def present(self) -> None: ...


class PygameDisplay:
    """Display backed by a pygame surface."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font, flip: bool = True):
        self.surface = surface
        self.font = font
        self.flip = flip

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, w, h))

    def draw_centered_text(self, message: str, color: Color) -> None:
        text = self.font.render(message, True, color)
        rect = text.get_rect(center=self.surface.get_rect().center)
        self.surface.blit(text, rect)

    def present(self) -> None:
        if self.flip:
            pygame.display.flip()


def open_display(cfg: Config) -> PygameDisplay:
    """Create the game window. Raises DisplaySetupError if pygame can't."""
    try:
        pygame.init()
        surface = pygame.display.set_mode((cfg.width_px, cfg.height_px))
        pygame.display.set_caption("Snake")
        font = pygame.font.SysFont("monospace", 24, bold=True)
    except pygame.error as exc:
        raise DisplaySetupError(f"cannot open {cfg.width_px}x{cfg.height_px} display: {exc}") from exc
    return PygameDisplay(surface, font)


# ---------- Painting ----------
def paint_cell(display: Display, cfg: Config, gx: int, gy: int, color: Color) -> None:
    size = cfg.cell_size
    display.fill_rect(gx * size, gy * size, size, size, color)


def paint_snake(display: Display, state: GameState) -> None:
    for x, y in state.cells():
        paint_cell(display, state.cfg, x, y, GREEN)


def paint_apple(display: Display, state: GameState) -> None:
    paint_cell(display, state.cfg, state.apple[0], state.apple[1], RED)


def repaint(display: Display, state: GameState, game_over: bool) -> None:
    display.clear(BG)
    if game_over:
        display.draw_centered_text(GAME_OVER_TEXT, RED)
    else:
        paint_snake(display, state)
        paint_apple(display, state)
    display.present()
