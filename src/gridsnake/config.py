from dataclasses import dataclass
from typing import Optional

# ----- Grid -----
GRID_W, GRID_H = 40, 40
CELL_SIZE = 10

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 255, 0)
RED   = (255, 0, 0)

GAME_OVER_TEXT = "OH NO, GAME OVER :("

# ----- Directions (codes index into DX / DY, y grows downward) -----
RIGHT, DOWN, LEFT, UP = 0, 1, 2, 3
DX = (1, 0, -1, 0)
DY = (0, 1, 0, -1)

def is_opposite(a: int, b: int) -> bool:
    return (a - b) % 4 == 2

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    cell_size: int = CELL_SIZE
    initial_length: int = 4
    step_period_ms: float = 300.0
    speedup_ms: float = 25.0
    min_step_ms: float = 50.0
    first_reward: int = 10
    reward_step: int = 10
    fps: int = 60
    seed: Optional[int] = None

    @property
    def width_px(self) -> int:
        return self.grid_w * self.cell_size

    @property
    def height_px(self) -> int:
        return self.grid_h * self.cell_size

CFG = Config()
