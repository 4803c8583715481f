"""Grid snake: ring-buffer game state and a fixed-timestep pygame driver."""

from .config import CFG, Config
from .game import GameState, Phase, TickOutcome, new_game_state, step_game
from .loop import GameLoop

__all__ = [
    "CFG",
    "Config",
    "GameState",
    "Phase",
    "TickOutcome",
    "new_game_state",
    "step_game",
    "GameLoop",
]
