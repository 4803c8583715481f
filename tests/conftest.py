import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from gridsnake.config import Config  # noqa: E402
from gridsnake.game import GameState  # noqa: E402


class RecordingDisplay:
    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", x, y, w, h, color))

    def draw_centered_text(self, message, color):
        self.calls.append(("text", message, color))

    def present(self):
        self.calls.append(("present",))

    def presents(self):
        return sum(1 for c in self.calls if c[0] == "present")


class ListScoreSink:
    def __init__(self):
        self.scores = []

    def write(self, score):
        self.scores.append(score)


class ScriptedClock:
    def __init__(self, timestamps):
        self.timestamps = list(timestamps)

    def next_frame(self):
        return self.timestamps.pop(0)


@pytest.fixture
def cfg():
    return Config(seed=1234)


@pytest.fixture
def state(cfg):
    s = GameState(cfg, random.Random(1234))
    # Keep the apple out of the way unless a test places it.
    s.apple = (cfg.grid_w - 1, cfg.grid_h - 1)
    return s


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def sink():
    return ListScoreSink()
