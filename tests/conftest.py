# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # 5x5 grid of 10px cells
    return pg.Surface((50, 50))

@pytest.fixture
def state_factory():
    from core.interfaces import Direction
    from core.snake_rules import SnakeState
    def make(body=((0, 0), (0, 1)), direction=Direction.RIGHT, grid=30, boundary="wrap"):
        return SnakeState(body, direction, grid_w=grid, grid_h=grid, boundary=boundary)
    return make

@pytest.fixture
def loop_factory(state_factory):
    from core.game_loop import GameLoop
    def make(**kwargs):
        return GameLoop(state_factory(**kwargs))
    return make

class ScriptedKeyboard:
    """Feeds one list of symbols per frame, then nothing."""
    def __init__(self, frames):
        self.frames = list(frames)
    def poll(self):
        return self.frames.pop(0) if self.frames else []

@pytest.fixture
def scripted_keyboard():
    return ScriptedKeyboard
