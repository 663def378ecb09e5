# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Sequence, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from config import AppConfig

Cell = Tuple[int, int]   # (column, row), row 0 at the top


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class LoopState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    dir: Direction
    step_count: int
    terminated: bool
    reason: str | None        # None, "self" or "quit"
    grid_w: int
    grid_h: int


class Renderer(Protocol):
    def open(self, cfg: "AppConfig") -> None: ...
    def draw(self, cells: Sequence[Cell]) -> None: ...
    def tick(self, fps: int) -> int: ...
    def close(self) -> None: ...
