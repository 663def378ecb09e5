# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Tuple
from .interfaces import Cell, Direction, Snapshot
from config import AppConfig, BOUNDARIES

START_BODY: Tuple[Cell, ...] = ((0, 0), (0, 1))
START_DIR = Direction.RIGHT


class OutOfBoundsError(ValueError):
    """Raised by the "fault" boundary policy when the head would leave the grid."""
    def __init__(self, cell: Cell, grid_w: int, grid_h: int):
        super().__init__(f"head would leave the {grid_w}x{grid_h} grid at {cell}")
        self.cell = cell


class SnakeState:
    """Body and heading of the snake.

    The body keeps a constant length: every successful advance pushes a new
    head and drops the tail. A move onto an occupied cell is reported by
    `advance()` returning False and leaves the body as it was.
    """
    def __init__(self, body: Iterable[Cell], direction: Direction = START_DIR,
                 grid_w: int = 30, grid_h: int = 30, boundary: str = "wrap"):
        self.body: Deque[Cell] = deque((int(x), int(y)) for x, y in body)
        if not self.body:
            raise ValueError("snake body must hold at least one cell")
        if boundary not in BOUNDARIES:
            raise ValueError(f"unknown boundary policy {boundary!r}")
        for (x, y) in self.body:
            if not (0 <= x < grid_w and 0 <= y < grid_h):
                raise ValueError(f"cell {(x, y)} lies outside the {grid_w}x{grid_h} grid")
        self.direction = direction
        self.grid_w = grid_w
        self.grid_h = grid_h
        self.boundary = boundary

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "SnakeState":
        return cls(START_BODY, START_DIR, grid_w=cfg.grid_w, grid_h=cfg.grid_h,
                   boundary=cfg.boundary)

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        return self.body[0]

    def set_direction(self, requested: Direction) -> bool:
        # a reversal would put the head straight into the neck
        if requested == self.direction.opposite():
            return False
        self.direction = requested
        return True

    def next_head(self) -> Cell:
        hx, hy = self.body[0]
        dx, dy = self.direction.delta
        return self._apply_boundary((hx + dx, hy + dy))

    def advance(self) -> bool:
        new_head = self.next_head()
        if self.is_self_colliding(new_head):
            return False
        self.body.appendleft(new_head)
        self.body.pop()
        return True

    def is_self_colliding(self, cell: Cell) -> bool:
        return cell in self.body

    def render_cells(self) -> Tuple[Cell, ...]:
        return tuple(self.body)

    def snapshot(self, step_count: int = 0, terminated: bool = False,
                 reason: str | None = None) -> Snapshot:
        return Snapshot(
            snake=self.render_cells(),
            dir=self.direction,
            step_count=step_count,
            terminated=terminated,
            reason=reason,
            grid_w=self.grid_w,
            grid_h=self.grid_h,
        )

    # ---------- helpers ----------
    def _apply_boundary(self, cell: Cell) -> Cell:
        x, y = cell
        if 0 <= x < self.grid_w and 0 <= y < self.grid_h:
            return cell
        if self.boundary == "wrap":
            return (x % self.grid_w, y % self.grid_h)
        if self.boundary == "clamp":
            # head stays put, which is always an occupied cell
            return (min(max(x, 0), self.grid_w - 1), min(max(y, 0), self.grid_h - 1))
        raise OutOfBoundsError(cell, self.grid_w, self.grid_h)
