# core/scheduler.py
from __future__ import annotations


class UpdateScheduler:
    """Fixed-step accumulator: turns elapsed frame time into update ticks."""
    def __init__(self, ups: int, max_catchup: int = 4):
        if ups <= 0:
            raise ValueError(f"ups must be positive, got {ups}")
        self.ups = ups
        self.step_ms = 1000.0 / ups
        self.max_catchup = max(1, max_catchup)
        self._acc = 0.0

    def advance(self, dt_ms: float) -> int:
        """Add dt_ms of elapsed time, return how many update ticks are due."""
        self._acc += max(0.0, float(dt_ms))
        due = int(self._acc // self.step_ms)
        if due > self.max_catchup:
            # drop the backlog instead of fast-forwarding the snake
            self._acc = 0.0
            return self.max_catchup
        self._acc -= due * self.step_ms
        return due

    def reset(self) -> None:
        self._acc = 0.0
