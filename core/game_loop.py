# core/game_loop.py
from __future__ import annotations
import logging
from typing import Dict, Optional
from .interfaces import Direction, LoopState, Renderer, Snapshot
from .snake_rules import SnakeState

logger = logging.getLogger(__name__)

KEY_TO_DIR: Dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


class GameLoop:
    """Dispatches update, input and render ticks to a single SnakeState.

    Running -> Stopped happens once, on a collision or a quit request.
    Stopped is terminal: later ticks and inputs are ignored.
    """
    def __init__(self, snake: SnakeState):
        self.snake = snake
        self.state = LoopState.RUNNING
        self.reason: Optional[str] = None
        self.step_count = 0

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def stop(self, reason: str) -> None:
        if not self.running:
            return
        self.state = LoopState.STOPPED
        self.reason = reason
        logger.info("game stopped (%s) after %d steps, head at %s",
                    reason, self.step_count, self.snake.head)

    def on_update_tick(self) -> bool:
        if not self.running:
            return False
        if not self.snake.advance():
            self.stop("self")
            return False
        self.step_count += 1
        return True

    def on_input(self, symbol: Optional[str]) -> None:
        if not self.running:
            return
        if symbol == "quit":
            self.stop("quit")
            return
        requested = KEY_TO_DIR.get(symbol)
        if requested is None:
            logger.debug("ignoring input %r", symbol)
            return
        if not self.snake.set_direction(requested):
            logger.debug("rejected reversal %s -> %s", self.snake.direction.name, requested.name)

    def on_render_tick(self, renderer: Renderer) -> None:
        renderer.draw(self.snake.render_cells())

    def snapshot(self) -> Snapshot:
        return self.snake.snapshot(
            step_count=self.step_count,
            terminated=not self.running,
            reason=self.reason,
        )
