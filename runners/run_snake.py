# runners/run_snake.py
from __future__ import annotations
import logging
from core.game_loop import GameLoop
from core.interfaces import Snapshot
from core.scheduler import UpdateScheduler
from core.snake_rules import SnakeState
from config import AppConfig

logger = logging.getLogger(__name__)

LOST_MESSAGE = "You lost !"

def main(cfg: AppConfig | None = None, renderer=None, keyboard=None) -> Snapshot:
    cfg = (cfg or AppConfig()).validate()

    if renderer is None:
        from viz.renderer_pygame import PygameRenderer
        renderer = PygameRenderer()
    if keyboard is None:
        from viz.keyboard import Keyboard
        keyboard = Keyboard()

    game = GameLoop(SnakeState.from_config(cfg))
    sched = UpdateScheduler(cfg.ups, max_catchup=cfg.max_catchup)

    renderer.open(cfg)
    logger.info("starting %dx%d grid at %d ups, boundary=%s",
                cfg.grid_w, cfg.grid_h, cfg.ups, cfg.boundary)
    try:
        while game.running:
            for sym in keyboard.poll():
                game.on_input(sym)

            dt = renderer.tick(cfg.fps)
            for _ in range(sched.advance(dt)):
                if not game.on_update_tick():
                    break

            if game.running:
                game.on_render_tick(renderer)
    finally:
        renderer.close()

    if game.reason == "self":
        print(LOST_MESSAGE)
    return game.snapshot()
