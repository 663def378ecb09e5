# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional, Sequence
from config import AppConfig
from core.interfaces import Cell
import viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cell = 30
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.grid_w * self.cell, cfg.grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def draw(self, cells: Sequence[Cell]) -> None:
        assert self.surf is not None, "Renderer not opened"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)
        for (x, y) in cells:
            pg.draw.rect(surf, theme.BODY, pg.Rect(x * c, y * c, c, c))

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> int:
        """Throttle to fps, return milliseconds since the previous tick."""
        if self.clock:
            return self.clock.tick(fps)
        return 0

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    def attach_surface(self, surface: pg.Surface, cell: Optional[int] = None) -> None:
        if not pg.get_init():
            pg.init()
        self.surf = surface
        if cell is not None:
            self.cell = cell
        self.clock = None  # embedding surface typically controls timing
        self._auto_flip = False
