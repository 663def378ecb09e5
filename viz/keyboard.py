# viz/keyboard.py
from typing import List, Optional
import pygame as pg

ARROWS = {
    pg.K_UP: "up",
    pg.K_DOWN: "down",
    pg.K_LEFT: "left",
    pg.K_RIGHT: "right",
}

class Keyboard:
    def translate(self, e) -> Optional[str]:
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE: return "quit"
            return ARROWS.get(e.key)
        return None  # releases, mouse, window events

    def poll(self) -> List[str]:
        """Drain pending events, keep press order."""
        out = []
        for e in pg.event.get():
            sym = self.translate(e)
            if sym is not None:
                out.append(sym)
        return out
