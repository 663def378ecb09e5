# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
from config import AppConfig
from core.interfaces import Cell

class HeadlessRenderer:
    """Renderer that keeps the drawn frames instead of showing them."""
    def __init__(self, frame_ms: int = 16):
        self.frame_ms = frame_ms
        self.cfg: Optional[AppConfig] = None
        self.frames: List[Tuple[Cell, ...]] = []
        self.closed = False

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.closed = False
    def draw(self, cells: Sequence[Cell]) -> None:
        self.frames.append(tuple(cells))
    def tick(self, fps: int) -> int:
        return self.frame_ms
    def close(self) -> None:
        self.closed = True
