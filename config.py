# config.py
from dataclasses import dataclass, replace
from typing import Literal

Boundary = Literal["wrap", "clamp", "fault"]
BOUNDARIES = ("wrap", "clamp", "fault")

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid
    grid_w: int = 30
    grid_h: int = 30
    boundary: Boundary = "wrap"   # what happens when the head leaves the grid

    # timing
    ups: int = 8                  # logical update ticks per second
    fps: int = 60                 # render ticks per second
    max_catchup: int = 4          # max update ticks delivered per frame

    # render
    render_cell: int = 30         # pixels per grid unit
    render_title: str = "Snake Game"

    # logging
    log_level: str = "WARNING"

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "AppConfig":
        for name in ("grid_w", "grid_h", "ups", "fps", "max_catchup", "render_cell"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.boundary not in BOUNDARIES:
            raise ValueError(f"boundary must be one of {BOUNDARIES}, got {self.boundary!r}")
        return self
