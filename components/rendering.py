"""components.rendering — Visual identity and sprite animation."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass
class Sprite:
    path: str = ""
    image: Any = None                   # pygame.Surface once loaded, else None
    source_width: int = 0               # region of the image to draw (0 → whole image)
    source_height: int = 0
    color: tuple = (200, 40, 40)        # placeholder box drawn under the image
    layer: int = 0                      # draw order

    @property
    def loaded(self) -> bool:
        return self.image is not None


@dataclass
class Animation:
    """Spritesheet frame stepping.  Only advances while ``moving``."""
    total_frames: int = 1
    speed: float = 0.1         # timer increment per tick
    frame_x: int = 0
    frame_y: int = 0
    timer: float = 0.0
    moving: bool = False
