"""core/camera.py — Viewport that follows a target through world space.

The camera is a ``width × height`` pixel window whose top-left sits at
``(x, y)`` in world space.  Every tick it re-centres on its target and
clamps itself to the map, then tells the renderer which tiles overlap
the window.

World ↔ screen is a plain translation by the camera position.  The
renderer never translates by anything else: ``offset`` and
``world_to_screen`` read the same two numbers, so pointer input mapped
through ``screen_to_world`` lands where things were drawn.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Protocol

from core.tilegrid import VisibleArea


class Box(Protocol):
    """Anything with a top-left position and a size, in world pixels."""
    x: float
    y: float
    width: float
    height: float


@dataclass
class MapBounds:
    width: float   # px
    height: float  # px


@dataclass
class Camera:
    width: int                       # viewport px, fixed
    height: int
    map_bounds: MapBounds
    x: float = 0.0                   # viewport top-left, world px
    y: float = 0.0

    def follow(self, target: Box) -> None:
        """Centre on *target*'s box, then clamp to the map.

        ``min`` runs before ``max`` so a map smaller than the viewport
        pins the camera at 0 instead of a negative position.
        """
        x = target.x - self.width / 2 + target.width / 2
        y = target.y - self.height / 2 + target.height / 2
        self.x = max(0, min(x, self.map_bounds.width - self.width))
        self.y = max(0, min(y, self.map_bounds.height - self.height))

    def visible_area(self, tile_size: int) -> VisibleArea:
        """Inclusive tile range covered by the viewport.

        The end bound is rounded up, so a tile that is only partly on
        screen is still included (at most one tile of overscan per edge).
        """
        return VisibleArea(
            start_col=int(math.floor(self.x / tile_size)),
            end_col=int(math.ceil((self.x + self.width) / tile_size)),
            start_row=int(math.floor(self.y / tile_size)),
            end_row=int(math.ceil((self.y + self.height) / tile_size)),
        )

    @property
    def offset(self) -> tuple[float, float]:
        """Draw-surface translation for the current frame."""
        return -self.x, -self.y

    def world_to_screen(self, wx: float, wy: float) -> tuple[float, float]:
        ox, oy = self.offset
        return wx + ox, wy + oy

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        ox, oy = self.offset
        return sx - ox, sy - oy
