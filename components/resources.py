"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass
class Player:
    """Marks the player entity."""
    speed: float = 1.0         # px per tick, per held direction


@dataclass
class Tileset:
    """The tileset image every map tile is cut from."""
    path: str = ""
    image: Any = None          # pygame.Surface, or None if it failed to load

    @property
    def ready(self) -> bool:
        return self.image is not None and self.image.get_width() > 0


@dataclass
class DebugFlags:
    overlay: bool = False      # text overlay (Tab)
    colliders: bool = False    # player box + sample points (G)
