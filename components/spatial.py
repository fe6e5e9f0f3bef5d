"""components.spatial — Position, bounding box, facing.

All coordinates and dimensions are in world pixels.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Position:
    x: float = 0.0        # px, top-left of the bounding box
    y: float = 0.0        # px


@dataclass
class Collider:
    """Axis-aligned bounding box anchored at the entity's Position."""
    width: float = 8.0    # px
    height: float = 8.0   # px


@dataclass
class Facing:
    """Which way the sprite faces.  Updated from horizontal input only.

    Values: 'right', 'left'
    """
    direction: str = "right"


@dataclass
class Box:
    """A positioned bounding box — what the camera follows."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def of(cls, pos: Position, col: Collider) -> Box:
        return cls(pos.x, pos.y, col.width, col.height)
