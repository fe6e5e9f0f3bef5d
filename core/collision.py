"""core/collision.py — Low-level box-vs-tile-grid collision primitives.

These live in ``core/`` (not ``logic/``) because both the movement
system and the debug renderer need the exact same sample points; the
renderer draws them so what you see is what the mover tests.

The test is all-or-nothing on a candidate position, not swept: it is
only correct while a single step is small compared to a tile (the
default speed is 1 px/tick on 8 px tiles).
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from core.constants import COLLISION_MARGIN

if TYPE_CHECKING:
    from core.tilegrid import TileGrid


def corner_points(x: float, y: float, bw: float, bh: float,
                  margin: float = COLLISION_MARGIN) -> list[tuple[float, float]]:
    """Return the four box corners, each pulled *margin* px inwards.

    Order: top-left, top-right, bottom-left, bottom-right.
    """
    return [
        (x + margin, y + margin),
        (x + bw - margin, y + margin),
        (x + margin, y + bh - margin),
        (x + bw - margin, y + bh - margin),
    ]


def box_hits_solid(grid: TileGrid, x: float, y: float, bw: float, bh: float,
                   margin: float = COLLISION_MARGIN) -> bool:
    """Return True if any inset corner of the box lands in a solid tile.

    Parameters
    ----------
    grid : TileGrid
        Map to test against; only collider layers count.
    x, y : float
        Top-left corner of the box in world pixels.
    bw, bh : float
        Box width / height in pixels.
    margin : float
        Inset applied to each corner sample.
    """
    return any(grid.is_solid(px, py)
               for px, py in corner_points(x, y, bw, bh, margin))
