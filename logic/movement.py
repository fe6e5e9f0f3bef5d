"""logic/movement.py — Player movement against the tile grid.

A move is tested as a whole: the candidate box either has no inset
corner in a solid tile and is committed (clamped to the map), or the
entity stays where it is for this tick.  There is no wall-sliding; a
diagonal into a wall stops both axes even when one of them is open.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Mapping

from components import Animation, Collider, Facing, Player, Position
from core.collision import box_hits_solid
from core.constants import COLLISION_MARGIN, DIRECTIONS

if TYPE_CHECKING:
    from core.camera import MapBounds
    from core.ecs import World
    from core.tilegrid import TileGrid


def direction_delta(directions: Mapping[str, bool], speed: float) -> tuple[float, float]:
    """Sum the held directions into a ``(dx, dy)`` step.

    Not normalised: a diagonal moves *speed* on both axes.  Opposite
    directions cancel out.
    """
    dx = 0.0
    dy = 0.0
    if directions.get("right"):
        dx += speed
    if directions.get("left"):
        dx -= speed
    if directions.get("up"):
        dy -= speed
    if directions.get("down"):
        dy += speed
    return dx, dy


def move_box(x: float, y: float, dx: float, dy: float,
             bw: float, bh: float,
             grid: TileGrid, bounds: MapBounds,
             margin: float = COLLISION_MARGIN) -> tuple[float, float]:
    """Return the box's position after trying to step by ``(dx, dy)``.

    Rejected moves return ``(x, y)`` unchanged.  Accepted moves are
    clamped into ``[0, bounds.width - bw] × [0, bounds.height - bh]``.
    """
    nx = x + dx
    ny = y + dy
    if box_hits_solid(grid, nx, ny, bw, bh, margin):
        return x, y
    nx = max(0, min(nx, bounds.width - bw))
    ny = max(0, min(ny, bounds.height - bh))
    return nx, ny


def movement_system(world: World, grid: TileGrid, bounds: MapBounds,
                    directions: Mapping[str, bool],
                    margin: float = COLLISION_MARGIN) -> None:
    """Move every player entity one tick according to *directions*."""
    for eid, player, pos, col in world.query(Player, Position, Collider):
        dx, dy = direction_delta(directions, player.speed)
        pos.x, pos.y = move_box(pos.x, pos.y, dx, dy,
                                col.width, col.height, grid, bounds, margin)

        # Facing / animation follow the *input*, even on a blocked move
        facing = world.get(eid, Facing)
        if facing is not None:
            if directions.get("right"):
                facing.direction = "right"
            if directions.get("left"):
                facing.direction = "left"
        anim = world.get(eid, Animation)
        if anim is not None:
            anim.moving = any(directions.get(d) for d in DIRECTIONS)
