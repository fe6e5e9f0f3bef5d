"""logic/tick.py — System tick orchestration.

One call per frame runs the whole ordered pipeline:

    input snapshot → movement → animation → camera follow → visible area

The scene hands in the direction snapshot from the InputManager; nothing
in here reads the keyboard.

Usage::

    from logic.tick import tick_systems
    area = tick_systems(world, grid, input.directions())
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Mapping

from components import Box, Collider, Player, Position
from core.camera import Camera, MapBounds
from core.constants import COLLISION_MARGIN
from logic.animation import animation_system
from logic.movement import movement_system

if TYPE_CHECKING:
    from core.ecs import World
    from core.tilegrid import TileGrid, VisibleArea


def camera_system(world: World) -> None:
    """Re-centre the Camera resource on the player's box."""
    cam = world.res(Camera)
    result = world.query_one(Player, Position, Collider)
    if cam is None or result is None:
        return
    _, _, pos, col = result
    cam.follow(Box.of(pos, col))


def tick_systems(world: World, grid: TileGrid,
                 directions: Mapping[str, bool],
                 *, margin: float = COLLISION_MARGIN) -> VisibleArea | None:
    """Run every per-frame system once, in order.

    Parameters
    ----------
    world : World
        The ECS world (player entity + Camera resource).
    grid : TileGrid
        The loaded map; read-only.
    directions : Mapping[str, bool]
        Held state of ``up``/``down``/``left``/``right`` this frame.
    margin : float
        Collision sample inset, in pixels.

    Returns the camera's visible tile range for the renderer, or None
    when there is no camera.
    """
    cam = world.res(Camera)
    bounds = cam.map_bounds if cam else MapBounds(grid.pixel_width, grid.pixel_height)

    movement_system(world, grid, bounds, directions, margin)
    animation_system(world)
    camera_system(world)

    if cam is None:
        return None
    return cam.visible_area(grid.tile_size)
