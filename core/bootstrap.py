"""core/bootstrap.py — Game bootstrap helpers.

Extracted from main.py to keep the entry point clean and readable.
Handles:
  - Map resolution (JSON file vs generated default)
  - Player creation from tuning values
  - World resources: Camera, Tileset, DebugFlags

All asset loading happens here, before the first tick.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

from components import (
    Animation, Collider, DebugFlags, Facing, Player, Position, Sprite, Tileset,
)
from core import tuning
from core.camera import Camera, MapBounds
from core.constants import (
    DEFAULT_MAP_HEIGHT, DEFAULT_MAP_WIDTH, PLACEHOLDER_COLOR, PLAYER_HEIGHT,
    PLAYER_START,
    PLAYER_SPEED, PLAYER_WIDTH, TILE_SIZE, VIEWPORT_HEIGHT, VIEWPORT_WIDTH,
)
from core.maps import default_map_data, load_grid, load_image
from core.tilegrid import TileGrid

if TYPE_CHECKING:
    from core.ecs import World


# ── Map resolution ───────────────────────────────────────────────────

def resolve_map(path: str | Path | None = None) -> TileGrid:
    """Load the map file, or generate a bordered field if it's missing.

    A map file that exists but is malformed raises ``MapDataError``;
    only a *missing* file falls back to the default.
    """
    if path is None:
        path = tuning.get("map", "path", "data/map.json")
    path = Path(path)
    if path.exists():
        return load_grid(path)

    w = tuning.get("map", "default_width", DEFAULT_MAP_WIDTH)
    h = tuning.get("map", "default_height", DEFAULT_MAP_HEIGHT)
    ts = tuning.get("map", "tile_size", TILE_SIZE)
    print(f"[MAP] {path} not found — generated default {w}×{h} map")
    return TileGrid.from_map_data(default_map_data(w, h, ts))


# ── Player creation ──────────────────────────────────────────────────

def create_player(world: World, grid: TileGrid) -> int:
    """Spawn the player entity from ``[player]`` tuning values."""
    def cfg(key, default):
        return tuning.get("player", key, default)

    player = world.spawn()

    width = cfg("width", PLAYER_WIDTH)
    height = cfg("height", PLAYER_HEIGHT)
    # Keep the spawn point on the map even if the map shrank
    x = max(0, min(cfg("x", PLAYER_START[0]), grid.pixel_width - width))
    y = max(0, min(cfg("y", PLAYER_START[1]), grid.pixel_height - height))

    sprite_path = cfg("sprite", "data/character/firetruckright.png")
    world.add(player, Position(x=float(x), y=float(y)))
    world.add(player, Collider(width=width, height=height))
    world.add(player, Facing(direction="right"))
    world.add(player, Player(speed=cfg("speed", PLAYER_SPEED)))
    world.add(player, Sprite(
        path=sprite_path,
        image=load_image(sprite_path),
        source_width=cfg("source_width", 690),
        source_height=cfg("source_height", 362),
        color=PLACEHOLDER_COLOR,
        layer=10,
    ))
    world.add(player, Animation(
        total_frames=cfg("total_frames", 1),
        speed=cfg("animation_speed", 0.1),
    ))
    return player


# ── World resources ──────────────────────────────────────────────────

def setup_world_resources(world: World, grid: TileGrid,
                          viewport: tuple[int, int] | None = None) -> Camera:
    """Register Camera, Tileset and DebugFlags on the world."""
    if viewport is None:
        viewport = (tuning.get("viewport", "width", VIEWPORT_WIDTH),
                    tuning.get("viewport", "height", VIEWPORT_HEIGHT))
    cam = Camera(width=viewport[0], height=viewport[1],
                 map_bounds=MapBounds(grid.pixel_width, grid.pixel_height))
    world.set_res(cam)

    tileset_path = tuning.get("map", "tileset", "data/tiles/spritesheet.bmp")
    world.set_res(Tileset(path=tileset_path, image=load_image(tileset_path)))
    world.set_res(DebugFlags(overlay=bool(tuning.get("debug", "overlay", True))))
    return cam
