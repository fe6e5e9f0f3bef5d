"""core/maps.py — Map JSON and image asset loading.

Everything here runs before the first tick; the per-tick pipeline only
ever sees the finished ``TileGrid`` and already-loaded surfaces.

Map files are JSON (see ``TileGrid.from_map_data`` for the schema).
Images are anything ``pygame.image.load`` understands.  A missing or
unreadable image is not fatal: the loader logs it and returns ``None``,
and the renderer draws without it.
"""

from __future__ import annotations
import json
from pathlib import Path

import pygame

from core.constants import TILE_GROUND, TILE_WALL
from core.tilegrid import MapDataError, TileGrid


def load_map_data(path: str | Path) -> dict:
    """Read and parse a map JSON file.

    Raises ``FileNotFoundError`` if the file is missing and
    ``MapDataError`` if it isn't valid JSON.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as ex:
            raise MapDataError(f"{path}: invalid JSON ({ex})") from ex
    return data


def load_grid(path: str | Path) -> TileGrid:
    grid = TileGrid.from_map_data(load_map_data(path))
    print(f"[MAP] Loaded {path}: {grid.width}×{grid.height} tiles "
          f"@ {grid.tile_size}px, {len(grid.layers)} layers")
    return grid


def save_map_data(data: dict, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=1) + "\n", encoding="utf-8")


def default_map_data(width: int, height: int, tile_size: int) -> dict:
    """A ``width × height`` field: a ground layer plus a solid border.

    Used when no map file exists yet, and by ``data/generate_map.py``.
    """
    ground = [{"id": TILE_GROUND, "x": c, "y": r}
              for r in range(height) for c in range(width)]
    walls = [{"id": TILE_WALL, "x": c, "y": r}
             for r in range(height) for c in range(width)
             if r == 0 or c == 0 or r == height - 1 or c == width - 1]
    return {
        "mapWidth": width,
        "mapHeight": height,
        "tileSize": tile_size,
        "layers": [
            {"name": "ground", "collider": False, "tiles": ground},
            {"name": "walls", "collider": True, "tiles": walls},
        ],
    }


def load_image(path: str | Path) -> pygame.Surface | None:
    """Load an image, or log and return ``None`` if it can't be read."""
    path = Path(path)
    if not path.exists():
        print(f"[ASSETS] {path} not found")
        return None
    try:
        image = pygame.image.load(str(path))
    except pygame.error as ex:
        print(f"[ASSETS] failed to load {path}: {ex}")
        return None
    # convert_alpha() needs a display; headless callers keep the raw surface
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    print(f"[ASSETS] Loaded {path} ({image.get_width()}×{image.get_height()})")
    return image
