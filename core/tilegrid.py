"""core/tilegrid.py — Layered tile map: geometry, solidity, visibility.

A map is a grid of ``width × height`` cells, each ``tile_size`` pixels
square, plus an ordered list of layers.  Each layer places tiles at grid
cells; layer order is draw order (back to front).  Layers flagged as
``collider`` make their cells solid.

The grid is built once from parsed map data and never changes after
that, so every query here is pure and safe to call every frame::

    grid = TileGrid.from_map_data(json.load(f))
    grid.is_solid(px, py)                 # pixel → solid?
    for layer, tile in grid.visible_tiles(camera.visible_area(grid.tile_size)):
        ...
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, NamedTuple


class MapDataError(ValueError):
    """Map data is malformed; the grid cannot be built from it."""


@dataclass(frozen=True)
class Tile:
    id: int        # index into the tileset image
    x: int         # grid column
    y: int         # grid row


@dataclass(frozen=True)
class Layer:
    name: str
    collider: bool
    tiles: tuple[Tile, ...] = ()


class VisibleArea(NamedTuple):
    """Inclusive tile range overlapping the viewport (with edge overscan)."""
    start_col: int
    end_col: int
    start_row: int
    end_row: int

    def contains(self, col: int, row: int) -> bool:
        return (self.start_col <= col <= self.end_col
                and self.start_row <= row <= self.end_row)


class TileGrid:
    def __init__(self, tile_size: int, width: int, height: int,
                 layers: list[Layer] | tuple[Layer, ...] = ()):
        if tile_size <= 0:
            raise MapDataError(f"tileSize must be positive, got {tile_size}")
        if width < 0 or height < 0:
            raise MapDataError(
                f"map dimensions must be non-negative, got {width}×{height}")
        self._tile_size = tile_size
        self._width = width
        self._height = height
        self._layers = tuple(layers)
        # Cells covered by any collider layer.  Same answer as scanning
        # the collider layers, without the per-query scan.
        self._solid: frozenset[tuple[int, int]] = frozenset(
            (t.x, t.y)
            for layer in self._layers if layer.collider
            for t in layer.tiles
        )

    # -- Geometry --

    @property
    def tile_size(self) -> int:
        return self._tile_size

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def layers(self) -> tuple[Layer, ...]:
        return self._layers

    @property
    def pixel_width(self) -> int:
        return self._width * self._tile_size

    @property
    def pixel_height(self) -> int:
        return self._height * self._tile_size

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self._width and 0 <= row < self._height

    def tile_at(self, px: float, py: float) -> tuple[int, int]:
        """Return the ``(col, row)`` cell containing pixel ``(px, py)``."""
        return (int(math.floor(px / self._tile_size)),
                int(math.floor(py / self._tile_size)))

    # -- Queries --

    def is_solid(self, px: float, py: float) -> bool:
        """True if pixel ``(px, py)`` falls in a cell of a collider layer.

        Decorative (non-collider) layers never block.  Coordinates off
        the map match no tile and are not solid.
        """
        return self.tile_at(px, py) in self._solid

    def visible_tiles(self, area: VisibleArea) -> Iterator[tuple[Layer, Tile]]:
        """Yield ``(layer, tile)`` for every on-map tile inside *area*.

        Layers come out in draw order.  Tiles placed outside the grid are
        never yielded, even when the overscan of *area* reaches past the
        map edge.  This is a linear scan over every
        tile of every layer, O(total tiles) per call; fine for maps a few
        screens across.
        """
        for layer in self._layers:
            for tile in layer.tiles:
                if area.contains(tile.x, tile.y) and self.in_bounds(tile.x, tile.y):
                    yield layer, tile

    def dest_rect(self, tile: Tile) -> tuple[int, int, int, int]:
        """World-space pixel rect a tile occupies."""
        ts = self._tile_size
        return tile.x * ts, tile.y * ts, ts, ts

    def source_rect(self, tile: Tile, image_width: int) -> tuple[int, int, int, int]:
        """Rect of *tile*'s image inside a tileset *image_width* pixels wide.

        Tiles are packed left to right, wrapping onto the next row of
        the tileset when a row is full.
        """
        ts = self._tile_size
        offset = tile.id * ts
        return offset % image_width, (offset // image_width) * ts, ts, ts

    # -- Construction --

    @classmethod
    def from_map_data(cls, data: dict) -> TileGrid:
        """Build a grid from the parsed map JSON.

        Expected shape::

            {"mapWidth": 40, "mapHeight": 12, "tileSize": 8,
             "layers": [{"name": "walls", "collider": true,
                         "tiles": [{"id": 3, "x": 0, "y": 0}, ...]}, ...]}

        Raises ``MapDataError`` on anything malformed.  Tiles placed
        outside the grid are kept for solidity, never drawn, and
        reported once.
        """
        if not isinstance(data, dict):
            raise MapDataError(f"map data must be an object, got {type(data).__name__}")

        tile_size = _require_int(data, "tileSize", "map")
        width = _require_int(data, "mapWidth", "map")
        height = _require_int(data, "mapHeight", "map")
        if tile_size <= 0:
            raise MapDataError(f"tileSize must be positive, got {tile_size}")
        if width < 0 or height < 0:
            raise MapDataError(
                f"map dimensions must be non-negative, got {width}×{height}")

        raw_layers = data.get("layers", [])
        if not isinstance(raw_layers, list):
            raise MapDataError("'layers' must be a list")

        layers: list[Layer] = []
        stray = 0
        for i, raw in enumerate(raw_layers):
            if not isinstance(raw, dict):
                raise MapDataError(f"layer {i} must be an object")
            name = str(raw.get("name") or f"layer{i}")
            raw_tiles = raw.get("tiles")
            if not isinstance(raw_tiles, list):
                raise MapDataError(f"layer '{name}' has no 'tiles' list")
            tiles = []
            for j, rt in enumerate(raw_tiles):
                where = f"layer '{name}' tile {j}"
                if not isinstance(rt, dict):
                    raise MapDataError(f"{where} must be an object")
                tile = Tile(
                    id=_require_int(rt, "id", where),
                    x=_require_int(rt, "x", where),
                    y=_require_int(rt, "y", where),
                )
                if tile.id < 0:
                    raise MapDataError(f"{where} has negative id {tile.id}")
                if not (0 <= tile.x < width and 0 <= tile.y < height):
                    stray += 1
                tiles.append(tile)
            collider = raw.get("collider", False)
            if not isinstance(collider, bool):
                raise MapDataError(
                    f"layer '{name}' 'collider' must be true or false, got {collider!r}")
            layers.append(Layer(name=name, collider=collider, tiles=tuple(tiles)))

        if stray:
            print(f"[MAP] {stray} tile(s) lie outside the {width}×{height} grid")
        return cls(tile_size, width, height, layers)


def _require_int(obj: dict, key: str, where: str) -> int:
    value = obj.get(key)
    # bool is an int subclass; a stray ``true`` is still malformed
    if isinstance(value, bool) or not isinstance(value, int):
        if value is None:
            raise MapDataError(f"{where} is missing '{key}'")
        raise MapDataError(f"{where} '{key}' must be an integer, got {value!r}")
    return value
