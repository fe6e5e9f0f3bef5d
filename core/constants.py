"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Most of these are only *defaults*: ``data/tuning.toml`` overrides them
at startup (see ``core/tuning.py``).

Unit System
-----------
All positions and sizes are measured in **pixels** of world space,
with the origin at the top-left of the map.  Tile coordinates are
always non-negative integers and are named ``col``/``row`` (or
``tile_x``/``tile_y``) to keep the two apart:

    tile_x = floor(pixel_x / tile_size)

Screen space is world space shifted by the camera position; only the
renderer and mouse handling deal in screen pixels.
"""

# ── Map ─────────────────────────────────────────────────────────────
TILE_SIZE = 8                      # px per tile edge (uniform)
DEFAULT_MAP_WIDTH = 40             # tiles, used when no map file exists
DEFAULT_MAP_HEIGHT = 12            # tiles

# Tileset indices used by the generated default map
TILE_GROUND = 0
TILE_WALL = 1

# ── Viewport ────────────────────────────────────────────────────────
VIEWPORT_WIDTH = 29 * 4            # px
VIEWPORT_HEIGHT = 6 * 4            # px
WINDOW_SCALE = 6                   # window px per viewport px

# ── Player ──────────────────────────────────────────────────────────
PLAYER_SPEED = 1.0                 # px per tick, per held direction
PLAYER_WIDTH = 8                   # px
PLAYER_HEIGHT = 8                  # px
PLAYER_START = (32.0, 64.0)        # px, top-left

# Corner sample points are pulled in from the true box corner by this
# much, so a sprite's transparent padding doesn't snag on walls.
COLLISION_MARGIN = 4               # px

# ── Directions ──────────────────────────────────────────────────────
DIRECTIONS = ("up", "down", "left", "right")

# ── Render ──────────────────────────────────────────────────────────
BACKGROUND_COLOR = (20, 20, 25)
PLACEHOLDER_COLOR = (200, 40, 40)  # player box drawn under the sprite
DEBUG_BOX_COLOR = (0, 255, 0)
DEBUG_POINT_COLOR = (255, 255, 0)
