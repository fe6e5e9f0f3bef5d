"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Position, Collider, Facing, Box
rendering      Sprite, Animation
resources      Player, Tileset, DebugFlags

All public names are re-exported here so code can simply do
``from components import Position``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Position, Collider, Facing, Box

# ── Rendering ────────────────────────────────────────────────────────
from components.rendering import Sprite, Animation

# ── World resources / singletons ─────────────────────────────────────
from components.resources import Player, Tileset, DebugFlags

__all__ = [
    # spatial
    "Position", "Collider", "Facing", "Box",
    # rendering
    "Sprite", "Animation",
    # resources
    "Player", "Tileset", "DebugFlags",
]
