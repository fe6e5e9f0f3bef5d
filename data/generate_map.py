"""data/generate_map.py — Generate the sample map JSON.

Run once:  python data/generate_map.py

Creates:
  data/map.json  (40×12 tiles @ 8 px)

Layers, back to front:
  ground   every cell, decorative (collider = false)
  walls    perimeter + a few interior blocks (collider = true)
  props    decorative speckles drawn over the ground (collider = false)
"""

import os
import random
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core.constants import TILE_GROUND, TILE_WALL
from core.maps import default_map_data, save_map_data

W, H, TILE = 40, 12, 8


def make_map() -> dict:
    data = default_map_data(W, H, TILE)
    walls = data["layers"][1]["tiles"]

    # ── Interior blocks ──
    for c in range(10, 14):
        walls.append({"id": TILE_WALL, "x": c, "y": 4})
    for r in range(2, 7):
        walls.append({"id": TILE_WALL, "x": 22, "y": r})
    for c in range(28, 31):
        for r in range(7, 9):
            walls.append({"id": TILE_WALL, "x": c, "y": r})

    # ── Decorative speckles (never block) ──
    random.seed(99)
    props = []
    for _ in range(30):
        props.append({"id": TILE_GROUND,
                      "x": random.randint(1, W - 2),
                      "y": random.randint(1, H - 2)})
    data["layers"].append({"name": "props", "collider": False, "tiles": props})
    return data


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "map.json")
    data = make_map()
    save_map_data(data, out)
    n = sum(len(layer["tiles"]) for layer in data["layers"])
    print(f"  map.json  {W}×{H}  tiles={n}")
