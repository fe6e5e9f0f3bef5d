"""
main.py — Bootstrap

1. Load tuning
2. Create the app (viewport-sized virtual surface)
3. Resolve the map
4. Create the player and world resources (camera, tileset)
5. Push the world scene
6. Run
"""

from core import tuning
from core.app import App
from core.bootstrap import create_player, resolve_map, setup_world_resources
from core.constants import VIEWPORT_HEIGHT, VIEWPORT_WIDTH, WINDOW_SCALE
from scenes.world_scene import WorldScene


def main():
    tuning.load()

    viewport = (tuning.get("viewport", "width", VIEWPORT_WIDTH),
                tuning.get("viewport", "height", VIEWPORT_HEIGHT))
    app = App(
        title=tuning.get("app", "title", "Firetruck"),
        width=viewport[0], height=viewport[1],
        scale=tuning.get("app", "scale", WINDOW_SCALE),
        fps=tuning.get("app", "fps", 60),
    )

    # -- Assets must be fully loaded before the first tick --
    grid = resolve_map()
    setup_world_resources(app.world, grid, viewport)
    create_player(app.world, grid)

    print(f"[MAIN] Viewport {viewport[0]}×{viewport[1]}, "
          f"map {grid.pixel_width}×{grid.pixel_height}px")

    app.push_scene(WorldScene(grid))
    app.run()


if __name__ == "__main__":
    main()
