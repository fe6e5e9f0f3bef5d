"""
scenes/world_scene.py — Top-down tile view

Renders the tile map and the player on top of it.
Camera follows the player. WASD / arrows to move.
Tab toggles the debug overlay, G the collider view, F5 reloads tuning.

Only tiles inside the camera's visible area are drawn.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.camera import Camera
from core.constants import BACKGROUND_COLOR, COLLISION_MARGIN
from core.tilegrid import TileGrid, VisibleArea
from components import Tileset
from core import tuning as tuning_mod
from logic.input_manager import InputManager
from logic.tick import tick_systems
from scenes.world_draw import (
    debug_flags, debug_lines, draw_debug_colliders, draw_debug_overlay,
    draw_entities, draw_tiles,
)


class WorldScene(Scene):
    def __init__(self, grid: TileGrid):
        self.grid = grid
        self.input = InputManager()
        self.margin = COLLISION_MARGIN
        self.area: VisibleArea | None = None
        self.tiles_drawn = 0
        self._warned_tileset = False

    def on_enter(self, app: App):
        self.margin = tuning_mod.get("collision", "margin", COLLISION_MARGIN)
        cam = app.world.res(Camera)
        if cam:
            self.area = cam.visible_area(self.grid.tile_size)

    # ── event handler ────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    # ── update ───────────────────────────────────────────────────────

    def update(self, app: App):
        self.input.end_frame()

        flags = debug_flags(app.world)
        if self.input.just("quit"):
            app.quit()
        if self.input.just("toggle_debug"):
            flags.overlay = not flags.overlay
        if self.input.just("toggle_colliders"):
            flags.colliders = not flags.colliders
        if self.input.just("reload_tuning"):
            tuning_mod.reload()
            self.margin = tuning_mod.get("collision", "margin", COLLISION_MARGIN)

        self.area = tick_systems(app.world, self.grid, self.input.directions(),
                                 margin=self.margin)
        self.input.begin_frame()

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(BACKGROUND_COLOR)
        cam = app.world.res(Camera)
        if cam is None or self.area is None:
            return

        self.tiles_drawn = draw_tiles(surface, self.grid, app.world.res(Tileset),
                                      cam, self.area)
        if self.tiles_drawn == 0 and not self._warned_tileset:
            tileset = app.world.res(Tileset)
            if tileset is None or not tileset.ready:
                print("[RENDER] tileset not ready — skipping tiles")
                self._warned_tileset = True

        draw_entities(surface, app.world, cam)

        if debug_flags(app.world).colliders:
            draw_debug_colliders(surface, app.world, cam, self.margin)

    def draw_overlay(self, screen: pygame.Surface, app: App):
        if not debug_flags(app.world).overlay:
            return
        cam = app.world.res(Camera)
        if cam is None:
            return
        lines = debug_lines(app.world, cam, self.area, app.mouse_pos())
        lines.append(f"Tiles drawn: {self.tiles_drawn}")
        draw_debug_overlay(screen, app, lines)
