"""scenes/world_draw.py — Rendering helpers for the world scene.

All pure-draw functions live here so that WorldScene.draw() stays thin.
Every function receives the data it needs as parameters — no implicit
coupling to the scene object beyond what is explicitly passed.

World → screen always goes through ``Camera.world_to_screen``; nothing
in here applies its own offset.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING

import pygame

from components import (
    Animation, Collider, DebugFlags, Facing, Player, Position, Sprite, Tileset,
)
from core.collision import corner_points
from core.constants import DEBUG_BOX_COLOR, DEBUG_POINT_COLOR

if TYPE_CHECKING:
    from core.app import App
    from core.camera import Camera
    from core.ecs import World
    from core.tilegrid import TileGrid, VisibleArea


def _screen_xy(cam: Camera, wx: float, wy: float) -> tuple[int, int]:
    sx, sy = cam.world_to_screen(wx, wy)
    return int(math.floor(sx)), int(math.floor(sy))


# ── Tiles ───────────────────────────────────────────────────────────

def draw_tiles(surface, grid: TileGrid, tileset: Tileset | None,
               cam: Camera, area: VisibleArea) -> int:
    """Blit every tile in *area*, back layer first.  Returns tiles drawn.

    Without a ready tileset nothing is drawn and 0 is returned; the
    caller decides whether that's worth mentioning.
    """
    if tileset is None or not tileset.ready:
        return 0
    image = tileset.image
    image_w = image.get_width()
    drawn = 0
    for _layer, tile in grid.visible_tiles(area):
        wx, wy, _, _ = grid.dest_rect(tile)
        sx, sy = _screen_xy(cam, wx, wy)
        surface.blit(image, (sx, sy), grid.source_rect(tile, image_w))
        drawn += 1
    return drawn


# ── Entities ────────────────────────────────────────────────────────

def sprite_frame(sprite: Sprite, anim: Animation | None,
                 facing: Facing | None, size: tuple[int, int]) -> pygame.Surface | None:
    """Cut the current frame out of the sprite sheet, scaled to *size*."""
    image = sprite.image
    if image is None:
        return None
    fw = sprite.source_width or image.get_width()
    fh = sprite.source_height or image.get_height()
    fx = anim.frame_x * fw if anim else 0
    fy = anim.frame_y * fh if anim else 0
    area = pygame.Rect(fx, fy, fw, fh).clip(image.get_rect())
    if area.width <= 0 or area.height <= 0:
        return None
    frame = pygame.transform.scale(image.subsurface(area), size)
    if facing is not None and facing.direction == "left":
        frame = pygame.transform.flip(frame, True, False)
    return frame


def draw_entities(surface: pygame.Surface, world: World, cam: Camera) -> int:
    """Draw every positioned sprite on screen.  Returns entities drawn."""
    view = surface.get_rect()
    entities = []
    for eid, pos, col, sprite in world.query(Position, Collider, Sprite):
        entities.append((sprite.layer, eid, pos, col, sprite))
    entities.sort(key=lambda e: (e[0], e[1]))

    drawn = 0
    for _, eid, pos, col, sprite in entities:
        sx, sy = _screen_xy(cam, pos.x, pos.y)
        rect = pygame.Rect(sx, sy, int(col.width), int(col.height))
        if not rect.colliderect(view):
            continue
        pygame.draw.rect(surface, sprite.color, rect)
        frame = sprite_frame(sprite, world.get(eid, Animation),
                             world.get(eid, Facing), rect.size)
        if frame is not None:
            surface.blit(frame, rect.topleft)
        drawn += 1
    return drawn


# ── Debug colliders / sample points ────────────────────────────────

def draw_debug_colliders(surface: pygame.Surface, world: World, cam: Camera,
                         margin: float):
    for _eid, _player, pos, col in world.query(Player, Position, Collider):
        sx, sy = _screen_xy(cam, pos.x, pos.y)
        pygame.draw.rect(surface, DEBUG_BOX_COLOR,
                         pygame.Rect(sx, sy, int(col.width), int(col.height)), 1)
        for px, py in corner_points(pos.x, pos.y, col.width, col.height, margin):
            surface.set_at(_screen_xy(cam, px, py), DEBUG_POINT_COLOR)


# ── Debug overlay (text) ───────────────────────────────────────────

def debug_lines(world: World, cam: Camera, area: VisibleArea | None,
                mouse_screen: tuple[int, int] | None = None) -> list[str]:
    """Text lines for the debug overlay."""
    lines: list[str] = []
    result = world.query_one(Player, Position)
    if result:
        eid, _, pos = result
        lines.append(f"Pos: {round(pos.x)},{round(pos.y)}")
        sprite = world.get(eid, Sprite)
        if sprite is not None:
            lines.append(f"Sprite loaded: {sprite.loaded}")
            if sprite.image is not None:
                lines.append(f"Image size: {sprite.image.get_width()}x"
                             f"{sprite.image.get_height()}")
    lines.append(f"Cam: {cam.x:.1f},{cam.y:.1f}")
    if area is not None:
        lines.append(f"Cols {area.start_col}-{area.end_col} "
                     f"Rows {area.start_row}-{area.end_row}")
    if mouse_screen is not None:
        mx, my = cam.screen_to_world(*mouse_screen)
        lines.append(f"Mouse: {int(mx)},{int(my)}")
    return lines


def draw_debug_overlay(surface: pygame.Surface, app: App, lines: list[str]):
    y = 6
    for line in lines:
        rect = app.draw_text_bg(surface, line, 6, y, font=app.font_sm)
        y = rect.bottom + 4


def debug_flags(world: World) -> DebugFlags:
    flags = world.res(DebugFlags)
    if flags is None:
        flags = DebugFlags()
        world.set_res(flags)
    return flags
