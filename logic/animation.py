"""logic/animation.py — Spritesheet frame stepping."""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import Animation

if TYPE_CHECKING:
    from core.ecs import World


def step_animation(anim: Animation) -> None:
    """Advance *anim* one tick.  Idle sprites hold their current frame."""
    if not anim.moving:
        return
    anim.timer += anim.speed
    if anim.timer >= 1:
        anim.timer = 0.0
        anim.frame_x = (anim.frame_x + 1) % max(1, anim.total_frames)


def animation_system(world: World) -> None:
    for _eid, anim in world.all_of(Animation):
        step_animation(anim)
