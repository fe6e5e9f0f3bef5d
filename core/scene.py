"""
core/scene.py — Scene interface

Every screen in the game is a Scene. The app holds a stack of them.
Only the top scene gets update/draw calls. Scenes below stay frozen.

There is no delta-time: the game advances one fixed step per frame,
so ``update`` takes only the app.

To make a new scene:

    class MyScene(Scene):
        def on_enter(self, app):
            # setup, called when scene becomes active
            pass

        def handle_event(self, event, app):
            # pygame event
            pass

        def update(self, app):
            # one simulation step
            pass

        def draw(self, surface, app):
            # draw to the viewport-sized surface
            pass

        def draw_overlay(self, screen, app):
            # draw text on the scaled window
            pass
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        """Process a single pygame event."""
        pass

    def update(self, app: App):
        """Advance the simulation one step."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        """Draw to the virtual (viewport-sized) surface."""
        pass

    def draw_overlay(self, screen: pygame.Surface, app: App):
        """Draw on the window after the virtual surface is scaled up."""
        pass
