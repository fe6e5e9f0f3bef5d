"""
core/app.py — Pygame application shell

Owns the window, the fixed-step main loop and the scene stack.

    app = App(title="Firetruck", width=116, height=24, scale=6)
    app.push_scene(MyScene())
    app.run()

``width × height`` is the *virtual* resolution: the camera viewport, in
world pixels.  Scenes draw into a surface exactly that size.  Each frame
the app blows it up by the largest whole-number factor that fits the
window and centres it, so tile pixels stay square and crisp; the rest of
the window is letterboxed.  Text overlays go on the window itself, after
the scale, via ``Scene.draw_overlay``.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.ecs import World

LETTERBOX_COLOR = (0, 0, 0)


class App:
    def __init__(self, title: str = "Firetruck", width: int = 116, height: int = 24,
                 scale: int = 6, fps: int = 60):
        pygame.init()
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode(
            (width * max(1, scale), height * max(1, scale)), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = fps

        self._scenes: list[Scene] = []
        self.world = World()

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 12)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)

    def quit(self):
        self.running = False

    # -- Virtual surface placement --

    @property
    def virtual_size(self) -> tuple[int, int]:
        return self._virtual_size

    def viewport_rect(self) -> pygame.Rect:
        """Where the scaled virtual surface sits inside the window."""
        sw, sh = self.screen.get_size()
        vw, vh = self._virtual_size
        scale = max(1, min(sw // vw, sh // vh))
        w, h = vw * scale, vh * scale
        return pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)

    def mouse_pos(self) -> tuple[int, int]:
        """Mouse position in virtual-surface (screen-space) pixels.

        Clamped to the virtual surface, so a pointer over the letterbox
        reads as the nearest edge pixel.
        """
        mx, my = pygame.mouse.get_pos()
        view = self.viewport_rect()
        vw, vh = self._virtual_size
        vx = (mx - view.x) * vw // view.w
        vy = (my - view.y) * vh // view.h
        return max(0, min(vx, vw - 1)), max(0, min(vy, vh - 1))

    # -- Main loop --

    def run(self):
        while self.running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    self.scene.handle_event(event, self)

            # One fixed step per frame; no delta time
            if self.scene:
                self.scene.update(self)

            if self.scene:
                self.scene.draw(self._render_surface, self)

            view = self.viewport_rect()
            self.screen.fill(LETTERBOX_COLOR)
            self.screen.blit(
                pygame.transform.scale(self._render_surface, view.size), view.topleft)
            if self.scene:
                self.scene.draw_overlay(self.screen, self)
            pygame.display.flip()

        pygame.quit()

    # -- Convenience --

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2) -> pygame.Rect:
        """Draw text over a translucent box. Returns the text rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        w, h = img.get_size()
        box = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        box.fill(bg)
        surface.blit(box, (x - pad, y - pad))
        return surface.blit(img, (x, y))
