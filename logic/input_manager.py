"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and game actions.  The scene feeds in
raw events; the manager maps them to *intents*.  Other systems read the
intents — they never touch raw keycodes, and the movement system never
reads keyboard state at all: it gets the snapshot from ``directions()``.

Usage (in world_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    self.input.end_frame()          # captures held-key state

    if self.input.just("toggle_debug"):   # discrete press
        ...
    snapshot = self.input.directions()    # {"up": False, "right": True, ...}
"""

from __future__ import annotations
from typing import Any
import pygame

from core.constants import DIRECTIONS


# ── Default key bindings ────────────────────────────────────────────

_BINDS: dict[str, list[int]] = {
    # Movement  (held — continuous)
    "move_up":          [pygame.K_w, pygame.K_UP],
    "move_down":        [pygame.K_s, pygame.K_DOWN],
    "move_left":        [pygame.K_a, pygame.K_LEFT],
    "move_right":       [pygame.K_d, pygame.K_RIGHT],
    # Debug / toggles  (press — discrete)
    "toggle_debug":     [pygame.K_TAB],
    "toggle_colliders": [pygame.K_g],
    "reload_tuning":    [pygame.K_F5],
    "quit":             [pygame.K_ESCAPE],
}


class InputManager:
    """Key → intent mapper.

    Call ``begin_frame()`` before processing events,
    ``feed(event)`` for each pygame event,
    ``end_frame()`` after all events.

    Then use ``just(intent)`` for discrete presses and
    ``held(intent)`` for continuous holds.
    """

    def __init__(self, binds: dict[str, list[int]] | None = None):
        self.binds = binds if binds is not None else _BINDS
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Intents currently held (key is down right now)
        self._held: set[str] = set()

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event.  KEYDOWN maps to discrete intents."""
        if event.type != pygame.KEYDOWN:
            return
        for intent, keys in self.binds.items():
            if event.key in keys:
                self._pressed.add(intent)

    def end_frame(self):
        """Snapshot held-key state for continuous intents (movement)."""
        self.capture(pygame.key.get_pressed())

    def capture(self, pressed: Any):
        """Set held intents from *pressed*, indexable by pygame key code."""
        self._held.clear()
        for intent, keys in self.binds.items():
            if any(pressed[k] for k in keys):
                self._held.add(intent)

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        """True if the intent is continuously held down."""
        return intent in self._held

    def directions(self) -> dict[str, bool]:
        """Held state of each movement direction, as a fresh dict."""
        return {d: self.held(f"move_{d}") for d in DIRECTIONS}
