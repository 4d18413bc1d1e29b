"""Keyboard sampling into engine Controls."""
from __future__ import annotations

import pygame

from ui.constants import KEY_BINDINGS
from vectoroids import Controls, InputLatch


class Keyboard:
    """Reads the held keys once per frame and de-duplicates presses."""

    def __init__(self) -> None:
        self._latch = InputLatch()

    def sample(self) -> Controls:
        keys = pygame.key.get_pressed()
        pressed: dict[str, bool] = {}
        for key, action in KEY_BINDINGS.items():
            # Several keys may map to one action; any of them counts.
            pressed[action] = pressed.get(action, False) or bool(keys[key])
        return self._latch.sample(pressed)
