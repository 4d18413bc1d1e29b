"""Window, color and key-binding constants."""
from __future__ import annotations

import pygame

WIDTH, HEIGHT = 1024, 768
FPS = 60
TITLE = "Vectoroids"

COLOR_BG = (0, 0, 0)
COLOR_LINE = (255, 255, 255)
COLOR_TEXT = (255, 255, 255)
COLOR_DIM = (150, 150, 150)
COLOR_FLAME = (255, 160, 40)

HIGH_SCORE_FILE = "vectoroids_highscore.json"

# pygame key -> input action name understood by InputLatch.
KEY_BINDINGS: dict[int, str] = {
    pygame.K_LEFT: "turn_left",
    pygame.K_a: "turn_left",
    pygame.K_RIGHT: "turn_right",
    pygame.K_d: "turn_right",
    pygame.K_UP: "thrust",
    pygame.K_w: "thrust",
    pygame.K_SPACE: "fire",
    pygame.K_LSHIFT: "teleport",
    pygame.K_RSHIFT: "teleport",
    pygame.K_p: "toggle_pause",
    pygame.K_RETURN: "start",
    pygame.K_s: "toggle_sound",
    pygame.K_f: "toggle_fire_sound",
}
