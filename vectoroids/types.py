"""Shared type aliases, tick context and errors for the simulation core."""
from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from vectoroids.controls import Controls
    from vectoroids.world import World

Vec = tuple[float, float]

# Game states.
START_SCREEN = "start_screen"
PLAYING = "playing"
PAUSED = "paused"
GAME_OVER = "game_over"

# Size classes.
LARGE = "large"
MEDIUM = "medium"
SMALL = "small"


@dataclass(frozen=True, slots=True)
class TickContext:
    """Per-tick inputs handed to every system.

    ``now`` is the game clock in milliseconds. It only advances while
    playing, so every cooldown compared against it freezes during pause.
    """

    tick_number: int
    now: float
    controls: Controls
    random: _random.Random


class ConfigError(ValueError):
    """Raised when a GameConfig holds a value the simulation cannot run with."""


System = Callable[["World", TickContext], None]
