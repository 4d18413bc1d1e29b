"""Entity kinds. Every kind shares a Body: position, velocity and radius."""
from __future__ import annotations

from dataclasses import dataclass

from vectoroids.types import Vec


@dataclass
class Body:
    """Anything positioned in the world."""

    position: Vec
    velocity: Vec
    radius: float


@dataclass
class Ship(Body):
    """The player ship.

    While ``dead`` only ``respawn_ticks`` matters. Lethal collisions are
    ignored while the game clock is below ``invincible_until``.
    """

    heading: float = 0.0
    thrusting: bool = False
    dead: bool = False
    respawn_ticks: int = 0
    invincible_until: float = 0.0
    fire_cooldown: int = 0


@dataclass
class Bullet(Body):
    """Player or saucer projectile. Expires when ``life`` reaches zero."""

    life: int = 0


@dataclass(frozen=True)
class Vertex:
    """One outline point: angle around the centre and radius ratio."""

    angle: float
    ratio: float


@dataclass
class Asteroid(Body):
    size: str = ""
    outline: tuple[Vertex, ...] = ()
    rotation: float = 0.0
    spin: float = 0.0


@dataclass
class Saucer(Body):
    size: str = ""
    last_shot: float = 0.0
    turn_ticks: int = 0


@dataclass
class Particle(Body):
    """Cosmetic debris. Never collides; fades as ``life`` runs out."""

    life: float = 0.0
    max_life: float = 1.0
