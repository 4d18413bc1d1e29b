"""Game configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass, field, fields

from vectoroids.types import LARGE, MEDIUM, SMALL, ConfigError


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning constants for one simulation.

    Motion values (speeds, thrust, friction, turn and rotation rates) are
    per tick. Cooldowns and intervals are milliseconds of game clock.

    Attributes:
        width: World width in units.
        height: World height in units.
        ship_radius: Collision radius of the ship, also the muzzle offset.
        ship_thrust: Velocity gained per tick along the heading while thrusting.
        ship_friction: Velocity multiplier applied every tick.
        ship_turn_speed: Heading change in radians per tick.
        invincible_ms: Length of the invincibility window after (re)spawn.
        blink_ms: Half-period of the invincibility blink.
        respawn_ticks: Ticks between ship destruction and respawn.
        starting_lives: Lives at the start of a game.
        extra_life_score: Score increment between extra lives.
        teleport_cooldown_ms: Minimum game time between two teleports.
        teleport_margin: Inset from world edges for teleport destinations.
        teleport_mishap_chance: Probability a teleport destroys the ship.
    """

    width: float = 1024.0
    height: float = 768.0

    ship_radius: float = 15.0
    ship_thrust: float = 0.12
    ship_friction: float = 0.99
    ship_turn_speed: float = 0.07
    ship_heading: float = -math.pi / 2
    invincible_ms: float = 3000.0
    blink_ms: float = 100.0
    respawn_ticks: int = 120
    starting_lives: int = 3

    bullet_speed: float = 7.0
    bullet_lifetime: int = 60
    bullet_radius: float = 2.0
    max_bullets: int = 4
    fire_cooldown_ticks: int = 8
    bullet_inherit: float = 0.5

    asteroid_radii: dict[str, float] = field(
        default_factory=lambda: {LARGE: 40.0, MEDIUM: 20.0, SMALL: 10.0}
    )
    asteroid_scores: dict[str, int] = field(
        default_factory=lambda: {LARGE: 20, MEDIUM: 50, SMALL: 100}
    )
    asteroid_speed: float = 1.5
    asteroid_level_speedup: float = 0.1
    asteroid_vertices: tuple[int, int] = (7, 12)  # [min, max)
    asteroid_jaggedness: float = 0.4
    asteroid_spin: float = 0.02
    starting_asteroids: int = 4
    safe_spawn_radius: float = 150.0
    spawn_retries: int = 100

    saucer_radii: dict[str, float] = field(
        default_factory=lambda: {LARGE: 20.0, SMALL: 10.0}
    )
    saucer_scores: dict[str, int] = field(
        default_factory=lambda: {LARGE: 200, SMALL: 1000}
    )
    saucer_speed: float = 2.0
    saucer_vertical_speed: float = 1.5
    saucer_turn_ticks: tuple[int, int] = (60, 150)  # [min, max)
    saucer_vertical_margin: float = 30.0
    saucer_spawn_margin: float = 50.0
    saucer_spawn_ms: float = 15000.0
    saucer_fire_ms: float = 2000.0
    saucer_bullet_factor: float = 0.8
    saucer_aim_noise: float = 0.15
    small_saucer_score: int = 10000

    particle_speed: tuple[float, float] = (1.0, 4.0)
    particle_life: tuple[float, float] = (20.0, 50.0)
    particle_max_life: float = 50.0
    ship_burst: int = 15
    asteroid_burst: int = 6
    saucer_burst: int = 10

    extra_life_score: int = 10000

    teleport_cooldown_ms: float = 3000.0
    teleport_margin: float = 50.0
    teleport_mishap_chance: float = 0.125

    heartbeat_base_ms: float = 200.0
    heartbeat_per_asteroid_ms: float = 40.0
    heartbeat_min_ms: float = 150.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, dict):
                if f.name.endswith("_radii") and any(r <= 0 for r in value.values()):
                    raise ConfigError(f"{f.name} must all be positive, got {value}")
            elif f.name in _POSITIVE and value <= 0:
                raise ConfigError(f"{f.name} must be positive, got {value!r}")
        if 2 * self.teleport_margin >= min(self.width, self.height):
            raise ConfigError("teleport_margin leaves no room inside the world")

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


_POSITIVE = frozenset({
    "width",
    "height",
    "ship_radius",
    "bullet_radius",
    "bullet_lifetime",
    "respawn_ticks",
    "invincible_ms",
    "blink_ms",
    "saucer_spawn_ms",
    "saucer_fire_ms",
    "teleport_cooldown_ms",
    "extra_life_score",
    "particle_max_life",
})
