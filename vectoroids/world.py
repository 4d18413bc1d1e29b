"""World - entity collections and scalar game state for one session."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from vectoroids.components import Asteroid, Bullet, Particle, Saucer, Ship
from vectoroids.config import GameConfig
from vectoroids.types import PLAYING, START_SCREEN


@dataclass
class Session:
    """Timers and counters that belong to a game rather than an entity."""

    next_extra_life: int = 0
    last_saucer_spawn: float = 0.0
    last_teleport: float | None = None
    last_beat: float | None = None
    beat_high: bool = False
    out_of_lives: bool = False


class World:
    """Owns every live entity plus score, lives, level and state.

    A new game discards all collections and rebuilds them; only the high
    score and the sound toggles survive across sessions.
    """

    def __init__(self, config: GameConfig, high_score: int = 0) -> None:
        self.config = config
        self.state: str = START_SCREEN
        self.high_score = high_score
        self.sound_enabled = True
        self.fire_sound_enabled = True
        self.reset(now=0.0)

    def reset(self, now: float) -> None:
        """Start a fresh session: new ship, empty collections, score 0."""
        cfg = self.config
        self.ship = Ship(
            position=cfg.center,
            velocity=(0.0, 0.0),
            radius=cfg.ship_radius,
            heading=cfg.ship_heading,
            invincible_until=now + cfg.invincible_ms,
        )
        self.bullets: list[Bullet] = []
        self.saucer_bullets: list[Bullet] = []
        self.asteroids: list[Asteroid] = []
        self.saucers: list[Saucer] = []
        self.particles: list[Particle] = []
        self.score = 0
        self.lives = cfg.starting_lives
        self.level = 0
        self.session = Session(
            next_extra_life=cfg.extra_life_score,
            last_saucer_spawn=now,
        )

    @property
    def saucer(self) -> Saucer | None:
        return self.saucers[0] if self.saucers else None

    @property
    def playing(self) -> bool:
        return self.state == PLAYING

    def ship_vulnerable(self, now: float) -> bool:
        """True when a lethal collision would currently destroy the ship."""
        return not self.ship.dead and now >= self.ship.invincible_until

    def snapshot(self, now: float) -> Snapshot:
        """Read-only copy of everything the renderer and audio need."""
        ship = self.ship
        playing = self.playing
        if ship.dead:
            visible = False
        elif now < ship.invincible_until:
            visible = int(now // self.config.blink_ms) % 2 == 0
        else:
            visible = True
        saucer = self.saucer
        return Snapshot(
            state=self.state,
            score=self.score,
            high_score=self.high_score,
            lives=self.lives,
            level=self.level,
            ship=dataclasses.replace(ship),
            ship_visible=visible,
            bullets=tuple(dataclasses.replace(b) for b in self.bullets),
            saucer_bullets=tuple(dataclasses.replace(b) for b in self.saucer_bullets),
            asteroids=tuple(dataclasses.replace(a) for a in self.asteroids),
            saucers=tuple(dataclasses.replace(s) for s in self.saucers),
            particles=tuple(dataclasses.replace(p) for p in self.particles),
            thrust_rumble=playing and not ship.dead and ship.thrusting,
            saucer_drone=saucer.size if playing and saucer is not None else None,
            sound_enabled=self.sound_enabled,
            fire_sound_enabled=self.fire_sound_enabled,
        )


@dataclass(frozen=True)
class Snapshot:
    """Frozen view of one tick, handed to rendering and audio."""

    state: str
    score: int
    high_score: int
    lives: int
    level: int
    ship: Ship
    ship_visible: bool
    bullets: tuple[Bullet, ...] = field(default_factory=tuple)
    saucer_bullets: tuple[Bullet, ...] = field(default_factory=tuple)
    asteroids: tuple[Asteroid, ...] = field(default_factory=tuple)
    saucers: tuple[Saucer, ...] = field(default_factory=tuple)
    particles: tuple[Particle, ...] = field(default_factory=tuple)
    thrust_rumble: bool = False
    saucer_drone: str | None = None
    sound_enabled: bool = True
    fire_sound_enabled: bool = True
