"""Spawning: asteroid waves and splits, saucers and their shots, debris."""
from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Callable

from vectoroids import vec
from vectoroids.bus import LEVEL_STARTED, UFO_FIRE, UFO_SPAWNED, EventBus
from vectoroids.components import Asteroid, Bullet, Particle, Saucer, Vertex
from vectoroids.config import GameConfig
from vectoroids.types import LARGE, MEDIUM, SMALL, Vec

if TYPE_CHECKING:
    from vectoroids.types import TickContext
    from vectoroids.world import World

logger = logging.getLogger(__name__)

_SMALLER = {LARGE: MEDIUM, MEDIUM: SMALL}

PARTICLE_RADIUS = 1.0


# -- Particles --


def burst(world: World, rng: random.Random, position: Vec, count: int) -> None:
    """Scatter ``count`` particles from ``position`` in random directions."""
    cfg = world.config
    for _ in range(count):
        angle = rng.uniform(0.0, 2 * math.pi)
        speed = rng.uniform(*cfg.particle_speed)
        world.particles.append(Particle(
            position=position,
            velocity=vec.from_angle(angle, speed),
            radius=PARTICLE_RADIUS,
            life=rng.uniform(*cfg.particle_life),
            max_life=cfg.particle_max_life,
        ))


# -- Asteroids --


def create_asteroid(
    cfg: GameConfig, rng: random.Random, position: Vec, size: str, level: int,
) -> Asteroid:
    """Build an asteroid with a fresh jagged outline and random drift."""
    count = rng.randrange(*cfg.asteroid_vertices)
    outline = tuple(
        Vertex(
            angle=(i / count) * 2 * math.pi,
            ratio=1.0 + rng.uniform(-cfg.asteroid_jaggedness, cfg.asteroid_jaggedness),
        )
        for i in range(count)
    )
    speed = cfg.asteroid_speed * (1 + (max(level, 1) - 1) * cfg.asteroid_level_speedup)
    direction = rng.uniform(0.0, 2 * math.pi)
    return Asteroid(
        position=position,
        velocity=(
            math.cos(direction) * speed * rng.uniform(0.5, 1.5),
            math.sin(direction) * speed * rng.uniform(0.5, 1.5),
        ),
        radius=cfg.asteroid_radii[size],
        size=size,
        outline=outline,
        spin=rng.uniform(-cfg.asteroid_spin, cfg.asteroid_spin),
    )


def split_asteroid(world: World, rng: random.Random, asteroid: Asteroid) -> list[Asteroid]:
    """Append the two children of ``asteroid`` (none for a small one)."""
    child_size = _SMALLER.get(asteroid.size)
    if child_size is None:
        return []
    children = [
        create_asteroid(world.config, rng, asteroid.position, child_size, world.level)
        for _ in range(2)
    ]
    world.asteroids.extend(children)
    return children


def _safe_position(world: World, rng: random.Random) -> Vec:
    """Random point away from the ship.

    Rejection sampling bounded by ``spawn_retries``; when every try lands
    too close the farthest candidate seen is used.
    """
    cfg = world.config
    best: Vec = (0.0, 0.0)
    best_dist = -1.0
    for _ in range(max(cfg.spawn_retries, 1)):
        candidate = (rng.uniform(0.0, cfg.width), rng.uniform(0.0, cfg.height))
        d = vec.distance(candidate, world.ship.position)
        if d >= cfg.safe_spawn_radius:
            return candidate
        if d > best_dist:
            best, best_dist = candidate, d
    logger.warning(
        "No asteroid position clear of the ship after %d tries, using %.1f away",
        cfg.spawn_retries, best_dist,
    )
    return best


def spawn_wave(world: World, rng: random.Random) -> list[Asteroid]:
    """Add ``starting_asteroids + (level - 1)`` large asteroids."""
    count = world.config.starting_asteroids + (world.level - 1)
    wave = [
        create_asteroid(world.config, rng, _safe_position(world, rng), LARGE, world.level)
        for _ in range(count)
    ]
    world.asteroids.extend(wave)
    return wave


def start_level(world: World, rng: random.Random, bus: EventBus) -> None:
    world.level += 1
    wave = spawn_wave(world, rng)
    logger.info("Level %d started with %d asteroids", world.level, len(wave))
    bus.publish(LEVEL_STARTED, level=world.level)


# -- Saucers --


def create_saucer(world: World, rng: random.Random, now: float) -> Saucer:
    cfg = world.config
    small = world.score > cfg.small_saucer_score and rng.random() > 0.5
    size = SMALL if small else LARGE
    radius = cfg.saucer_radii[size]
    from_left = rng.random() > 0.5
    # Spawn and despawn both sit one radius past the edge rather than at
    # fixed offsets, for either saucer size.
    return Saucer(
        position=(
            -radius if from_left else cfg.width + radius,
            rng.uniform(cfg.saucer_spawn_margin, cfg.height - cfg.saucer_spawn_margin),
        ),
        velocity=((1 if from_left else -1) * cfg.saucer_speed, 0.0),
        radius=radius,
        size=size,
        last_shot=now,
    )


def try_spawn_saucer(world: World, rng: random.Random, now: float, bus: EventBus) -> Saucer | None:
    """Spawn a saucer unless one is alive or the cooldown is still running."""
    if world.saucers:
        return None
    if now - world.session.last_saucer_spawn < world.config.saucer_spawn_ms:
        return None
    world.session.last_saucer_spawn = now
    saucer = create_saucer(world, rng, now)
    world.saucers.append(saucer)
    logger.debug("Saucer spawned: %s at %s", saucer.size, saucer.position)
    bus.publish(UFO_SPAWNED, size=saucer.size)
    return saucer


def saucer_shot(world: World, rng: random.Random, saucer: Saucer) -> Bullet:
    """Aimed at the ship for small saucers, in a random direction otherwise."""
    cfg = world.config
    if saucer.size == SMALL:
        angle = vec.angle_to(saucer.position, world.ship.position)
        angle += rng.uniform(-cfg.saucer_aim_noise, cfg.saucer_aim_noise)
    else:
        angle = rng.uniform(0.0, 2 * math.pi)
    return Bullet(
        position=saucer.position,
        velocity=vec.from_angle(angle, cfg.bullet_speed * cfg.saucer_bullet_factor),
        radius=cfg.bullet_radius,
        life=cfg.bullet_lifetime,
    )


def make_saucer_system(bus: EventBus) -> Callable[[World, TickContext], None]:
    """Spawn saucers on their cooldown and let live saucers fire."""

    def saucer_system(world: World, ctx: TickContext) -> None:
        for saucer in world.saucers:
            if world.ship.dead:
                break
            if ctx.now - saucer.last_shot > world.config.saucer_fire_ms:
                saucer.last_shot = ctx.now
                world.saucer_bullets.append(saucer_shot(world, ctx.random, saucer))
                bus.publish(UFO_FIRE, size=saucer.size)
        try_spawn_saucer(world, ctx.random, ctx.now, bus)

    return saucer_system
