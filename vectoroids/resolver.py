"""Collision resolution for one tick.

Five passes run in a fixed order. Each outer element resolves at most
one hit (first match wins). Lists are scanned back to front so entries
can be deleted in place without invalidating the indices still to come.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from vectoroids.bus import ASTEROID_EXPLOSION, UFO_DESTROYED, EventBus
from vectoroids.collision import point_in_circle, within
from vectoroids.score import award
from vectoroids.ship import destroy_ship
from vectoroids.spawn import burst, split_asteroid

if TYPE_CHECKING:
    import random

    from vectoroids.components import Asteroid, Saucer
    from vectoroids.types import TickContext
    from vectoroids.world import World

# Only this much of an asteroid's radius counts against the ship.
SHIP_ASTEROID_FACTOR = 0.7


def _destroy_asteroid(world: World, rng: random.Random, index: int, bus: EventBus) -> None:
    asteroid: Asteroid = world.asteroids.pop(index)
    split_asteroid(world, rng, asteroid)
    burst(world, rng, asteroid.position, world.config.asteroid_burst)
    bus.publish(ASTEROID_EXPLOSION, size=asteroid.size)
    award(world, world.config.asteroid_scores[asteroid.size], bus)


def _destroy_saucer(world: World, rng: random.Random, index: int, bus: EventBus) -> None:
    saucer: Saucer = world.saucers.pop(index)
    award(world, world.config.saucer_scores[saucer.size], bus)
    burst(world, rng, saucer.position, world.config.saucer_burst)
    bus.publish(UFO_DESTROYED, size=saucer.size)


def bullets_vs_asteroids(world: World, rng: random.Random, bus: EventBus) -> None:
    bullets = world.bullets
    for i in range(len(bullets) - 1, -1, -1):
        for j in range(len(world.asteroids) - 1, -1, -1):
            asteroid = world.asteroids[j]
            if point_in_circle(bullets[i].position, asteroid.position, asteroid.radius):
                # Children are appended past j, so the scan below j is unaffected.
                _destroy_asteroid(world, rng, j, bus)
                del bullets[i]
                break


def ship_vs_asteroids(world: World, rng: random.Random, now: float, bus: EventBus) -> None:
    if not world.ship_vulnerable(now):
        return
    ship = world.ship
    for i in range(len(world.asteroids) - 1, -1, -1):
        asteroid = world.asteroids[i]
        threshold = ship.radius + asteroid.radius * SHIP_ASTEROID_FACTOR
        if within(ship.position, asteroid.position, threshold):
            destroy_ship(world, rng, bus)
            break


def bullets_vs_saucers(world: World, rng: random.Random, bus: EventBus) -> None:
    bullets = world.bullets
    for i in range(len(bullets) - 1, -1, -1):
        for j in range(len(world.saucers) - 1, -1, -1):
            saucer = world.saucers[j]
            if point_in_circle(bullets[i].position, saucer.position, saucer.radius):
                _destroy_saucer(world, rng, j, bus)
                del bullets[i]
                break


def saucer_bullets_vs_ship(world: World, rng: random.Random, now: float, bus: EventBus) -> None:
    if not world.ship_vulnerable(now):
        return
    ship = world.ship
    bullets = world.saucer_bullets
    for i in range(len(bullets) - 1, -1, -1):
        if point_in_circle(bullets[i].position, ship.position, ship.radius):
            destroy_ship(world, rng, bus)
            del bullets[i]
            break


def ship_vs_saucers(world: World, rng: random.Random, now: float, bus: EventBus) -> None:
    if not world.ship_vulnerable(now):
        return
    ship = world.ship
    for j in range(len(world.saucers) - 1, -1, -1):
        saucer = world.saucers[j]
        if within(ship.position, saucer.position, ship.radius + saucer.radius):
            _destroy_saucer(world, rng, j, bus)
            destroy_ship(world, rng, bus)
            break


def make_collision_system(bus: EventBus) -> Callable[[World, TickContext], None]:

    def collision_system(world: World, ctx: TickContext) -> None:
        rng = ctx.random
        bullets_vs_asteroids(world, rng, bus)
        ship_vs_asteroids(world, rng, ctx.now, bus)
        bullets_vs_saucers(world, rng, bus)
        saucer_bullets_vs_ship(world, rng, ctx.now, bus)
        ship_vs_saucers(world, rng, ctx.now, bus)

    return collision_system
