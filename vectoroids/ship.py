"""Ship lifecycle: destruction, respawn, the weapon and hyperspace."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from vectoroids import vec
from vectoroids.bus import FIRE, SHIP_EXPLOSION, EventBus
from vectoroids.components import Bullet
from vectoroids.spawn import burst

if TYPE_CHECKING:
    import random

    from vectoroids.types import TickContext
    from vectoroids.world import World

logger = logging.getLogger(__name__)


def destroy_ship(world: World, rng: random.Random, bus: EventBus) -> bool:
    """Kill the ship and take a life. Returns True if the ship was alive.

    Losing the last life sets ``session.out_of_lives``; the game ends at
    the close of the tick even if points scored later in it cross an
    extra-life threshold.
    """
    ship = world.ship
    if ship.dead:
        return False
    cfg = world.config
    ship.dead = True
    ship.thrusting = False
    ship.respawn_ticks = cfg.respawn_ticks
    burst(world, rng, ship.position, cfg.ship_burst)
    bus.publish(SHIP_EXPLOSION)
    world.lives = max(world.lives - 1, 0)
    if world.lives == 0:
        world.session.out_of_lives = True
    logger.debug("Ship destroyed, %d lives left", world.lives)
    return True


def respawn_ship(world: World, now: float) -> None:
    cfg = world.config
    ship = world.ship
    ship.position = cfg.center
    ship.velocity = (0.0, 0.0)
    ship.heading = cfg.ship_heading
    ship.dead = False
    ship.respawn_ticks = 0
    ship.invincible_until = now + cfg.invincible_ms


def make_weapon_system(bus: EventBus) -> Callable[[World, TickContext], None]:
    """Fire while the button is held, throttled by a refire cooldown."""

    def weapon_system(world: World, ctx: TickContext) -> None:
        cfg = world.config
        ship = world.ship
        if ctx.controls.fire and ship.fire_cooldown <= 0:
            ship.fire_cooldown = cfg.fire_cooldown_ticks
            if not ship.dead and len(world.bullets) < cfg.max_bullets:
                world.bullets.append(Bullet(
                    position=vec.add(ship.position, vec.from_angle(ship.heading, cfg.ship_radius)),
                    velocity=vec.add(
                        vec.from_angle(ship.heading, cfg.bullet_speed),
                        vec.scale(ship.velocity, cfg.bullet_inherit),
                    ),
                    radius=cfg.bullet_radius,
                    life=cfg.bullet_lifetime,
                ))
                bus.publish(FIRE)
        if ship.fire_cooldown > 0:
            ship.fire_cooldown -= 1

    return weapon_system


def teleport(world: World, rng: random.Random, now: float, bus: EventBus) -> bool:
    """Jump to a random point. Returns False when the jump was refused.

    Refused while the ship is dead or within the cooldown. A successful
    jump rolls for a mishap that destroys the ship like any collision.
    """
    cfg = world.config
    session = world.session
    if world.ship.dead:
        return False
    if session.last_teleport is not None and now - session.last_teleport < cfg.teleport_cooldown_ms:
        return False
    session.last_teleport = now
    margin = cfg.teleport_margin
    world.ship.position = (
        rng.uniform(margin, cfg.width - margin),
        rng.uniform(margin, cfg.height - margin),
    )
    world.ship.velocity = (0.0, 0.0)
    logger.debug("Teleported to (%.1f, %.1f)", *world.ship.position)
    if rng.random() < cfg.teleport_mishap_chance:
        destroy_ship(world, rng, bus)
    return True


def make_hyperspace_system(bus: EventBus) -> Callable[[World, TickContext], None]:
    def hyperspace_system(world: World, ctx: TickContext) -> None:
        if ctx.controls.teleport:
            teleport(world, ctx.random, ctx.now, bus)

    return hyperspace_system
