"""System factories for motion: ship flight, drift, lifetimes and wrap.

Every magnitude here is per tick. A faster tick rate makes the game run
faster; only cooldowns use the game clock.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from vectoroids import vec
from vectoroids.ship import respawn_ship

if TYPE_CHECKING:
    from vectoroids.components import Bullet, Particle
    from vectoroids.types import TickContext
    from vectoroids.world import World


def make_ship_system() -> Callable[[World, TickContext], None]:
    """Turn, thrust, friction, move and wrap the ship.

    A dead ship only counts down to its respawn.
    """

    def ship_system(world: World, ctx: TickContext) -> None:
        cfg = world.config
        ship = world.ship
        if ship.dead:
            ship.respawn_ticks -= 1
            if ship.respawn_ticks <= 0:
                respawn_ship(world, ctx.now)
            return

        ship.heading += cfg.ship_turn_speed * ctx.controls.turn
        ship.thrusting = ctx.controls.thrust
        if ship.thrusting:
            ship.velocity = vec.add(ship.velocity, vec.from_angle(ship.heading, cfg.ship_thrust))
        ship.velocity = vec.scale(ship.velocity, cfg.ship_friction)
        ship.position = vec.wrap(
            vec.add(ship.position, ship.velocity), ship.radius, cfg.width, cfg.height
        )

    return ship_system


def _advance_bullets(bullets: list[Bullet], width: float, height: float) -> None:
    for i in range(len(bullets) - 1, -1, -1):
        b = bullets[i]
        b.position = vec.wrap_exact(vec.add(b.position, b.velocity), width, height)
        b.life -= 1
        if b.life <= 0:
            del bullets[i]


def _advance_particles(particles: list[Particle], width: float, height: float) -> None:
    for i in range(len(particles) - 1, -1, -1):
        p = particles[i]
        p.position = vec.wrap(vec.add(p.position, p.velocity), p.radius, width, height)
        p.life -= 1
        if p.life <= 0:
            del particles[i]


def make_drift_system() -> Callable[[World, TickContext], None]:
    """Move everything that is not the ship.

    Bullets wrap at the exact world edge, everything else wraps with its
    radius as margin. Saucers wrap vertically only and leave the world
    once they pass the far horizontal edge.
    """

    def drift_system(world: World, ctx: TickContext) -> None:
        cfg = world.config
        w, h = cfg.width, cfg.height

        _advance_bullets(world.bullets, w, h)
        _advance_bullets(world.saucer_bullets, w, h)

        for a in world.asteroids:
            a.position = vec.wrap(vec.add(a.position, a.velocity), a.radius, w, h)
            a.rotation += a.spin

        for i in range(len(world.saucers) - 1, -1, -1):
            s = world.saucers[i]
            x, y = vec.add(s.position, s.velocity)
            vx, vy = s.velocity

            s.turn_ticks -= 1
            if s.turn_ticks <= 0:
                vy = ctx.random.uniform(-cfg.saucer_vertical_speed, cfg.saucer_vertical_speed)
                s.turn_ticks = ctx.random.randrange(*cfg.saucer_turn_ticks)
            if y < cfg.saucer_vertical_margin:
                vy = abs(vy)
            elif y > h - cfg.saucer_vertical_margin:
                vy = -abs(vy)

            s.velocity = (vx, vy)
            _, y = vec.wrap((0.0, y), s.radius, w, h)
            s.position = (x, y)
            if x < -s.radius or x > w + s.radius:
                del world.saucers[i]

        _advance_particles(world.particles, w, h)

    return drift_system
