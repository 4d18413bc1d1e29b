"""Tests for ship flight, drift, lifetimes and wraparound."""
from __future__ import annotations

import math
import random

from vectoroids.components import Asteroid, Bullet, Particle, Saucer
from vectoroids.config import GameConfig
from vectoroids.controls import Controls
from vectoroids.physics import make_drift_system, make_ship_system
from vectoroids.types import LARGE, PLAYING, TickContext
from vectoroids.world import World


def _world() -> World:
    world = World(GameConfig())
    world.state = PLAYING
    return world


def _ctx(now: float = 0.0, controls: Controls | None = None, seed: int = 7) -> TickContext:
    return TickContext(
        tick_number=1,
        now=now,
        controls=controls or Controls(),
        random=random.Random(seed),
    )


# ── Ship ────────────────────────────────────────────────────────


class TestShipSystem:
    """Test cases for the ship system."""

    def test_thrust_along_heading_then_friction(self) -> None:
        """Thrust adds along the heading before friction."""
        world = _world()
        world.ship.heading = 0.0
        make_ship_system()(world, _ctx(controls=Controls(thrust=True)))
        vx, vy = world.ship.velocity
        assert math.isclose(vx, 0.12 * 0.99)
        assert math.isclose(vy, 0.0, abs_tol=1e-12)
        assert math.isclose(world.ship.position[0], 512.0 + 0.12 * 0.99)
        assert world.ship.thrusting

    def test_friction_without_thrust(self) -> None:
        """Friction slows a coasting ship."""
        world = _world()
        world.ship.velocity = (10.0, 0.0)
        make_ship_system()(world, _ctx())
        assert math.isclose(world.ship.velocity[0], 9.9)
        assert math.isclose(world.ship.position[0], 512.0 + 9.9)
        assert not world.ship.thrusting

    def test_turning(self) -> None:
        """Turning changes heading by the turn speed."""
        world = _world()
        start = world.ship.heading
        system = make_ship_system()
        system(world, _ctx(controls=Controls(turn_left=True)))
        assert math.isclose(world.ship.heading, start - 0.07)
        system(world, _ctx(controls=Controls(turn_right=True)))
        system(world, _ctx(controls=Controls(turn_right=True)))
        assert math.isclose(world.ship.heading, start + 0.07)

    def test_wraps_with_radius_margin(self) -> None:
        """The ship wraps using its radius as margin."""
        world = _world()
        world.ship.position = (1038.5, 100.0)
        world.ship.velocity = (2.0, 0.0)
        make_ship_system()(world, _ctx())
        assert world.ship.position == (-15.0, 100.0)

    def test_dead_ship_counts_down_then_respawns(self) -> None:
        """A dead ship waits out its countdown, then respawns."""
        world = _world()
        world.ship.dead = True
        world.ship.respawn_ticks = 2
        world.ship.position = (10.0, 10.0)
        world.ship.velocity = (3.0, 3.0)
        system = make_ship_system()

        system(world, _ctx(now=500.0, controls=Controls(thrust=True)))
        assert world.ship.dead
        assert world.ship.position == (10.0, 10.0)

        system(world, _ctx(now=600.0))
        assert not world.ship.dead
        assert world.ship.position == (512.0, 384.0)
        assert world.ship.velocity == (0.0, 0.0)
        assert math.isclose(world.ship.heading, -math.pi / 2)
        assert world.ship.invincible_until == 3600.0


# ── Drift ───────────────────────────────────────────────────────


def _bullet(x: float, y: float, vx: float, vy: float, life: int = 60) -> Bullet:
    return Bullet(position=(x, y), velocity=(vx, vy), radius=2.0, life=life)


def _saucer(x: float, y: float, vx: float, vy: float, turn_ticks: int = 100) -> Saucer:
    return Saucer(position=(x, y), velocity=(vx, vy), radius=20.0, size=LARGE, turn_ticks=turn_ticks)


class TestBullets:
    """Test cases for bullet drift."""

    def test_move_and_age(self) -> None:
        """Bullets move and lose one tick of life."""
        world = _world()
        world.bullets.append(_bullet(100.0, 100.0, 7.0, 0.0, life=10))
        make_drift_system()(world, _ctx())
        assert world.bullets[0].position == (107.0, 100.0)
        assert world.bullets[0].life == 9

    def test_wrap_at_exact_edge(self) -> None:
        """Bullets wrap at the world edge."""
        world = _world()
        world.bullets.append(_bullet(1023.0, 10.0, 2.0, 0.0))
        world.saucer_bullets.append(_bullet(10.0, 1.0, 0.0, -2.0))
        make_drift_system()(world, _ctx())
        assert world.bullets[0].position == (0.0, 10.0)
        assert world.saucer_bullets[0].position == (10.0, 768.0)

    def test_expire_at_zero_life(self) -> None:
        """Bullets are removed when life runs out."""
        world = _world()
        world.bullets.extend([_bullet(0.0, 0.0, 1.0, 0.0, life=1), _bullet(5.0, 5.0, 1.0, 0.0, life=2)])
        world.saucer_bullets.append(_bullet(0.0, 0.0, 1.0, 0.0, life=1))
        make_drift_system()(world, _ctx())
        assert len(world.bullets) == 1
        assert world.bullets[0].life == 1
        assert world.saucer_bullets == []


class TestAsteroids:
    """Test cases for asteroid drift."""

    def test_move_rotate_and_wrap(self) -> None:
        """Asteroids move, spin and wrap."""
        world = _world()
        world.asteroids.append(Asteroid(
            position=(-39.5, 100.0), velocity=(-1.0, 0.5), radius=40.0,
            size=LARGE, rotation=1.0, spin=0.02,
        ))
        make_drift_system()(world, _ctx())
        a = world.asteroids[0]
        assert a.position == (1064.0, 100.5)
        assert math.isclose(a.rotation, 1.02)


class TestSaucers:
    """Test cases for saucer drift."""

    def test_moves_horizontally(self) -> None:
        """Saucers move and count down to a turn."""
        world = _world()
        world.saucers.append(_saucer(100.0, 300.0, 2.0, 0.0))
        make_drift_system()(world, _ctx())
        assert world.saucers[0].position == (102.0, 300.0)
        assert world.saucers[0].turn_ticks == 99

    def test_leaves_world_past_far_edge(self) -> None:
        """A saucer past the far edge is removed."""
        world = _world()
        world.saucers.append(_saucer(1043.0, 300.0, 2.0, 0.0))
        make_drift_system()(world, _ctx())
        assert world.saucers == []

    def test_enters_from_off_screen(self) -> None:
        """A saucer just off screen is kept."""
        world = _world()
        world.saucers.append(_saucer(-20.0, 300.0, 2.0, 0.0))
        make_drift_system()(world, _ctx())
        assert world.saucers[0].position == (-18.0, 300.0)

    def test_vertical_margin_forces_inward(self) -> None:
        """Near the top or bottom the saucer turns inward."""
        world = _world()
        world.saucers.append(_saucer(100.0, 21.0, 2.0, -1.0))
        world.saucers.append(_saucer(200.0, 747.0, 2.0, 1.0))
        make_drift_system()(world, _ctx())
        assert world.saucers[0].velocity[1] == 1.0
        assert world.saucers[1].velocity[1] == -1.0

    def test_vertical_speed_resampled(self) -> None:
        """Vertical speed is re-rolled when the countdown ends."""
        world = _world()
        world.saucers.append(_saucer(100.0, 300.0, 2.0, 0.0, turn_ticks=1))
        make_drift_system()(world, _ctx(seed=11))
        s = world.saucers[0]
        assert -1.5 <= s.velocity[1] <= 1.5
        assert 60 <= s.turn_ticks < 150
        assert s.velocity[0] == 2.0


class TestParticles:
    """Test cases for particles."""

    def test_fade_and_expire(self) -> None:
        """Particles drift, fade and expire."""
        world = _world()
        world.particles.append(Particle(position=(5.0, 5.0), velocity=(1.0, 1.0), radius=1.0, life=1.5, max_life=50.0))
        system = make_drift_system()
        system(world, _ctx())
        assert world.particles[0].position == (6.0, 6.0)
        assert math.isclose(world.particles[0].life, 0.5)
        system(world, _ctx())
        assert world.particles == []
