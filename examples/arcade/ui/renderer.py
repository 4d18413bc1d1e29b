"""Vector drawing of a Snapshot: entities, HUD and screen overlays."""
from __future__ import annotations

import math

import pygame

from ui.constants import COLOR_DIM, COLOR_FLAME, COLOR_LINE, COLOR_TEXT
from vectoroids import GAME_OVER, PAUSED, START_SCREEN, Snapshot
from vectoroids.components import Asteroid, Saucer, Ship


def _ship_points(ship: Ship) -> list[tuple[float, float]]:
    x, y = ship.position
    r = ship.radius
    a = ship.heading
    return [
        (x + math.cos(a) * r, y + math.sin(a) * r),
        (x + math.cos(a + 2.4) * r, y + math.sin(a + 2.4) * r),
        (x + math.cos(a + math.pi) * r * 0.5, y + math.sin(a + math.pi) * r * 0.5),
        (x + math.cos(a - 2.4) * r, y + math.sin(a - 2.4) * r),
    ]


def draw_ship(surface: pygame.Surface, ship: Ship, flicker: bool) -> None:
    pygame.draw.polygon(surface, COLOR_LINE, _ship_points(ship), 1)
    if ship.thrusting and flicker:
        x, y = ship.position
        r = ship.radius
        back = ship.heading + math.pi
        flame = [
            (x + math.cos(back - 0.4) * r * 0.6, y + math.sin(back - 0.4) * r * 0.6),
            (x + math.cos(back) * r * 1.4, y + math.sin(back) * r * 1.4),
            (x + math.cos(back + 0.4) * r * 0.6, y + math.sin(back + 0.4) * r * 0.6),
        ]
        pygame.draw.lines(surface, COLOR_FLAME, False, flame, 1)


def draw_asteroid(surface: pygame.Surface, asteroid: Asteroid) -> None:
    x, y = asteroid.position
    points = [
        (
            x + math.cos(v.angle + asteroid.rotation) * asteroid.radius * v.ratio,
            y + math.sin(v.angle + asteroid.rotation) * asteroid.radius * v.ratio,
        )
        for v in asteroid.outline
    ]
    if len(points) >= 3:
        pygame.draw.polygon(surface, COLOR_LINE, points, 1)


def draw_saucer(surface: pygame.Surface, saucer: Saucer) -> None:
    x, y = saucer.position
    r = saucer.radius
    hull = [
        (x - r, y), (x - r * 0.5, y - r * 0.35), (x + r * 0.5, y - r * 0.35),
        (x + r, y), (x + r * 0.5, y + r * 0.35), (x - r * 0.5, y + r * 0.35),
    ]
    pygame.draw.polygon(surface, COLOR_LINE, hull, 1)
    pygame.draw.line(surface, COLOR_LINE, (x - r, y), (x + r, y), 1)
    dome = pygame.Rect(0, 0, r, r * 0.7)
    dome.center = (int(x), int(y - r * 0.45))
    pygame.draw.arc(surface, COLOR_LINE, dome, 0, math.pi, 1)


def draw_world(surface: pygame.Surface, snap: Snapshot, frame: int) -> None:
    for asteroid in snap.asteroids:
        draw_asteroid(surface, asteroid)
    for saucer in snap.saucers:
        draw_saucer(surface, saucer)
    for bullet in snap.bullets + snap.saucer_bullets:
        pygame.draw.circle(surface, COLOR_LINE, (int(bullet.position[0]), int(bullet.position[1])), 2)
    if snap.ship_visible:
        draw_ship(surface, snap.ship, flicker=frame % 4 < 2)
    for p in snap.particles:
        shade = int(255 * max(0.0, min(1.0, p.life / p.max_life)))
        surface.fill((shade, shade, shade), (int(p.position[0]), int(p.position[1]), 2, 2))


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    width = surface.get_width()
    surface.blit(font.render(f"{snap.score:06d}", True, COLOR_TEXT), (20, 15))
    hi = font.render(f"HI {snap.high_score:06d}", True, COLOR_DIM)
    surface.blit(hi, hi.get_rect(midtop=(width // 2, 15)))
    level = font.render(f"LEVEL {snap.level}", True, COLOR_DIM)
    surface.blit(level, level.get_rect(topright=(width - 20, 15)))

    icon = Ship(position=(0.0, 0.0), velocity=(0.0, 0.0), radius=8.0, heading=-math.pi / 2)
    for i in range(snap.lives):
        icon.position = (30.0 + i * 22, 60.0)
        pygame.draw.polygon(surface, COLOR_LINE, _ship_points(icon), 1)

    flags = []
    if not snap.sound_enabled:
        flags.append("SOUND OFF")
    elif not snap.fire_sound_enabled:
        flags.append("FIRE SOUND OFF")
    if flags:
        text = font.render("  ".join(flags), True, COLOR_DIM)
        surface.blit(text, text.get_rect(bottomright=(width - 20, surface.get_height() - 10)))


def _centered(surface: pygame.Surface, font: pygame.font.Font, text: str, dy: int, color=COLOR_TEXT) -> None:
    w, h = surface.get_size()
    img = font.render(text, True, color)
    surface.blit(img, img.get_rect(center=(w // 2, h // 2 + dy)))


def draw_overlay(
    surface: pygame.Surface,
    big: pygame.font.Font,
    font: pygame.font.Font,
    snap: Snapshot,
    blink: bool,
) -> None:
    if snap.state == START_SCREEN:
        _centered(surface, big, "VECTOROIDS", -80)
        _centered(surface, font, f"HIGH SCORE {snap.high_score}", -20, COLOR_DIM)
        _centered(surface, font, "ARROWS/WASD MOVE  SPACE FIRE  SHIFT HYPERSPACE  P PAUSE", 20, COLOR_DIM)
        if blink:
            _centered(surface, font, "PRESS ENTER TO START", 70)
    elif snap.state == GAME_OVER:
        _centered(surface, big, "GAME OVER", -30)
        if blink:
            _centered(surface, font, "PRESS ENTER", 30)
    elif snap.state == PAUSED:
        _centered(surface, big, "PAUSED", 0)
