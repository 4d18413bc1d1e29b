"""
Vectoroids — pygame front-end for the vectoroids simulation core.

Controls:
  Left/Right, A/D   Turn
  Up, W             Thrust
  Space             Fire
  Shift             Hyperspace
  P                 Pause / Resume
  Enter             Start / continue after game over
  S / F             Toggle sound / fire sound
  Escape            Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

import pygame

from ui.constants import COLOR_BG, FPS, HEIGHT, HIGH_SCORE_FILE, TITLE, WIDTH
from ui.input import Keyboard
from ui.renderer import draw_hud, draw_overlay, draw_world
from vectoroids import Engine, Event, GameConfig, JsonHighScoreStore, START_SCREEN
from vectoroids import bus as events

logger = logging.getLogger("vectoroids.arcade")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Vectoroids — asteroid-field arcade game")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--scores", type=str, default=HIGH_SCORE_FILE, help="High score file")
    p.add_argument("--verbose", action="store_true", help="Log game events")
    return p.parse_args()


def _log_event(event: Event) -> None:
    logger.debug("%s %s", event.name, event.data)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 20)
    big = pygame.font.SysFont("monospace", 48, bold=True)

    engine = Engine(
        config=GameConfig(width=float(WIDTH), height=float(HEIGHT)),
        seed=args.seed,
        store=JsonHighScoreStore(args.scores),
    )
    for name in (
        events.SHIP_EXPLOSION,
        events.UFO_SPAWNED,
        events.UFO_DESTROYED,
        events.EXTRA_LIFE,
        events.LEVEL_STARTED,
        events.STATE_CHANGED,
    ):
        engine.subscribe(name, _log_event)

    keyboard = Keyboard()
    frame = 0
    running = True

    while running:
        pg_clock.tick(FPS)
        frame += 1

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        engine.step(keyboard.sample(), time.monotonic() * 1000.0)
        snap = engine.snapshot()

        screen.fill(COLOR_BG)
        if snap.state != START_SCREEN:
            draw_world(screen, snap, frame)
            draw_hud(screen, font, snap)
        draw_overlay(screen, big, font, snap, blink=int(time.monotonic() * 2) % 2 == 0)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
