"""Engine - ordered systems, state gating and the per-tick step."""
from __future__ import annotations

import logging
import os
import random
from typing import Callable

from vectoroids.bus import STATE_CHANGED, Event, EventBus
from vectoroids.clock import Clock
from vectoroids.config import GameConfig
from vectoroids.controls import NEUTRAL, Controls
from vectoroids.heartbeat import make_heartbeat_system
from vectoroids.persistence import HighScoreStore, MemoryHighScoreStore
from vectoroids.physics import make_drift_system, make_ship_system
from vectoroids.resolver import make_collision_system
from vectoroids.score import commit_high_score
from vectoroids.ship import make_hyperspace_system, make_weapon_system
from vectoroids.spawn import make_saucer_system, start_level
from vectoroids.states import GameStateMachine, make_level_system
from vectoroids.types import GAME_OVER, PLAYING, START_SCREEN, System, TickContext
from vectoroids.world import Snapshot, World

logger = logging.getLogger(__name__)


class Engine:
    """One simulation: world, clock, event bus and state machine.

    ``step`` is the whole update for one tick. Systems only run while
    playing; the state machine runs every tick so start, pause and
    acknowledge commands are always seen.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        store: HighScoreStore | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._store = store if store is not None else MemoryHighScoreStore()
        self._clock = Clock()
        self._bus = EventBus()
        self._world = World(self._config, high_score=self._store.load())
        self._machine = GameStateMachine(on_transition=self._on_transition)

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._systems: list[System] = [
            make_hyperspace_system(self._bus),
            make_ship_system(),
            make_weapon_system(self._bus),
            make_drift_system(),
            make_saucer_system(self._bus),
            make_collision_system(self._bus),
            make_level_system(self._bus),
            make_heartbeat_system(self._bus),
        ]

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> str:
        return self._world.state

    def subscribe(self, name: str, handler: Callable[[Event], None]) -> None:
        self._bus.subscribe(name, handler)

    def step(self, controls: Controls = NEUTRAL, wall_ms: float | None = None) -> list[Event]:
        """Advance one tick and return the events it produced.

        ``wall_ms`` is a monotonic reading in milliseconds. When omitted
        the game clock does not move, which keeps tests that only count
        ticks independent of real time.
        """
        world = self._world
        if controls.toggle_sound:
            world.sound_enabled = not world.sound_enabled
        if controls.toggle_fire_sound:
            world.fire_sound_enabled = not world.fire_sound_enabled

        running = world.playing
        if wall_ms is not None:
            self._clock.sync(wall_ms, running)
        self._clock.advance()
        ctx = self._clock.context(controls, self._rng)

        if running:
            for system in self._systems:
                system(world, ctx)

        self._machine.update(world, ctx)
        return self._bus.flush()

    def snapshot(self) -> Snapshot:
        return self._world.snapshot(self._clock.now)

    def new_game(self, ctx: TickContext) -> None:
        self._world.reset(now=ctx.now)
        logger.info("New game (seed %d)", self._seed)
        start_level(self._world, ctx.random, self._bus)

    def _on_transition(self, world: World, ctx: TickContext, old: str, new: str) -> None:
        if old == START_SCREEN and new == PLAYING:
            self.new_game(ctx)
        elif new == GAME_OVER:
            logger.info("Game over at level %d with score %d", world.level, world.score)
            commit_high_score(world, self._store)
        self._bus.publish(STATE_CHANGED, old=old, new=new)
