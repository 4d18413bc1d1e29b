"""Clock - tick counter plus a pausable game-time clock in milliseconds."""
from __future__ import annotations

import random

from vectoroids.controls import Controls
from vectoroids.types import TickContext


class Clock:
    """Converts wall-clock readings into game time.

    ``sync`` is called once per tick with an explicit monotonic reading.
    The elapsed wall time is only added to ``now`` when the clock is
    running, so pausing freezes every cooldown measured against it.
    """

    def __init__(self) -> None:
        self._tick_number = 0
        self._now = 0.0
        self._last_wall: float | None = None

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def now(self) -> float:
        return self._now

    def sync(self, wall_ms: float, running: bool) -> float:
        if self._last_wall is not None and running:
            delta = wall_ms - self._last_wall
            if delta > 0:
                self._now += delta
        self._last_wall = wall_ms
        return self._now

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, controls: Controls, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            now=self._now,
            controls=controls,
            random=rng,
        )

    def reset(self, now: float = 0.0) -> None:
        self._tick_number = 0
        self._now = now
        self._last_wall = None
