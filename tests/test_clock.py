"""Tests for the pausable game clock."""
from __future__ import annotations

import random

from vectoroids.clock import Clock
from vectoroids.controls import Controls


class TestClock:
    """Test cases for the pausable game clock."""

    def test_initial_state(self) -> None:
        """A new clock starts at tick 0, time 0."""
        clock = Clock()
        assert clock.tick_number == 0
        assert clock.now == 0.0

    def test_first_sync_sets_baseline(self) -> None:
        """The first reading only sets the baseline."""
        clock = Clock()
        assert clock.sync(5000.0, running=True) == 0.0

    def test_running_accumulates(self) -> None:
        """Elapsed wall time adds up while running."""
        clock = Clock()
        clock.sync(1000.0, running=True)
        clock.sync(1016.0, running=True)
        clock.sync(1050.0, running=True)
        assert clock.now == 50.0

    def test_stopped_does_not_accumulate(self) -> None:
        """Wall time passed while stopped is dropped."""
        clock = Clock()
        clock.sync(0.0, running=True)
        clock.sync(100.0, running=True)
        clock.sync(5000.0, running=False)
        clock.sync(9000.0, running=False)
        clock.sync(9010.0, running=True)
        assert clock.now == 110.0

    def test_backwards_reading_ignored(self) -> None:
        """A reading earlier than the last is ignored."""
        clock = Clock()
        clock.sync(1000.0, running=True)
        clock.sync(900.0, running=True)
        assert clock.now == 0.0
        clock.sync(950.0, running=True)
        assert clock.now == 50.0

    def test_advance(self) -> None:
        """advance increments the tick number."""
        clock = Clock()
        assert clock.advance() == 1
        assert clock.advance() == 2
        assert clock.tick_number == 2

    def test_context(self) -> None:
        """context carries tick, time, controls and rng."""
        clock = Clock()
        clock.sync(0.0, running=True)
        clock.sync(250.0, running=True)
        clock.advance()
        rng = random.Random(3)
        controls = Controls(fire=True)
        ctx = clock.context(controls, rng)
        assert ctx.tick_number == 1
        assert ctx.now == 250.0
        assert ctx.controls is controls
        assert ctx.random is rng

    def test_reset(self) -> None:
        """reset clears ticks, time and baseline."""
        clock = Clock()
        clock.sync(0.0, running=True)
        clock.sync(100.0, running=True)
        clock.advance()
        clock.reset()
        assert clock.tick_number == 0
        assert clock.now == 0.0
        assert clock.sync(500.0, running=True) == 0.0
