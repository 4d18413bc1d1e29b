"""Tests for scoring, extra lives and high score commits."""
from __future__ import annotations

from vectoroids.bus import EXTRA_LIFE, EventBus
from vectoroids.config import GameConfig
from vectoroids.persistence import MemoryHighScoreStore
from vectoroids.score import award, commit_high_score
from vectoroids.world import World


def _world() -> World:
    return World(GameConfig())


class TestAward:
    """Test cases for award."""

    def test_adds_points(self) -> None:
        """Points are added without granting a life."""
        world = _world()
        assert award(world, 50, EventBus()) == 0
        assert world.score == 50
        assert world.lives == 3

    def test_extra_life_at_threshold(self) -> None:
        """Reaching a threshold grants a life."""
        world = _world()
        world.score = 9980
        bus = EventBus()
        assert award(world, 20, bus) == 1
        assert world.lives == 4
        assert world.session.next_extra_life == 20_000
        assert [(e.name, e.data) for e in bus.pending()] == [(EXTRA_LIFE, {"lives": 4})]

    def test_multiple_thresholds_in_one_award(self) -> None:
        """One award can cross several thresholds."""
        world = _world()
        world.score = 8000
        bus = EventBus()
        assert award(world, 15_000, bus) == 2
        assert world.score == 23_000
        assert world.lives == 5
        assert world.session.next_extra_life == 30_000
        assert [e.name for e in bus.pending()] == [EXTRA_LIFE, EXTRA_LIFE]

    def test_each_threshold_only_once(self) -> None:
        """Each threshold grants exactly one life."""
        world = _world()
        bus = EventBus()
        for _ in range(200):
            award(world, 100, bus)
        assert world.score == 20_000
        assert world.lives == 5
        assert len(bus.pending()) == 2

    def test_non_positive_ignored(self) -> None:
        """Zero and negative awards change nothing."""
        world = _world()
        world.score = 500
        assert award(world, 0, EventBus()) == 0
        assert award(world, -100, EventBus()) == 0
        assert world.score == 500

    def test_no_life_after_the_last_one_is_lost(self) -> None:
        """Crossing a threshold after the final death grants nothing."""
        world = _world()
        world.score = 9500
        world.lives = 0
        world.session.out_of_lives = True
        bus = EventBus()
        assert award(world, 1000, bus) == 0
        assert world.score == 10_500
        assert world.lives == 0
        assert bus.pending() == []


class TestHighScore:
    """Test cases for commit_high_score."""

    def test_commit_when_beaten(self) -> None:
        """A higher score is saved."""
        world = _world()
        store = MemoryHighScoreStore(500)
        world.high_score = store.load()
        world.score = 600
        assert commit_high_score(world, store)
        assert world.high_score == 600
        assert store.value == 600
        assert store.saves == 1

    def test_no_commit_when_equal_or_lower(self) -> None:
        """An equal or lower score is not saved."""
        store = MemoryHighScoreStore(500)
        for score in (400, 500):
            world = _world()
            world.high_score = store.load()
            world.score = score
            assert not commit_high_score(world, store)
            assert world.high_score == 500
        assert store.saves == 0
