"""Tests for pure circle-proximity checks."""
from __future__ import annotations

from vectoroids.collision import circle_vs_circle, point_in_circle, within


class TestWithin:
    """Test cases for the distance threshold check."""

    def test_closer_than_threshold(self) -> None:
        """Points nearer than the threshold hit."""
        assert within((0.0, 0.0), (3.0, 4.0), 5.1)

    def test_exact_threshold_is_miss(self) -> None:
        """Exactly at the threshold is a miss."""
        assert not within((0.0, 0.0), (3.0, 4.0), 5.0)

    def test_zero_threshold_never_hits(self) -> None:
        """A zero threshold never hits."""
        assert not within((1.0, 1.0), (1.0, 1.0), 0.0)


class TestCircles:
    """Test cases for circle overlap helpers."""

    def test_overlap(self) -> None:
        """Overlapping circles collide."""
        assert circle_vs_circle((0.0, 0.0), 1.0, (1.5, 0.0), 1.0)

    def test_touching_is_no_collision(self) -> None:
        """Touching circles do not collide."""
        assert not circle_vs_circle((0.0, 0.0), 1.0, (2.0, 0.0), 1.0)

    def test_point_in_circle(self) -> None:
        """A point strictly inside the radius hits."""
        assert point_in_circle((39.0, 0.0), (0.0, 0.0), 40.0)
        assert not point_in_circle((40.0, 0.0), (0.0, 0.0), 40.0)
