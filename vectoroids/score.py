"""Score, extra lives and the persisted high score."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vectoroids.bus import EXTRA_LIFE, EventBus

if TYPE_CHECKING:
    from vectoroids.persistence import HighScoreStore
    from vectoroids.world import World

logger = logging.getLogger(__name__)


def award(world: World, points: int, bus: EventBus) -> int:
    """Add ``points`` and grant one life per extra-life threshold crossed.

    Returns the number of lives granted. Negative awards are ignored so
    the score never decreases. No lives are granted once the last one is
    gone.
    """
    if points <= 0:
        return 0
    world.score += points
    session = world.session
    if session.out_of_lives:
        return 0
    step = world.config.extra_life_score
    granted = 0
    while world.score >= session.next_extra_life:
        world.lives += 1
        session.next_extra_life += step
        granted += 1
        bus.publish(EXTRA_LIFE, lives=world.lives)
    return granted


def commit_high_score(world: World, store: HighScoreStore) -> bool:
    """Persist the final score if it beats the stored high score."""
    if world.score <= world.high_score:
        return False
    world.high_score = world.score
    logger.info("New high score %d", world.score)
    store.save(world.score)
    return True
