"""Background heartbeat that quickens as the asteroid field thins out."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from vectoroids.bus import HEARTBEAT, EventBus

if TYPE_CHECKING:
    from vectoroids.config import GameConfig
    from vectoroids.types import TickContext
    from vectoroids.world import World


def beat_interval(cfg: GameConfig, asteroids: int) -> float:
    return max(cfg.heartbeat_min_ms, cfg.heartbeat_base_ms + asteroids * cfg.heartbeat_per_asteroid_ms)


def make_heartbeat_system(bus: EventBus) -> Callable[[World, TickContext], None]:

    def heartbeat_system(world: World, ctx: TickContext) -> None:
        session = world.session
        interval = beat_interval(world.config, len(world.asteroids))
        if session.last_beat is not None and ctx.now - session.last_beat < interval:
            return
        session.last_beat = ctx.now
        bus.publish(HEARTBEAT, tempo=interval, tone="high" if session.beat_high else "low")
        session.beat_high = not session.beat_high

    return heartbeat_system
