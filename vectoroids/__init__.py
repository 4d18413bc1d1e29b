"""vectoroids - tick-driven simulation core for a vector asteroid-field arcade game."""

from vectoroids.bus import Event, EventBus
from vectoroids.clock import Clock
from vectoroids.components import Asteroid, Body, Bullet, Particle, Saucer, Ship, Vertex
from vectoroids.config import GameConfig
from vectoroids.controls import Controls, InputLatch
from vectoroids.engine import Engine
from vectoroids.persistence import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore
from vectoroids.states import GameStateMachine
from vectoroids.types import (
    GAME_OVER,
    PAUSED,
    PLAYING,
    START_SCREEN,
    ConfigError,
    TickContext,
)
from vectoroids.world import Snapshot, World

__all__ = [
    "Engine",
    "World",
    "Snapshot",
    "Clock",
    "TickContext",
    "GameConfig",
    "ConfigError",
    "Controls",
    "InputLatch",
    "Event",
    "EventBus",
    "GameStateMachine",
    "HighScoreStore",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
    "Body",
    "Ship",
    "Bullet",
    "Asteroid",
    "Vertex",
    "Saucer",
    "Particle",
    "START_SCREEN",
    "PLAYING",
    "PAUSED",
    "GAME_OVER",
]
