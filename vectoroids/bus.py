"""In-memory event bus with per-tick flush semantics.

Events are one-way notifications for the audio and presentation layers.
Nothing a subscriber does can feed back into the current tick: events
are queued while systems run and dispatched in one batch afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

FIRE = "fire"
ASTEROID_EXPLOSION = "asteroid_explosion"
SHIP_EXPLOSION = "ship_explosion"
UFO_FIRE = "ufo_fire"
UFO_SPAWNED = "ufo_spawned"
UFO_DESTROYED = "ufo_destroyed"
EXTRA_LIFE = "extra_life"
HEARTBEAT = "heartbeat"
LEVEL_STARTED = "level_started"
STATE_CHANGED = "state_changed"


@dataclass(frozen=True)
class Event:
    name: str
    data: dict[str, Any] = field(default_factory=dict)


_Handler = Callable[[Event], None]


class EventBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[Event] = []

    def subscribe(self, name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(name, []).append(handler)

    def unsubscribe(self, name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, name: str, **data: Any) -> None:
        self._queue.append(Event(name, data))

    def pending(self) -> list[Event]:
        return list(self._queue)

    def flush(self) -> list[Event]:
        """Dispatch queued events and return them in publish order."""
        batch = self._queue
        self._queue = []
        for event in batch:
            for handler in list(self._subscribers.get(event.name, ())):
                handler(event)
        return batch

    def clear(self) -> None:
        self._queue.clear()
