"""Game state machine and the level-clear rule.

The machine is table driven: each state maps to ``[guard, target]``
pairs evaluated in order, and the first guard that passes picks the
transition. It runs once at the end of every tick, after the systems,
so a fatal collision reaches game over within the same tick.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from vectoroids.bus import EventBus
from vectoroids.spawn import start_level
from vectoroids.types import GAME_OVER, PAUSED, PLAYING, START_SCREEN

if TYPE_CHECKING:
    from vectoroids.types import TickContext
    from vectoroids.world import World

logger = logging.getLogger(__name__)

_Guard = Callable[["World", "TickContext"], bool]
_OnTransition = Callable[["World", "TickContext", str, str], None]

TRANSITIONS: dict[str, list[list[str]]] = {
    START_SCREEN: [["start_pressed", PLAYING]],
    PLAYING: [["out_of_lives", GAME_OVER], ["pause_pressed", PAUSED]],
    PAUSED: [["pause_pressed", PLAYING]],
    GAME_OVER: [["start_pressed", START_SCREEN]],
}


class Guards:
    """Maps guard name strings to callable predicates."""

    def __init__(self) -> None:
        self._guards: dict[str, _Guard] = {}

    def register(self, name: str, fn: _Guard) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, world: World, ctx: TickContext) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](world, ctx)


def default_guards() -> Guards:
    guards = Guards()
    guards.register("start_pressed", lambda w, ctx: ctx.controls.start)
    guards.register("pause_pressed", lambda w, ctx: ctx.controls.toggle_pause)
    guards.register("out_of_lives", lambda w, ctx: w.session.out_of_lives or w.lives <= 0)
    return guards


class GameStateMachine:
    """Drives ``world.state`` through the transition table."""

    def __init__(
        self,
        guards: Guards | None = None,
        transitions: dict[str, list[list[str]]] | None = None,
        on_transition: _OnTransition | None = None,
    ) -> None:
        self.guards = guards if guards is not None else default_guards()
        self.transitions = transitions if transitions is not None else TRANSITIONS
        self._on_transition = on_transition

    def find_transition(self, world: World, ctx: TickContext) -> str | None:
        for guard_name, target in self.transitions.get(world.state, ()):
            if self.guards.check(guard_name, world, ctx):
                return target
        return None

    def update(self, world: World, ctx: TickContext) -> str | None:
        """Apply at most one transition. Returns the new state, if any."""
        target = self.find_transition(world, ctx)
        if target is None:
            return None
        old = world.state
        world.state = target
        logger.debug("State %s -> %s", old, target)
        if self._on_transition is not None:
            self._on_transition(world, ctx, old, target)
        return target


def make_level_system(bus: EventBus) -> Callable[[World, TickContext], None]:
    """Start the next wave once no asteroid and no saucer is left."""

    def level_system(world: World, ctx: TickContext) -> None:
        if not world.asteroids and not world.saucers:
            start_level(world, ctx.random, bus)

    return level_system
