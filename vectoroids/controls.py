"""Player controls sampled once per tick, with press de-duplication."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

# Held actions stay true for as long as the key is down; the others fire
# once per physical press.
HELD_ACTIONS = frozenset({"turn_left", "turn_right", "thrust", "fire"})
EDGE_ACTIONS = frozenset({
    "teleport",
    "toggle_pause",
    "start",
    "toggle_sound",
    "toggle_fire_sound",
})


@dataclass(frozen=True)
class Controls:
    turn_left: bool = False
    turn_right: bool = False
    thrust: bool = False
    fire: bool = False
    teleport: bool = False
    toggle_pause: bool = False
    start: bool = False
    toggle_sound: bool = False
    toggle_fire_sound: bool = False

    @property
    def turn(self) -> int:
        """-1 for left, +1 for right, 0 for neither or both."""
        return int(self.turn_right) - int(self.turn_left)


NEUTRAL = Controls()


class InputLatch:
    """Turns raw held-key state into Controls.

    Edge actions are reported only on the tick where they go from
    released to pressed. Unknown action names are ignored.
    """

    def __init__(self) -> None:
        self._held: set[str] = set()
        self._warned: set[str] = set()

    def sample(self, pressed: Mapping[str, bool]) -> Controls:
        values: dict[str, bool] = {}
        now_held: set[str] = set()
        for name, down in pressed.items():
            if name not in HELD_ACTIONS and name not in EDGE_ACTIONS:
                if name not in self._warned:
                    self._warned.add(name)
                    logger.warning("Ignoring unknown input action %r", name)
                continue
            if not down:
                continue
            now_held.add(name)
            if name in HELD_ACTIONS:
                values[name] = True
            elif name not in self._held:
                values[name] = True
        self._held = now_held
        return Controls(**values)
