"""High score storage.

A store keeps one non-negative integer under a fixed key. Reading never
fails: anything missing or malformed reads back as 0.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "asteroids_highscore"


class HighScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Process-local store, mostly for tests and headless runs."""

    def __init__(self, value: int = 0) -> None:
        self.value = max(int(value), 0)
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        self.value = score
        self.saves += 1


class JsonHighScoreStore:
    """JSON file holding ``{"asteroids_highscore": <int>}``.

    Other keys already in the file are preserved on save.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable high score file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("High score file %s does not hold an object", self.path)
            return {}
        return data

    def load(self) -> int:
        value = self._read().get(HIGH_SCORE_KEY, 0)
        if isinstance(value, str) and value.isdigit():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            if value != 0:
                logger.warning("Ignoring invalid high score %r in %s", value, self.path)
            return 0
        return value

    def save(self, score: int) -> None:
        data = self._read()
        data[HIGH_SCORE_KEY] = int(score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
