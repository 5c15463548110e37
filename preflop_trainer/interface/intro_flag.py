"""Persisted "has the user seen the rules" flag.

Belongs to the presentation layer; the trainer core never touches it.
Stored as a small JSON object next to the trainer config.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from preflop_trainer.core.config import CONFIG_DIR

logger = logging.getLogger("preflop_trainer.interface.intro_flag")

INTRO_FLAG_KEY = "has_seen_intro"
DEFAULT_STATE_PATH = CONFIG_DIR / "state.json"

INTRO_TEXT = """\
  You are dealt two cards, a seat and the action in front of you.
  Pick the textbook play: fold, call (check when it is free) or raise.
  Raises also ask for a size. The right action with a size outside
  the band still counts, but it breaks your streak. Type 'q' at any
  prompt to stop the terminal drill."""


class IntroFlagStore:
    """Read once at startup, written once when the intro is dismissed."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or DEFAULT_STATE_PATH

    @property
    def path(self) -> Path:
        return self._path

    def has_seen_intro(self) -> bool:
        data = self._read()
        return bool(data.get(INTRO_FLAG_KEY, False))

    def mark_seen(self) -> None:
        data = self._read()
        data[INTRO_FLAG_KEY] = True
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w") as f:
                json.dump(data, f)
        except OSError as e:
            logger.warning("Could not save intro flag to %s: %s", self._path, e)

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to read trainer state at %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}
