"""Trainer configuration.

Default path: ~/.preflop_trainer/config.json

Expected JSON format (every key optional):
    {
        "small_blind": 1,
        "big_blind": 2,
        "seed": 42,
        "log_level": "INFO",
        "sizing": {"open_multiplier": 2.5, "four_bet_multiplier": 2.2}
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path

from preflop_trainer.strategy.bet_sizing import DEFAULT_SIZING_RULES, SizingRules

logger = logging.getLogger("preflop_trainer.config")

CONFIG_DIR = Path.home() / ".preflop_trainer"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TrainerConfig:
    """Settings shared by the trainer session and its front ends."""

    small_blind: float = 1.0
    big_blind: float = 2.0
    seed: int | None = None
    log_level: str = "WARNING"
    sizing: SizingRules = field(default_factory=lambda: DEFAULT_SIZING_RULES)

    def __post_init__(self) -> None:
        if self.small_blind <= 0 or self.big_blind <= 0:
            raise ValueError("Blinds must be positive")
        if self.small_blind > self.big_blind:
            raise ValueError("Small blind cannot exceed the big blind")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")


def load_config(config_path: Path | None = None) -> TrainerConfig:
    """Load trainer configuration from a JSON file.

    A missing file gives the defaults. An unreadable or invalid file is
    logged and also gives the defaults, so a bad config never stops a drill.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return TrainerConfig()

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read trainer config at %s: %s", path, e)
        return TrainerConfig()

    if not isinstance(data, dict):
        logger.warning("Trainer config at %s is not a JSON object", path)
        return TrainerConfig()

    try:
        return TrainerConfig(
            small_blind=float(data.get("small_blind", 1.0)),
            big_blind=float(data.get("big_blind", 2.0)),
            seed=int(data["seed"]) if data.get("seed") is not None else None,
            log_level=str(data.get("log_level", "WARNING")).upper(),
            sizing=_load_sizing(data.get("sizing", {})),
        )
    except (TypeError, ValueError) as e:
        logger.warning("Invalid trainer config at %s: %s", path, e)
        return TrainerConfig()


def _load_sizing(data: dict) -> SizingRules:
    if not isinstance(data, dict):
        raise TypeError("'sizing' must be a JSON object")
    known = {f.name for f in fields(SizingRules)}
    for key in data:
        if key not in known:
            logger.warning("Ignoring unknown sizing key: %s", key)
    return SizingRules(**{k: float(v) for k, v in data.items() if k in known})
