# Area: Shared
"""
dond_game.config — Settings
===========================

Settings for hosting sessions: banker difficulty, random seeds, logging
and demo-player behaviour.

Sources, later ones win:
    1. Defaults
    2. JSON config file (--config)
    3. .env file (loaded with python-dotenv)
    4. Environment variables (DOND_*)
"""

from __future__ import annotations
import json
import logging
import os
import random
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ._banker.offer_engine import DEFAULT_AGGRESSIVENESS, DIFFICULTY_LEVELS
from .errors import ConfigurationError

logger = logging.getLogger("dond_game.config")

# Offset between the shuffle and jitter seeds so the two streams differ
JITTER_SEED_OFFSET = 7919

ENV_MAPPINGS = {
    "DOND_AGGRESSIVENESS": "aggressiveness",
    "DOND_DIFFICULTY": "difficulty",
    "DOND_SEED": "seed",
    "DOND_LOG_LEVEL": "log_level",
    "DOND_LOG_FILE": "log_file",
    "DOND_ACCEPT_RATIO": "accept_ratio",
    "DOND_SWITCH": "switch",
}


class GameSettings(BaseModel):
    """Validated settings for the CLI and embedding hosts."""

    aggressiveness: float = Field(default=DEFAULT_AGGRESSIVENESS, ge=0.0, le=1.0)
    difficulty: Optional[str] = None
    seed: Optional[int] = None
    log_level: str = "INFO"
    log_file: str = "dond_game.log"
    accept_ratio: float = Field(default=0.8, gt=0.0)
    accept_round: Optional[int] = Field(default=None, ge=1)
    switch: bool = False
    games: int = Field(default=1, ge=1)

    @field_validator("difficulty")
    @classmethod
    def _known_difficulty(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        name = value.lower()
        if name not in DIFFICULTY_LEVELS:
            raise ValueError(f"must be one of {sorted(DIFFICULTY_LEVELS)}")
        return name

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name

    @property
    def effective_aggressiveness(self) -> float:
        """Difficulty preset if one is set, else the raw knob."""
        if self.difficulty:
            return DIFFICULTY_LEVELS[self.difficulty]
        return self.aggressiveness

    def shuffle_rng(self) -> random.Random:
        return random.Random(self.seed)

    def jitter_rng(self) -> random.Random:
        if self.seed is None:
            return random.Random()
        return random.Random(self.seed + JITTER_SEED_OFFSET)


def load_settings(
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GameSettings:
    """
    Build settings from a config file, .env and the environment.

    Raises:
        ConfigurationError: If the file is missing or unreadable, or any
            value fails validation
    """
    data: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(
                f"Config file not found: {config_path}",
                details={"config_path": config_path},
            )
        try:
            with open(path, encoding="utf-8") as f:
                data.update(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Could not read config file: {e}",
                details={"config_path": config_path},
            ) from e

    if environ is None:
        load_dotenv(dotenv_path)
        environ = os.environ

    for env_key, setting in ENV_MAPPINGS.items():
        if env_key in environ:
            data[setting] = environ[env_key]

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = GameSettings(**data)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid settings",
            details={"errors": [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]},
        ) from e

    logger.debug(f"Settings loaded: {settings.model_dump()}")
    return settings
