"""Game and server configuration."""

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .constants import (
    GRID_DIMENSION, TICK_INTERVAL_MS, SCORE_INCREMENT,
    HOST, PORT, HIGH_SCORE_FILE, LOG_LEVEL,
)
from .errors import ConfigError

# Recognized option names, as sent by clients, mapped to field names.
OPTION_NAMES = {
    "gridDimension": "grid_dimension",
    "tickIntervalMs": "tick_interval_ms",
    "scoreIncrement": "score_increment",
}


@dataclass(frozen=True)
class GameConfig:
    grid_dimension: int = GRID_DIMENSION
    tick_interval_ms: int = TICK_INTERVAL_MS
    score_increment: int = SCORE_INCREMENT

    def __post_init__(self):
        _check_int("grid_dimension", self.grid_dimension, minimum=1)
        _check_int("tick_interval_ms", self.tick_interval_ms, minimum=1)
        _check_int("score_increment", self.score_increment, minimum=0)

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_interval_ms / 1000

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "GameConfig":
        """Build a config from a client options mapping.

        Both the camelCase option names and the field names are accepted.
        Missing options keep their defaults; anything else is a ConfigError.
        """
        kwargs = {}
        for key, value in options.items():
            field_name = OPTION_NAMES.get(key, key)
            if field_name not in OPTION_NAMES.values():
                raise ConfigError(f"unknown option: {key!r}")
            kwargs[field_name] = value
        return cls(**kwargs)

    def to_options(self) -> dict[str, int]:
        return {option: getattr(self, name) for option, name in OPTION_NAMES.items()}


def _check_int(name: str, value: Any, minimum: int) -> None:
    # bool is an int subclass but never a meaningful setting here
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")


@dataclass(frozen=True)
class ServerSettings:
    game: GameConfig
    host: str
    port: int
    high_score_file: str
    log_level: str


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def load_settings() -> ServerSettings:
    return ServerSettings(
        game=GameConfig(
            grid_dimension=_env_int("SNAKE_GRID_DIMENSION", GRID_DIMENSION),
            tick_interval_ms=_env_int("SNAKE_TICK_INTERVAL_MS", TICK_INTERVAL_MS),
            score_increment=_env_int("SNAKE_SCORE_INCREMENT", SCORE_INCREMENT),
        ),
        host=(os.getenv("SNAKE_HOST") or HOST).strip(),
        port=_env_int("SNAKE_PORT", PORT),
        high_score_file=os.getenv("SNAKE_HIGH_SCORE_FILE") or HIGH_SCORE_FILE,
        log_level=(os.getenv("SNAKE_LOG_LEVEL") or LOG_LEVEL).upper(),
    )
