"""
Centralized configuration for the commanding package.

- dataclasses + stdlib, no settings framework.
- Loads from OS env; a .env file in the working directory is read first (python-dotenv).
- Validation in __post_init__.
- Immutable singleton via functools.lru_cache.
"""

from __future__ import annotations

import functools
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from dotenv import load_dotenv

ENV_PREFIX = "COMMANDING_"


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def _get_env_str(key: str, default: str | None = None) -> str | None:
    return os.getenv(ENV_PREFIX + key, default)


def _get_env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(ENV_PREFIX + key)
    if v is None:
        return default
    v = v.strip().lower()
    return v in {"1", "true", "t", "yes", "y", "on"}


def _validate_choice(value: str, *, choices: tuple[str, ...], key: str) -> str:
    if value not in choices:
        raise ValueError(f"{key} must be one of {choices}, got {value!r}")
    return value


# ------------------------------------------------------------------------------
# Settings dataclass (immutable)
# ------------------------------------------------------------------------------
EnvName = Literal["local", "dev", "staging", "prod"]


@dataclass(frozen=True)
class Settings:
    # Environment
    environment: EnvName = "local"

    # Observability
    log_level: str = "INFO"
    json_logs: bool = False

    # Event naming
    event_name_separator: str = "-"

    # Derived
    is_prod: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "environment",
            _validate_choice(self.environment, choices=("local", "dev", "staging", "prod"), key="COMMANDING_ENV"),
        )

        if not re.fullmatch(r"(?i)DEBUG|INFO|WARNING|ERROR|CRITICAL", self.log_level.strip()):
            raise ValueError("COMMANDING_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        object.__setattr__(self, "log_level", self.log_level.strip().upper())

        if not self.event_name_separator:
            raise ValueError("COMMANDING_EVENT_SEPARATOR must be non-empty")

        object.__setattr__(self, "is_prod", self.environment == "prod")

    def safe_dict(self) -> dict:
        return {
            "environment": self.environment,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "event_name_separator": self.event_name_separator,
        }


# ------------------------------------------------------------------------------
# Loader (singleton)
# ------------------------------------------------------------------------------
_logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(dotenv_path=str(env_file), override=False)

    settings = Settings(
        environment=cast(EnvName, _get_env_str("ENV", "local") or "local"),
        log_level=_get_env_str("LOG_LEVEL", "INFO") or "INFO",
        json_logs=_get_env_bool("JSON_LOGS", False),
        event_name_separator=_get_env_str("EVENT_SEPARATOR", "-") or "-",
    )

    _logger.debug(
        "Settings loaded",
        extra={"settings": settings.safe_dict()}
    )
    return settings
