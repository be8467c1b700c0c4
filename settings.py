from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_SERVICE_NAME_ENV = "SERVICE_NAME"
_ENVIRONMENT_ENV = "APP_ENV"
_VERSION_ENV = "SERVICE_VERSION"
_LOG_LEVEL_ENV = "LOG_LEVEL"
_TRAIN_ON_STARTUP_ENV = "TRAIN_ON_STARTUP"
_MODEL_SEED_ENV = "MODEL_SEED"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    service_name: str
    environment: str
    version: str
    log_level: str
    train_on_startup: bool
    model_seed: Optional[int]


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip().lower()
    if candidate in _TRUE_VALUES:
        return True
    if candidate in _FALSE_VALUES:
        return False
    return default


def _read_seed(default: Optional[int]) -> Optional[int]:
    value = os.getenv(_MODEL_SEED_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        service_name=_read_str_env(_SERVICE_NAME_ENV, "SIGETA AI Server"),
        environment=_read_str_env(_ENVIRONMENT_ENV, "production"),
        version=_read_str_env(_VERSION_ENV, "1.0.0"),
        log_level=_read_log_level("INFO"),
        train_on_startup=_read_bool_env(_TRAIN_ON_STARTUP_ENV, True),
        model_seed=_read_seed(None),
    )
