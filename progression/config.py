"""Runtime configuration for the progression core.

Values come from environment variables; a local ``.env`` file is loaded first
so development overrides do not need exported shell variables.

Variables:
  PROGRESSION_STRICT_CURVES  raise DegenerateCurveBand instead of returning 0.0
  PROGRESSION_LOG_LEVEL      debug | info | warn | error (default info)
  PROGRESSION_LOG_JSON       emit one JSON object per log line
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

TRUTHY = ("1", "true", "TRUE", "yes", "on")
LOG_LEVELS = ("debug", "info", "warn", "error")


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default) in TRUTHY


@dataclass(frozen=True)
class ProgressionConfig:
    strict_curves: bool = False
    log_level: str = "info"
    log_json: bool = False


def load_config() -> ProgressionConfig:
    level = os.getenv("PROGRESSION_LOG_LEVEL", "info").strip().lower()
    if level not in LOG_LEVELS:
        level = "info"
    return ProgressionConfig(
        strict_curves=_flag("PROGRESSION_STRICT_CURVES"),
        log_level=level,
        log_json=_flag("PROGRESSION_LOG_JSON"),
    )


@lru_cache(maxsize=1)
def get_config() -> ProgressionConfig:
    """Return the process-wide config (call ``get_config.cache_clear()`` to reload)."""
    return load_config()


__all__ = ["ProgressionConfig", "load_config", "get_config"]
