"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "console"  # "console" | "json"
    strict_source_maps: bool = False


def load_settings() -> Settings:
    """Build Settings from environment variables.

    Reads:
        TS_STAGER_LOG_LEVEL         : log level (default: INFO)
        TS_STAGER_LOG_FORMAT        : console | json (default: console)
        TS_STAGER_STRICT_SOURCE_MAPS: validate map shape before patching
    """
    log_format = os.environ.get("TS_STAGER_LOG_FORMAT", "console").lower()
    if log_format not in ("console", "json"):
        log_format = "console"
    strict = os.environ.get("TS_STAGER_STRICT_SOURCE_MAPS", "").strip().lower() in _TRUTHY
    return Settings(
        log_level=os.environ.get("TS_STAGER_LOG_LEVEL", "INFO").upper(),
        log_format=log_format,
        strict_source_maps=strict,
    )
