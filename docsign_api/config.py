"""
Runtime settings, read from environment variables.

    DOCSIGN_CORS_ORIGINS   comma-separated origins (default "*")
    DOCSIGN_SEED_SAMPLES   seed the three sample documents (default true)
    DOCSIGN_LOG_LEVEL      logging level (default INFO)
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    cors_origins: list[str]
    seed_samples: bool
    log_level: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getbool(name: str, default: bool) -> bool:
    raw = _getenv(name)
    if not raw:
        return default
    return raw.lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    origins = [o.strip() for o in _getenv("DOCSIGN_CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        cors_origins=origins or ["*"],
        seed_samples=_getbool("DOCSIGN_SEED_SAMPLES", True),
        log_level=_getenv("DOCSIGN_LOG_LEVEL", "INFO").upper(),
    )
