"""Runtime configuration for the simulation API.

Everything comes from environment variables so the same code runs under
``flask run`` locally and behind a WSGI server:

- INVEST_CORS_ORIGINS: comma-separated origins allowed to call /api/*
  (defaults to the local Vite/React dev servers)
- LOG_LEVEL: standard logging level name (defaults to INFO)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


@dataclass
class Settings:
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    testing: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (os.environ unless given)."""
    env = os.environ if environ is None else environ

    origins_raw = env.get("INVEST_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in origins_raw.split(",") if origin.strip()]

    return Settings(
        cors_origins=origins or list(DEFAULT_CORS_ORIGINS),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
