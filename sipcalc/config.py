from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

SERVICE_NAME = "sipcalc"


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    cors_origins: Tuple[str, ...]
    max_tenure_years: int
    default_currency: str
    port: int


def _env(key: str, default: str) -> str:
    # empty values count as unset
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Loads .env (if present) and reads settings from environment variables.
    """
    load_dotenv(dotenv_path)

    origins = _env("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")

    return Settings(
        env=_env("SIPCALC_ENV", "dev"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(origin.strip() for origin in origins.split(",") if origin.strip()),
        max_tenure_years=int(_env("MAX_TENURE_YEARS", "100")),
        default_currency=_env("DEFAULT_CURRENCY", "INR").upper(),
        port=int(_env("PORT", "5000")),
    )
