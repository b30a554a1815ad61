"""
Application configuration.

Responsibilities:
- Load ``.env`` from the project root.
- Expose a frozen ``AppConfig`` whose defaults come from environment variables.
- Configure process-wide logging.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


@dataclass(frozen=True)
class AppConfig:
    secret_key: str = os.getenv("FOODIE_SECRET_KEY", "foodie-finder-secret-change-in-production")
    token_max_age: int = int(os.getenv("FOODIE_TOKEN_MAX_AGE", str(7 * 24 * 3600)))
    bcrypt_rounds: int = int(os.getenv("FOODIE_BCRYPT_ROUNDS", "12"))
    cors_origin: str = os.getenv("FOODIE_CORS_ORIGIN", "http://localhost:3000")
    seed_sample_data: bool = _env_flag("FOODIE_SEED_SAMPLE_DATA", "true")
    restaurants_file: Path | None = _env_path("FOODIE_RESTAURANTS_FILE")
    admin_email: str = os.getenv("FOODIE_ADMIN_EMAIL", "")
    admin_password: str = os.getenv("FOODIE_ADMIN_PASSWORD", "")
    log_level: str = os.getenv("FOODIE_LOG_LEVEL", "INFO")
    default_page_size: int = 12
    max_page_size: int = 100
    nearby_radius_km: float = 10.0
    nearby_limit: int = 20


DEFAULT_CONFIG = AppConfig()


def configure_logging(config: AppConfig = DEFAULT_CONFIG) -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
