"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from schemakit.errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    default_country: str = "US"
    port: int = 8080
    fetch_timeout: int = 10
    user_agent: str = "SchemaKitInspector/1.0"
    log_level: str = "INFO"


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    default_country = (os.getenv("SCHEMA_DEFAULT_COUNTRY") or "US").strip().upper()
    port = _get_int_env("PORT", 8080)
    fetch_timeout = _get_int_env("SCHEMA_FETCH_TIMEOUT", 10)
    user_agent = (os.getenv("SCHEMA_USER_AGENT") or "SchemaKitInspector/1.0").strip()
    log_level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()

    if log_level not in LOG_LEVELS:
        logger.warning("LOG_LEVEL=%s is not a known level; falling back to INFO.", log_level)
        log_level = "INFO"

    return Settings(
        default_country=default_country,
        port=port,
        fetch_timeout=fetch_timeout,
        user_agent=user_agent,
        log_level=log_level,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
