"""
Global Settings
"""
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from core.errors import ConfigurationError

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the query service."""

    tradedb_uri: Optional[str] = None
    tradedb_name: str = "trades"
    tradedb_max_pool_size: int = 100

    # Default lookback windows for the date-range endpoints
    journey_window_days: int = 1
    order_window_days: int = 30
    require_date_range: bool = False

    cors_origins: Tuple[str, ...] = field(default_factory=lambda: ("*",))

    log_level: str = "INFO"
    log_dir: str = "logs"

    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables."""
        if env is None:
            env = os.environ

        origins = tuple(
            origin.strip()
            for origin in env.get("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        )

        return cls(
            tradedb_uri=env.get("TRADEDB_URI") or None,
            tradedb_name=env.get("TRADEDB_NAME", "trades"),
            tradedb_max_pool_size=_int(env, "TRADEDB_MAX_POOL_SIZE", 100, minimum=1),
            journey_window_days=_int(env, "JOURNEY_WINDOW_DAYS", 1, minimum=0),
            order_window_days=_int(env, "ORDER_WINDOW_DAYS", 30, minimum=0),
            require_date_range=_bool(env, "REQUIRE_DATE_RANGE", False),
            cors_origins=origins or ("*",),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            log_dir=env.get("LOG_DIR", "logs"),
            host=env.get("HOST", "127.0.0.1"),
            port=_int(env, "PORT", 5000, minimum=1),
        )


def _int(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def get_settings() -> Settings:
    """Load the nearest .env above the working directory (if any) and return settings."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings.from_env()
