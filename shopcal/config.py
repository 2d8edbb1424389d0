"""
Shop, calendar grid and data source settings, overridable from the environment.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

VALID_VIEWS = ("day", "week", "month")
VALID_DATA_SOURCES = ("mock", "remote")


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class ShopConfig:
    """Shop-facing display settings."""

    name: str = os.getenv("SHOP_NAME", "Main Street Barbers")
    currency_symbol: str = os.getenv("SHOP_CURRENCY_SYMBOL", "$")


@dataclass(frozen=True)
class CalendarConfig:
    """Calendar grid bounds and defaults."""

    default_view: str = os.getenv("CALENDAR_DEFAULT_VIEW", "week")
    day_start_hour: int = _safe_int("CALENDAR_DAY_START_HOUR", "8")
    day_end_hour: int = _safe_int("CALENDAR_DAY_END_HOUR", "20")
    slot_minutes: int = _safe_int("CALENDAR_SLOT_MINUTES", "30")
    default_duration_minutes: int = _safe_int("DEFAULT_APPOINTMENT_MINUTES", "30")


@dataclass(frozen=True)
class DataSourceConfig:
    """Backend selection and connection settings."""

    kind: str = os.getenv("DATA_SOURCE", "mock")
    backend_url: str = os.getenv("BACKEND_URL", "")
    backend_api_key: str = os.getenv("BACKEND_API_KEY", "")
    timeout_seconds: float = _safe_float("BACKEND_TIMEOUT_SECONDS", "10.0")
    fixture_seed: int = _safe_int("FIXTURE_SEED", "42")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    shop: ShopConfig = field(default_factory=ShopConfig)
    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    data_source: DataSourceConfig = field(default_factory=DataSourceConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    cal = config.calendar
    if cal.default_view not in VALID_VIEWS:
        raise ValueError(
            f"CALENDAR_DEFAULT_VIEW must be one of {VALID_VIEWS}, got {cal.default_view!r}"
        )
    if not 0 <= cal.day_start_hour < cal.day_end_hour <= 24:
        raise ValueError(
            "CALENDAR_DAY_START_HOUR and CALENDAR_DAY_END_HOUR must satisfy "
            f"0 <= start < end <= 24, got {cal.day_start_hour} and {cal.day_end_hour}"
        )
    if cal.slot_minutes < 1 or 60 % cal.slot_minutes != 0:
        raise ValueError(
            f"CALENDAR_SLOT_MINUTES must be a positive divisor of 60, got {cal.slot_minutes}"
        )
    if cal.default_duration_minutes < 1:
        raise ValueError(
            "DEFAULT_APPOINTMENT_MINUTES must be >= 1, "
            f"got {cal.default_duration_minutes}"
        )

    ds = config.data_source
    if ds.kind not in VALID_DATA_SOURCES:
        raise ValueError(
            f"DATA_SOURCE must be one of {VALID_DATA_SOURCES}, got {ds.kind!r}"
        )
    if ds.kind == "remote" and not (ds.backend_url and ds.backend_api_key):
        raise ValueError("DATA_SOURCE=remote requires BACKEND_URL and BACKEND_API_KEY")
    if ds.timeout_seconds <= 0:
        raise ValueError(
            f"BACKEND_TIMEOUT_SECONDS must be > 0, got {ds.timeout_seconds}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.shop.name)
    return config


# Singleton instance
settings = load_config()
