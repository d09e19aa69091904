"""Analytics configuration management."""

import os
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_flag(value: Any) -> bool:
    """Read a boolean that may arrive as a string from YAML or the environment."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


@dataclass
class AnalyticsConfig:
    """Settings shared by the analytics and transaction statistics services."""

    # Day grouping
    date_format: str = "%d.%m.%Y"
    week_starts_on: int = 6  # Sunday
    timezone: Optional[str] = None  # System zone when unset

    # Reporting
    decimal_places: int = 2

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not (0 <= self.week_starts_on <= 6):
            raise ValueError("Week start must be a weekday between 0 (Monday) and 6 (Sunday)")

        if self.decimal_places < 0:
            raise ValueError("Decimal places must be non-negative")

        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

        if "%d" not in self.date_format or "%m" not in self.date_format:
            raise ValueError("Date format must contain day and month fields")

        if "%Y" not in self.date_format and "%y" not in self.date_format:
            raise ValueError("Date format must contain a year field")

        if self.timezone:
            try:
                ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError):
                raise ValueError(f"Unknown timezone: {self.timezone}")

    @property
    def tzinfo(self) -> Optional[tzinfo]:
        return ZoneInfo(self.timezone) if self.timezone else None

    def now(self) -> datetime:
        """Current time in the configured zone."""
        return datetime.now(self.tzinfo)

    @classmethod
    def from_env(cls) -> "AnalyticsConfig":
        """Create configuration from environment variables."""
        return cls(
            date_format=os.getenv("ANALYTICS_DATE_FORMAT", "%d.%m.%Y"),
            week_starts_on=int(os.getenv("ANALYTICS_WEEK_STARTS_ON", "6")),
            timezone=os.getenv("ANALYTICS_TIMEZONE") or None,
            decimal_places=int(os.getenv("ANALYTICS_DECIMAL_PLACES", "2")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            json_logs=_parse_flag(os.getenv("ANALYTICS_JSON_LOGS", "false")),
        )

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], base: Optional["AnalyticsConfig"] = None
    ) -> "AnalyticsConfig":
        """Create configuration from a dictionary, falling back to `base` values."""
        base = base or cls()
        return cls(
            date_format=data.get("date_format", base.date_format),
            week_starts_on=int(data.get("week_starts_on", base.week_starts_on)),
            timezone=data.get("timezone", base.timezone),
            decimal_places=int(data.get("decimal_places", base.decimal_places)),
            log_level=data.get("log_level", base.log_level),
            json_logs=_parse_flag(data.get("json_logs", base.json_logs)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "date_format": self.date_format,
            "week_starts_on": self.week_starts_on,
            "timezone": self.timezone,
            "decimal_places": self.decimal_places,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
        }


def get_analytics_config() -> AnalyticsConfig:
    """Get analytics configuration from environment."""
    return AnalyticsConfig.from_env()
