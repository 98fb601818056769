"""Configuration management module - settings for the price display loop."""

import os
from dataclasses import asdict, dataclass, field
from typing import Any

from pricepixel.core.exceptions import ConfigurationError

LOG_FORMATS = ("console", "json")
TIBBER_DEMO_TOKEN = "5K4MVS-OjfWhK_4yrjOlFe1F6kJXPVf7eQYggo8ebAE"
TIBBER_API_URL = "https://api.tibber.com/v1-beta/gql"
DEFAULT_AWTRIX_ADDRESS = "127.0.0.1"
CUSTOM_APP_NAME = "tibberPrices"


@dataclass
class TibberConfig:
    """Price provider settings."""

    token: str = TIBBER_DEMO_TOKEN
    url: str = TIBBER_API_URL
    timeout: float = 30.0


@dataclass
class AwtrixConfig:
    """Display device settings."""

    address: str = DEFAULT_AWTRIX_ADDRESS
    app_name: str = CUSTOM_APP_NAME
    timeout: float = 10.0


@dataclass
class SchedulerConfig:
    """Loop timing."""

    interval_seconds: float = 60.0

    def __post_init__(self) -> None:
        if self.interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    format: str = "console"
    file: str | None = None

    def __post_init__(self) -> None:
        self.level = self.level.strip().upper()
        self.format = self.format.strip().lower()
        if self.format not in LOG_FORMATS:
            raise ValueError(
                f"Unsupported log format '{self.format}'. Available formats: console, json."
            )

    @property
    def serialize(self) -> bool:
        return self.format == "json"


@dataclass
class PricePixelConfig:
    """Top level configuration."""

    tibber: TibberConfig = field(default_factory=TibberConfig)
    awtrix: AwtrixConfig = field(default_factory=AwtrixConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def uses_demo_token(self) -> bool:
        return self.tibber.token == TIBBER_DEMO_TOKEN

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "PricePixelConfig":
        """Build a configuration from a nested dictionary."""
        return cls(
            tibber=TibberConfig(**config_dict.get("tibber", {})),
            awtrix=AwtrixConfig(**config_dict.get("awtrix", {})),
            scheduler=SchedulerConfig(**config_dict.get("scheduler", {})),
            logging=LoggingConfig(**config_dict.get("logging", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "tibber": asdict(self.tibber),
            "awtrix": asdict(self.awtrix),
            "scheduler": asdict(self.scheduler),
            "logging": asdict(self.logging),
        }


def _parse_interval(raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"PRICEPIXEL_INTERVAL must be a number of seconds, got '{raw}'",
            setting="PRICEPIXEL_INTERVAL",
        ) from exc


def load_config_from_env() -> dict[str, Any]:
    """Load configuration overrides from environment variables."""
    config: dict[str, Any] = {}

    tibber_token = os.getenv("TIBBER_TOKEN")
    if tibber_token:
        config["tibber"] = {"token": tibber_token}

    awtrix_ip = os.getenv("AWTRIX_IP")
    if awtrix_ip:
        config["awtrix"] = {"address": awtrix_ip}

    interval = os.getenv("PRICEPIXEL_INTERVAL")
    if interval is not None:
        config["scheduler"] = {"interval_seconds": _parse_interval(interval)}

    logging_config: dict[str, Any] = {}
    log_level = os.getenv("PRICEPIXEL_LOG_LEVEL")
    if log_level is not None:
        logging_config["level"] = log_level
    log_format = os.getenv("PRICEPIXEL_LOG_FORMAT")
    if log_format is not None:
        logging_config["format"] = log_format
    log_file = os.getenv("PRICEPIXEL_LOG_FILE")
    if log_file is not None:
        logging_config["file"] = log_file

    if logging_config:
        config["logging"] = logging_config

    return config


def build_config(**overrides: dict[str, Any]) -> PricePixelConfig:
    """Merge environment values with explicit overrides, overrides winning.

    ``overrides`` maps section names to dictionaries; ``None`` values are
    ignored so unset command line flags fall through to the environment.

    Raises:
        ConfigurationError: if a merged value is rejected by its section
    """
    config_dict = load_config_from_env()
    for section, values in overrides.items():
        cleaned = {k: v for k, v in values.items() if v is not None}
        if cleaned:
            config_dict[section] = {**config_dict.get(section, {}), **cleaned}
    try:
        return PricePixelConfig.from_dict(config_dict)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
