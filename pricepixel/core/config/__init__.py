"""Configuration management module."""

from pricepixel.core.config.settings import (
    CUSTOM_APP_NAME,
    DEFAULT_AWTRIX_ADDRESS,
    LOG_FORMATS,
    TIBBER_API_URL,
    TIBBER_DEMO_TOKEN,
    AwtrixConfig,
    LoggingConfig,
    PricePixelConfig,
    SchedulerConfig,
    TibberConfig,
    build_config,
    load_config_from_env,
)

__all__ = [
    "PricePixelConfig",
    "TibberConfig",
    "AwtrixConfig",
    "SchedulerConfig",
    "LoggingConfig",
    "build_config",
    "load_config_from_env",
    "TIBBER_DEMO_TOKEN",
    "TIBBER_API_URL",
    "DEFAULT_AWTRIX_ADDRESS",
    "CUSTOM_APP_NAME",
    "LOG_FORMATS",
]
