"""Logging utilities."""

from pricepixel.core.logging.config import LogConfig
from pricepixel.core.logging.logger import (
    configure_logging,
    current_trace_id,
    get_logger,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "configure_logging",
    "current_trace_id",
    "get_logger",
    "log_context",
    "logger",
]
