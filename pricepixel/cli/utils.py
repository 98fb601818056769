"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import json
from typing import Mapping, Sequence

import typer

from pricepixel.core.config import PricePixelConfig, build_config
from pricepixel.core.exceptions import ConfigurationError, PricePixelError, ProviderError, PublishError
from pricepixel.core.logging import logger

from .constants import PROVIDER_EXIT_CODE, PUBLISH_EXIT_CODE, SYSTEM_EXIT_CODE, VALIDATION_EXIT_CODE


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""

    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = _sanitize_details(details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


def exit_code_for(error: PricePixelError) -> int:
    if isinstance(error, ProviderError):
        return PROVIDER_EXIT_CODE
    if isinstance(error, PublishError):
        return PUBLISH_EXIT_CODE
    if isinstance(error, ConfigurationError):
        return VALIDATION_EXIT_CODE
    return SYSTEM_EXIT_CODE


def fail(error: PricePixelError) -> typer.Exit:
    """Log ``error`` and return the exit signal the caller should raise."""

    logger.bind(error_code=error.error_code).error(error.message)
    emit_error(error.message, error.error_code, details=error.details)
    return typer.Exit(code=exit_code_for(error))


def load_settings(**overrides: dict[str, object]) -> PricePixelConfig:
    """Build the configuration, turning rejected values into a validation exit."""

    try:
        return build_config(**overrides)
    except ConfigurationError as exc:
        raise fail(exc) from exc


def _sanitize_details(details: Mapping[str, object]) -> Mapping[str, object]:
    sanitized: dict[str, object] = {}
    for key, value in details.items():
        if isinstance(value, (str, int, float, bool)) or value is None:
            sanitized[key] = value
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            sanitized[key] = [str(item) for item in value]
        else:
            sanitized[key] = str(value)
    return sanitized


__all__ = ["emit_error", "exit_code_for", "fail", "load_settings"]
