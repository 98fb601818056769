"""Logging utilities with per-cycle trace propagation."""

from __future__ import annotations

import json
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime
from typing import IO, Any, Iterator
from uuid import uuid4

from loguru import logger

from pricepixel.core.logging.config import LogConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | {message}"
)

_TRACE_ID_VAR: ContextVar[str | None] = ContextVar("pricepixel_trace_id", default=None)
_CONTEXT_VAR: ContextVar[dict[str, Any]] = ContextVar("pricepixel_log_context", default={})


def _ensure_trace_id() -> str:
    trace_id = _TRACE_ID_VAR.get()
    if trace_id is None:
        trace_id = uuid4().hex
        _TRACE_ID_VAR.set(trace_id)
    return trace_id


def _patch_record(record: dict[str, Any]) -> None:
    extra = record["extra"]
    if not extra.get("trace_id"):
        extra["trace_id"] = _ensure_trace_id()
    for key, value in _CONTEXT_VAR.get({}).items():
        extra.setdefault(key, value)
    extra.setdefault("component", "pricepixel")
    extra.setdefault("error_code", None)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _format_payload(record: dict[str, Any]) -> dict[str, Any]:
    extra = record.get("extra", {})
    context = {
        k: v for k, v in extra.items() if k not in {"trace_id", "error_code", "component"}
    }
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record.get("message"),
        "component": extra.get("component"),
        "trace_id": extra.get("trace_id"),
        "error_code": extra.get("error_code"),
    }
    if context:
        payload["context"] = context
    exception = record.get("exception")
    if exception:
        payload["exception"] = str(exception.value)
    return payload


class _StreamJsonSink:
    """Sink writing JSON payloads to a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def __call__(self, message: Any) -> None:
        payload = _format_payload(message.record)
        self._stream.write(json.dumps(payload, default=_json_default))
        self._stream.write("\n")
        self._stream.flush()


class _FileJsonSink:
    """Sink appending JSON lines to a file path."""

    def __init__(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self._path = path

    def __call__(self, message: Any) -> None:
        payload = _format_payload(message.record)
        with open(self._path, "a", encoding="utf-8") as file:
            file.write(json.dumps(payload, default=_json_default))
            file.write("\n")


def _configure_from_config(config: LogConfig) -> None:
    handlers: list[dict[str, Any]] = []
    if config.console_output:
        stream = config.console_stream or sys.stderr
        if config.serialize:
            handlers.append({"sink": _StreamJsonSink(stream), "level": config.level})
        else:
            handlers.append(
                {
                    "sink": stream,
                    "level": config.level,
                    "format": CONSOLE_FORMAT,
                    "colorize": config.colorize,
                }
            )
    if config.file_output and config.file_path:
        handlers.append({"sink": _FileJsonSink(config.file_path), "level": config.level})

    configure_kwargs: dict[str, Any] = {"handlers": handlers, "patcher": _patch_record}
    if config.extra:
        configure_kwargs["extra"] = config.extra
    logger.configure(**configure_kwargs)


def configure_logging(level: str = "INFO", **kwargs: Any) -> LogConfig:
    """Configure logging with the provided level and options."""

    config = LogConfig(level=level.upper(), **kwargs)
    _configure_from_config(config)
    return config


def get_logger(name: str | None = None):
    """Return the logger bound to component ``name``."""

    if name:
        return logger.bind(component=name)
    return logger


@contextmanager
def log_context(*, trace_id: str | None = None, **extra: Any) -> Iterator[str]:
    """Propagate a trace id and extra fields to every record logged inside."""

    previous_context = _CONTEXT_VAR.get({})
    context_token = _CONTEXT_VAR.set({**previous_context, **extra})

    active_trace = trace_id or uuid4().hex
    trace_token = _TRACE_ID_VAR.set(active_trace)

    try:
        yield active_trace
    finally:
        _TRACE_ID_VAR.reset(trace_token)
        _CONTEXT_VAR.reset(context_token)


def current_trace_id() -> str:
    """Return the active trace id, generating one if required."""

    return _ensure_trace_id()


__all__ = [
    "configure_logging",
    "current_trace_id",
    "get_logger",
    "log_context",
    "logger",
]
