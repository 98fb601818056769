"""Main entry point for the pricepixel command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from pricepixel.core.config import LoggingConfig
from pricepixel.core.logging import configure_logging

from .prices import register as register_prices_command
from .run import register as register_run_command
from .utils import load_settings


def setup_logging(settings: LoggingConfig) -> None:
    """Install the console sink, and the JSON file sink when a file is set."""

    configure_logging(
        level=settings.level,
        serialize=settings.serialize,
        file_output=settings.file is not None,
        file_path=settings.file,
    )


def create_app() -> typer.Typer:
    """Create a Typer application instance for pricepixel."""

    app = typer.Typer(
        add_completion=False,
        help="Show Tibber electricity prices on an AWTRIX pixel clock",
    )

    @app.callback()
    def main(
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Minimum log level [env: PRICEPIXEL_LOG_LEVEL, default: INFO].",
        ),
        log_format: str | None = typer.Option(
            None,
            "--log-format",
            help="Log output format, console or json [env: PRICEPIXEL_LOG_FORMAT, default: console].",
        ),
        log_file: Path | None = typer.Option(
            None,
            "--log-file",
            help="Also append JSON log lines to this file [env: PRICEPIXEL_LOG_FILE].",
        ),
    ) -> None:
        config = load_settings(
            logging={
                "level": log_level,
                "format": log_format,
                "file": str(log_file) if log_file else None,
            }
        )
        setup_logging(config.logging)

    register_run_command(app)
    register_prices_command(app)
    return app


app = create_app()

__all__ = ["app", "create_app", "setup_logging"]
