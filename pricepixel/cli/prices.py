"""The ``prices`` command: show the window that would be drawn."""

from __future__ import annotations

import asyncio
import sys

import typer

from pricepixel.core.config import PricePixelConfig
from pricepixel.core.exceptions import PricePixelError
from pricepixel.core.models.price import PriceRecord
from pricepixel.core.scheduler import local_now
from pricepixel.core.services import PriceWindow, color_for, is_current, rounded_price, update_window

from . import run as run_module
from .formatters import create_formatter
from .utils import fail, load_settings

COLUMNS = ["starts_at", "total", "cents", "color", "current"]


def register(app: typer.Typer) -> None:
    """Register the prices command on the provided application."""

    app.command("prices")(prices_command)


def prices_command(
    tibber_token: str | None = run_module.TOKEN_OPTION,
    format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format (table or jsonl).",
        show_default=True,
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colorized table output."),
) -> None:
    """Fetch prices once and print the resulting window."""

    try:
        formatter = create_formatter(format, no_color=no_color)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--format") from exc

    config = load_settings(tibber={"token": tibber_token})
    run_module.warn_on_demo_token(config)

    now = local_now()
    try:
        window = asyncio.run(_load_window(config, now))
    except PricePixelError as exc:
        raise fail(exc) from exc

    formatter.render([_to_row(record, now) for record in window], stream=sys.stdout, columns=COLUMNS)


async def _load_window(config: PricePixelConfig, now) -> PriceWindow:
    async with run_module.get_provider(config) as provider:
        fetched = await provider.fetch_prices()
    return update_window(PriceWindow(), fetched, now)


def _to_row(record: PriceRecord, now) -> dict[str, object]:
    return {
        "starts_at": record.starts_at.isoformat(),
        "total": str(record.total),
        "cents": rounded_price(record.total),
        "color": color_for(record, now),
        "current": is_current(record, now),
    }


__all__ = ["register", "prices_command"]
