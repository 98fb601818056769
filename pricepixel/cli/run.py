"""The ``run`` command: drive the display until an error stops it."""

from __future__ import annotations

import asyncio
import json
from contextlib import AsyncExitStack

import typer

from pricepixel.core.config import PricePixelConfig
from pricepixel.core.display import AwtrixPublisher
from pricepixel.core.exceptions import PricePixelError
from pricepixel.core.logging import logger
from pricepixel.core.models.display import CustomApp
from pricepixel.core.providers import TibberProvider
from pricepixel.core.scheduler import PriceDisplayLoop

from .utils import fail, load_settings

TOKEN_OPTION = typer.Option(
    None,
    "--tibber-token",
    envvar="TIBBER_TOKEN",
    help="Your Tibber developer API token.",
)
ADDRESS_OPTION = typer.Option(
    None,
    "--awtrix-ip",
    envvar="AWTRIX_IP",
    help="The IPv4 address of your AWTRIX light device.",
)


def register(app: typer.Typer) -> None:
    """Register the run command on the provided application."""

    app.command("run")(run_command)


def get_provider(config: PricePixelConfig) -> TibberProvider:
    """Factory hook for obtaining the price provider."""

    return TibberProvider(config.tibber)


def get_publisher(config: PricePixelConfig) -> AwtrixPublisher:
    """Factory hook for obtaining the display publisher."""

    return AwtrixPublisher(config.awtrix)


def warn_on_demo_token(config: PricePixelConfig) -> None:
    if config.uses_demo_token:
        logger.warning(
            "Using Tibber demo token. Please provide your own developer token via "
            "--tibber-token for real data"
        )


def run_command(
    tibber_token: str | None = TOKEN_OPTION,
    awtrix_ip: str | None = ADDRESS_OPTION,
    interval: float | None = typer.Option(
        None,
        "--interval",
        envvar="PRICEPIXEL_INTERVAL",
        min=1.0,
        help="Seconds to wait between two refreshes (default 60).",
    ),
    once: bool = typer.Option(False, "--once", help="Run a single refresh and exit."),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Render one refresh and print the payload instead of publishing it.",
    ),
) -> None:
    """Fetch prices and keep the display up to date."""

    config = load_settings(
        tibber={"token": tibber_token},
        awtrix={"address": awtrix_ip},
        scheduler={"interval_seconds": interval},
    )
    warn_on_demo_token(config)

    try:
        rendered = asyncio.run(_run(config, once=once or dry_run, dry_run=dry_run))
    except PricePixelError as exc:
        raise fail(exc) from exc
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping")
        return

    if dry_run and rendered is not None:
        typer.echo(json.dumps(rendered.to_payload()))


async def _run(config: PricePixelConfig, *, once: bool, dry_run: bool) -> CustomApp | None:
    async with AsyncExitStack() as stack:
        provider = await stack.enter_async_context(get_provider(config))
        publisher = None if dry_run else await stack.enter_async_context(get_publisher(config))
        loop = PriceDisplayLoop(provider, publisher, config.scheduler.interval_seconds)
        if once:
            return await loop.run_cycle()
        await loop.run_forever()
    return None


__all__ = ["register", "run_command", "get_provider", "get_publisher"]
