"""Fetch, update and render loop driving the display."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime
from enum import Enum
from typing import Protocol

from pricepixel.core.logging import get_logger, log_context
from pricepixel.core.models.display import CustomApp
from pricepixel.core.models.price import PriceRecord
from pricepixel.core.services.chart import build_app
from pricepixel.core.services.window import PriceWindow, update_window

logger = get_logger("scheduler")


class PriceSource(Protocol):
    async def fetch_prices(self) -> list[PriceRecord]: ...


class AppSink(Protocol):
    async def publish(self, app: CustomApp) -> None: ...


class LoopState(str, Enum):
    """Scheduler states."""

    IDLE = "idle"
    RUNNING = "running"


def local_now() -> datetime:
    """Timezone aware wall-clock time in the local zone."""
    return datetime.now().astimezone()


class PriceDisplayLoop:
    """Owns the price window and runs one strictly sequential cycle per tick.

    Errors raised by the provider, the window update or the publisher are
    not handled here; they leave :meth:`run_cycle` and :meth:`run_forever`
    unchanged so the caller can terminate the process.
    """

    def __init__(
        self,
        provider: PriceSource,
        publisher: AppSink | None,
        interval_seconds: float = 60.0,
        clock: Callable[[], datetime] = local_now,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ):
        self.provider = provider
        self.publisher = publisher
        self.interval_seconds = interval_seconds
        self._clock = clock
        self._sleep = sleep
        self.window = PriceWindow()
        self.state = LoopState.IDLE
        self.cycles = 0

    async def run_cycle(self) -> CustomApp:
        """Fetch, update the window and render one frame."""
        self.state = LoopState.RUNNING
        self.cycles += 1
        try:
            with log_context(cycle=self.cycles):
                fetched = await self.provider.fetch_prices()
                now = self._clock()
                self.window = update_window(self.window, fetched, now)

                app = build_app(self.window.records, now)
                bar_count = len(app.draw) - 1
                if self.publisher is None:
                    logger.info("Dry run, not drawing {} prices", bar_count)
                else:
                    logger.info("Drawing {} prices...", bar_count)
                    await self.publisher.publish(app)
                return app
        finally:
            self.state = LoopState.IDLE

    async def run_forever(self, max_cycles: int | None = None) -> None:
        """Run cycles separated by ``interval_seconds`` until an error or ``max_cycles``."""
        completed = 0
        while max_cycles is None or completed < max_cycles:
            await self.run_cycle()
            completed += 1
            if max_cycles is not None and completed >= max_cycles:
                break
            logger.info("Sleeping for {} seconds", self.interval_seconds)
            await self._sleep(self.interval_seconds)


__all__ = ["AppSink", "LoopState", "PriceDisplayLoop", "PriceSource", "local_now"]
