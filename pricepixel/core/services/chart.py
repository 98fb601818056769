"""Mapping of a price sequence onto the display's pixel grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from pricepixel.core.logging import get_logger
from pricepixel.core.models.display import BarGeometry, CustomApp, FillCommand, TextCommand
from pricepixel.core.models.price import PriceRecord
from pricepixel.core.services.classifier import (
    CURRENT_COLOR,
    color_for,
    current_price,
    format_price_label,
)

# Bars start right of the 12 column price label.
BAR_COUNT = 36 - 12
X_OFFSET = 12
Y_MIN = 1
Y_MAX = 8
LABEL_X = 0
LABEL_Y = 1

logger = get_logger("chart")


def map_to_bars(
    prices: Sequence[PriceRecord],
    now: datetime,
    bar_count: int = BAR_COUNT,
    y_min: int = Y_MIN,
    y_max: int = Y_MAX,
    x_offset: int = X_OFFSET,
) -> list[BarGeometry]:
    """Scale ``prices`` into one bar each, higher prices drawn taller.

    Only the first ``bar_count`` records are used. When every price is equal
    all bars sit at the vertical midpoint of ``[y_min, y_max]``.
    """
    relevant = list(prices[:bar_count])
    if not relevant:
        return []

    min_price = min(record.total for record in relevant)
    max_price = max(record.total for record in relevant)
    price_range = max_price - min_price
    pixel_range = Decimal(y_max - y_min)

    bars: list[BarGeometry] = []
    for index, record in enumerate(relevant):
        if price_range == 0:
            scaled = Decimal(y_min + y_max) / 2
        else:
            scaled = Decimal(y_min) + pixel_range * (record.total - min_price) / price_range
        color = color_for(record, now)
        logger.debug(
            "Mapping price {} to {} (Min: {}, Max: {}, Color: {})",
            record.total,
            math.floor(scaled),
            min_price,
            max_price,
            color,
        )
        bars.append(
            BarGeometry(
                x=x_offset + index,
                y=y_max - math.floor(scaled),
                width=1,
                height=y_max,
                color=color,
            )
        )

    return bars


def build_app(
    prices: Sequence[PriceRecord], now: datetime, bar_count: int = BAR_COUNT
) -> CustomApp:
    """Assemble the label and chart draw commands for one frame."""
    relevant = list(prices[:bar_count])

    logger.info("Identified {} relevant prices", len(relevant))
    for record in relevant:
        logger.debug("Starting at {}: {}", record.starts_at.isoformat(), record.total)

    label = format_price_label(current_price(relevant, now))
    commands: list[TextCommand | FillCommand] = [
        TextCommand(x=LABEL_X, y=LABEL_Y, text=label, color=CURRENT_COLOR)
    ]
    commands.extend(FillCommand.from_bar(bar) for bar in map_to_bars(relevant, now, bar_count))
    return CustomApp(draw=commands)


__all__ = [
    "BAR_COUNT",
    "X_OFFSET",
    "Y_MIN",
    "Y_MAX",
    "LABEL_X",
    "LABEL_Y",
    "map_to_bars",
    "build_app",
]
