"""Price window, classification and chart services."""

from pricepixel.core.services.chart import BAR_COUNT, build_app, map_to_bars
from pricepixel.core.services.classifier import (
    color_for,
    current_price,
    format_price_label,
    is_current,
    rounded_price,
)
from pricepixel.core.services.window import (
    HISTORIC_LIMIT,
    PriceWindow,
    split_prices,
    update_window,
)

__all__ = [
    "BAR_COUNT",
    "HISTORIC_LIMIT",
    "PriceWindow",
    "build_app",
    "color_for",
    "current_price",
    "format_price_label",
    "is_current",
    "map_to_bars",
    "rounded_price",
    "split_prices",
    "update_window",
]
