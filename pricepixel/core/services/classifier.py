"""Current-price detection and price to colour mapping."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from pricepixel.core.models.price import PriceRecord

CURRENT_COLOR = "#FFFFFF"
PLACEHOLDER_LABEL = "?"

# (upper bound, inclusive?, colour), checked in ascending order
COLOR_THRESHOLDS: tuple[tuple[Decimal, bool, str], ...] = (
    (Decimal("0.20"), True, "#6464ff"),
    (Decimal("0.25"), False, "#00ff00"),
    (Decimal("0.30"), False, "#ffff00"),
    (Decimal("0.35"), False, "#ff8000"),
    (Decimal("0.40"), False, "#ff0000"),
)
TOP_COLOR = "#800080"


def _truncate_to_hour(moment: datetime) -> datetime:
    return moment.replace(minute=0, second=0, microsecond=0)


def is_current(record: PriceRecord, now: datetime) -> bool:
    """Return True if ``record`` starts in the same clock hour as ``now``.

    The record is converted into ``now``'s timezone first, so the hour and
    the full calendar date (including month and year) must match.
    """
    starts_at = record.starts_at.astimezone(now.tzinfo)
    return _truncate_to_hour(starts_at) == _truncate_to_hour(now)


def current_price(prices: Iterable[PriceRecord], now: datetime) -> PriceRecord | None:
    """Return the first record covering ``now``, or None if there is none."""
    for record in prices:
        if is_current(record, now):
            return record
    return None


def color_for(record: PriceRecord, now: datetime) -> str:
    """Map a record to its ``#RRGGBB`` display colour."""
    if is_current(record, now):
        return CURRENT_COLOR

    total = record.total
    for bound, inclusive, color in COLOR_THRESHOLDS:
        if total < bound or (inclusive and total == bound):
            return color
    return TOP_COLOR


def rounded_price(total: Decimal) -> int:
    """Price in hundredths of the currency unit, half rounded away from zero."""
    return int((total * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_price_label(record: PriceRecord | None) -> str:
    if record is None:
        return PLACEHOLDER_LABEL
    return f" {rounded_price(record.total)}"


__all__ = [
    "CURRENT_COLOR",
    "PLACEHOLDER_LABEL",
    "COLOR_THRESHOLDS",
    "TOP_COLOR",
    "is_current",
    "current_price",
    "color_for",
    "rounded_price",
    "format_price_label",
]
