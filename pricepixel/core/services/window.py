"""Rolling window of known prices."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import datetime

from pricepixel.core.exceptions import ClassificationError
from pricepixel.core.logging import get_logger
from pricepixel.core.models.price import PriceRecord

HISTORIC_LIMIT = 4

logger = get_logger("window")


@dataclass(frozen=True, slots=True)
class PriceWindow:
    """Ordered, immutable set of price records relevant for display."""

    records: tuple[PriceRecord, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[PriceRecord]) -> "PriceWindow":
        return cls(tuple(records))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[PriceRecord]:
        return iter(self.records)


def split_prices(
    prices: Sequence[PriceRecord], now: datetime
) -> tuple[tuple[PriceRecord, ...], tuple[PriceRecord, ...]]:
    """Partition ``prices`` into (historic, upcoming) relative to ``now``.

    Order is preserved within each part. A record starting exactly at
    ``now`` belongs to neither side and raises :class:`ClassificationError`.
    """
    historic: list[PriceRecord] = []
    upcoming: list[PriceRecord] = []

    for record in prices:
        if record.starts_at < now:
            historic.append(record)
        elif record.starts_at > now:
            upcoming.append(record)
        else:
            raise ClassificationError(
                f"Can't place price starting at {record.starts_at.isoformat()}",
                starts_at=record.starts_at,
            )

    return tuple(historic), tuple(upcoming)


def update_window(
    current: PriceWindow, fetched: Sequence[PriceRecord], now: datetime
) -> PriceWindow:
    """Merge freshly fetched prices into a new window.

    Fetched data supersedes the current window entirely; only the last
    ``HISTORIC_LIMIT`` elapsed records are kept. An empty fetch leaves the
    window unchanged.
    """
    if not fetched:
        logger.info("No prices fetched, keeping {} known prices", len(current))
        return current

    historic, upcoming = split_prices(fetched, now)
    trimmed = historic[-HISTORIC_LIMIT:]

    logger.info(
        "Updating known prices: {} historic ({} kept), {} upcoming",
        len(historic),
        len(trimmed),
        len(upcoming),
    )
    return PriceWindow(trimmed + upcoming)


__all__ = ["HISTORIC_LIMIT", "PriceWindow", "split_prices", "update_window"]
