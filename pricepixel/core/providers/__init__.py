"""Price providers."""

from pricepixel.core.providers.tibber import PRICE_QUERY, TibberProvider

__all__ = ["PRICE_QUERY", "TibberProvider"]
