"""pricepixel core module."""

from pricepixel.core.config import PricePixelConfig, build_config
from pricepixel.core.display import AwtrixPublisher
from pricepixel.core.models import CustomApp, PriceRecord
from pricepixel.core.providers import TibberProvider
from pricepixel.core.scheduler import LoopState, PriceDisplayLoop
from pricepixel.core.services import PriceWindow, update_window

__all__ = [
    "AwtrixPublisher",
    "CustomApp",
    "LoopState",
    "PriceDisplayLoop",
    "PricePixelConfig",
    "PriceRecord",
    "PriceWindow",
    "TibberProvider",
    "build_config",
    "update_window",
]
