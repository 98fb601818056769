"""Data models."""

from pricepixel.core.models.display import (
    BarGeometry,
    CustomApp,
    DrawCommand,
    FillCommand,
    TextCommand,
)
from pricepixel.core.models.price import PriceRecord

__all__ = [
    "PriceRecord",
    "BarGeometry",
    "TextCommand",
    "FillCommand",
    "DrawCommand",
    "CustomApp",
]
