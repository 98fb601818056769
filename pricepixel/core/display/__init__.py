"""Display publishers."""

from pricepixel.core.display.awtrix import AwtrixPublisher

__all__ = ["AwtrixPublisher"]
