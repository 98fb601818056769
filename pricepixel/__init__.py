"""pricepixel - electricity spot prices on an AWTRIX pixel clock.

Fetches hourly prices from Tibber, keeps a rolling window of recent and
upcoming prices and draws them as a coloured bar chart with the current
price as a label.
"""

from pricepixel.core.models import PriceRecord
from pricepixel.core.scheduler import PriceDisplayLoop
from pricepixel.core.services import PriceWindow, build_app, map_to_bars, update_window

__version__ = "0.1.0"

__all__ = [
    "PriceDisplayLoop",
    "PriceRecord",
    "PriceWindow",
    "build_app",
    "map_to_bars",
    "update_window",
    "__version__",
]
