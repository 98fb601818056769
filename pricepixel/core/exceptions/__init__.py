"""Exception handling module."""

from pricepixel.core.exceptions.base import (
    AuthenticationError,
    ClassificationError,
    ConfigurationError,
    DataValidationError,
    NetworkError,
    PricePixelError,
    ProviderError,
    PublishError,
)

__all__ = [
    "PricePixelError",
    "ProviderError",
    "AuthenticationError",
    "NetworkError",
    "DataValidationError",
    "PublishError",
    "ClassificationError",
    "ConfigurationError",
]
