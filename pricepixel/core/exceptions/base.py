"""pricepixel core exception classes."""

from typing import Any


class PricePixelError(Exception):
    """Base exception for pricepixel."""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        """Initialise the exception.

        Args:
            message: error message
            error_code: machine readable error code
            details: extra details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ProviderError(PricePixelError):
    """Price provider related failure."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        error_code: str = "PROVIDER_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, details)
        self.provider_name = provider_name


class AuthenticationError(ProviderError):
    """The provider rejected the token."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, provider_name, "AUTHENTICATION_ERROR", super_details)


class NetworkError(ProviderError):
    """Transport failure or unexpected HTTP status."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, provider_name, "NETWORK_ERROR", super_details)


class DataValidationError(ProviderError):
    """The provider answered with a payload that cannot be parsed."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        validation_errors: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if validation_errors:
            super_details["validation_errors"] = validation_errors
        super().__init__(message, provider_name, "VALIDATION_ERROR", super_details)
        self.validation_errors = validation_errors or {}


class PublishError(PricePixelError):
    """The display could not be reached or rejected the payload."""

    def __init__(
        self,
        message: str,
        address: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["address"] = address
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, "PUBLISH_ERROR", super_details)
        self.address = address
        self.status_code = status_code


class ClassificationError(PricePixelError):
    """A price record cannot be placed as historic or upcoming."""

    def __init__(
        self,
        message: str,
        starts_at: Any = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if starts_at is not None:
            super_details["starts_at"] = str(starts_at)
        super().__init__(message, "CLASSIFICATION_ERROR", super_details)
        self.starts_at = starts_at


class ConfigurationError(PricePixelError):
    """A flag or environment value cannot be turned into a valid setting."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if setting is not None:
            super_details["setting"] = setting
        super().__init__(message, "CONFIGURATION_ERROR", super_details)
        self.setting = setting
