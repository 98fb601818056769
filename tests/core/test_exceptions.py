"""Tests for the exception hierarchy."""

from pricepixel.core.exceptions import (
    AuthenticationError,
    ClassificationError,
    ConfigurationError,
    DataValidationError,
    NetworkError,
    PricePixelError,
    ProviderError,
    PublishError,
)


class TestExceptions:
    """Test error codes and details."""

    def test_base_error(self):
        error = PricePixelError("boom")

        assert str(error) == "boom"
        assert error.error_code == "GENERAL_ERROR"
        assert error.details == {}

    def test_provider_errors(self):
        auth = AuthenticationError("denied", provider_name="tibber", status_code=401)
        network = NetworkError("down", provider_name="tibber")
        invalid = DataValidationError("bad", provider_name="tibber", validation_errors={"x": 1})

        for error in (auth, network, invalid):
            assert isinstance(error, ProviderError)
            assert error.provider_name == "tibber"
        assert auth.error_code == "AUTHENTICATION_ERROR"
        assert auth.details == {"status_code": 401}
        assert network.error_code == "NETWORK_ERROR"
        assert invalid.details["validation_errors"] == {"x": 1}

    def test_publish_error(self):
        error = PublishError("rejected", address="10.0.0.5", status_code=500)

        assert not isinstance(error, ProviderError)
        assert error.error_code == "PUBLISH_ERROR"
        assert error.details == {"address": "10.0.0.5", "status_code": 500}

    def test_classification_error(self):
        error = ClassificationError("cannot place", starts_at="2024-03-15T13:00:00+01:00")

        assert error.error_code == "CLASSIFICATION_ERROR"
        assert error.details["starts_at"] == "2024-03-15T13:00:00+01:00"

    def test_configuration_error(self):
        error = ConfigurationError("bad interval", setting="PRICEPIXEL_INTERVAL")

        assert not isinstance(error, ProviderError)
        assert error.error_code == "CONFIGURATION_ERROR"
        assert error.details == {"setting": "PRICEPIXEL_INTERVAL"}
