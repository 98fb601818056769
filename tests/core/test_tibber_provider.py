"""Tests for the Tibber price provider."""

import json
import os
from decimal import Decimal

import httpx
import pytest

from pricepixel.core.config import TibberConfig
from pricepixel.core.exceptions import (
    AuthenticationError,
    DataValidationError,
    NetworkError,
    ProviderError,
)
from pricepixel.core.providers import PRICE_QUERY, TibberProvider


def price_info_body(today, tomorrow=None):
    return {
        "data": {
            "viewer": {
                "homes": [
                    {
                        "currentSubscription": {
                            "priceInfo": {"today": today, "tomorrow": tomorrow or []}
                        }
                    }
                ]
            }
        }
    }


TODAY = [
    {"total": 0.2871, "startsAt": "2024-03-15T00:00:00.000+01:00"},
    {"total": 0.2734, "startsAt": "2024-03-15T01:00:00.000+01:00"},
]
TOMORROW = [{"total": 0.1952, "startsAt": "2024-03-16T00:00:00.000+01:00"}]


def provider_for(handler, token="secret"):
    return TibberProvider(TibberConfig(token=token), transport=httpx.MockTransport(handler))


class TestTibberProvider:
    """Test fetching and parsing prices."""

    @pytest.mark.asyncio
    async def test_fetch_prices(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["Authorization"]
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=price_info_body(TODAY, TOMORROW))

        async with provider_for(handler) as provider:
            prices = await provider.fetch_prices()

        assert seen["auth"] == "Bearer secret"
        assert seen["url"] == "https://api.tibber.com/v1-beta/gql"
        assert seen["body"] == {"query": PRICE_QUERY}
        assert [p.total for p in prices] == [Decimal("0.2871"), Decimal("0.2734"), Decimal("0.1952")]
        assert prices[2].starts_at.day == 16

    @pytest.mark.asyncio
    async def test_missing_tomorrow(self):
        def handler(request):
            return httpx.Response(200, json=price_info_body(TODAY, None))

        async with provider_for(handler) as provider:
            prices = await provider.fetch_prices()

        assert len(prices) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_rejected_token(self, status):
        def handler(request):
            return httpx.Response(status, json={"errors": [{"message": "unauthorized"}]})

        async with provider_for(handler) as provider:
            with pytest.raises(AuthenticationError) as exc_info:
                await provider.fetch_prices()

        assert exc_info.value.details["status_code"] == status

    @pytest.mark.asyncio
    async def test_server_error(self):
        def handler(request):
            return httpx.Response(503)

        async with provider_for(handler) as provider:
            with pytest.raises(NetworkError) as exc_info:
                await provider.fetch_prices()

        assert exc_info.value.details["status_code"] == 503

    @pytest.mark.asyncio
    async def test_unreachable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with provider_for(handler) as provider:
            with pytest.raises(NetworkError) as exc_info:
                await provider.fetch_prices()

        assert exc_info.value.details["error_type"] == "ConnectError"

    @pytest.mark.asyncio
    async def test_graphql_errors(self):
        def handler(request):
            return httpx.Response(200, json={"errors": [{"message": "bad query"}]})

        async with provider_for(handler) as provider:
            with pytest.raises(ProviderError) as exc_info:
                await provider.fetch_prices()

        assert exc_info.value.error_code == "QUERY_ERROR"
        assert "bad query" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_no_homes(self):
        def handler(request):
            return httpx.Response(200, json={"data": {"viewer": {"homes": []}}})

        async with provider_for(handler) as provider:
            with pytest.raises(DataValidationError):
                await provider.fetch_prices()

    @pytest.mark.asyncio
    async def test_malformed_entry(self):
        def handler(request):
            return httpx.Response(200, json=price_info_body([{"total": 0.2, "startsAt": "yesterday"}]))

        async with provider_for(handler) as provider:
            with pytest.raises(DataValidationError):
                await provider.fetch_prices()

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, text="<html>maintenance</html>")

        async with provider_for(handler) as provider:
            with pytest.raises(DataValidationError):
                await provider.fetch_prices()


@pytest.mark.integration
class TestTibberIntegration:
    """Hit the real API with the demo token."""

    @pytest.mark.asyncio
    async def test_demo_token(self):
        config = TibberConfig(token=os.getenv("TIBBER_TOKEN") or TibberConfig().token)
        async with TibberProvider(config) as provider:
            prices = await provider.fetch_prices()

        assert prices
        assert prices == sorted(prices, key=lambda p: p.starts_at)
