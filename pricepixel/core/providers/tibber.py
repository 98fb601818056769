"""
Tibber price provider.

Fetches today's and tomorrow's hourly prices of the first home attached to
the API token through Tibber's GraphQL endpoint.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import httpx
from pydantic import ValidationError

from pricepixel.core.config import TibberConfig
from pricepixel.core.exceptions import (
    AuthenticationError,
    DataValidationError,
    NetworkError,
    ProviderError,
)
from pricepixel.core.logging import get_logger
from pricepixel.core.models.price import PriceRecord

logger = get_logger("tibber")

PRICE_QUERY = """
{
  viewer {
    homes {
      currentSubscription {
        priceInfo {
          today { total startsAt }
          tomorrow { total startsAt }
        }
      }
    }
  }
}
"""


class TibberProvider:
    """Async client for the Tibber GraphQL API."""

    name = "tibber"

    def __init__(
        self,
        config: TibberConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or TibberConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "TibberProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                headers={
                    "Authorization": f"Bearer {self.config.token}",
                    "User-Agent": "pricepixel/0.1.0",
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_prices(self) -> list[PriceRecord]:
        """Return the provider's price records in provider order."""
        logger.info("Fetching Tibber prices...")
        client = self._ensure_client()

        try:
            response = await client.post(self.config.url, json={"query": PRICE_QUERY})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status in (401, 403):
                raise AuthenticationError(
                    f"Tibber rejected the API token ({status})",
                    provider_name=self.name,
                    status_code=status,
                ) from e
            raise NetworkError(
                f"HTTP error from provider {self.name}: {status}",
                provider_name=self.name,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(
                f"Could not reach provider {self.name}: {e}",
                provider_name=self.name,
                details={"error_type": type(e).__name__},
            ) from e

        try:
            body = json.loads(response.text, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise DataValidationError(
                "Tibber answered with invalid JSON",
                provider_name=self.name,
                details={"error": str(e)},
            ) from e

        prices = self._parse_body(body)
        logger.info("Fetched {} prices", len(prices))
        return prices

    def _parse_body(self, body: dict[str, Any]) -> list[PriceRecord]:
        errors = body.get("errors")
        if errors:
            messages = [str(error.get("message", error)) for error in errors]
            raise ProviderError(
                f"Tibber query failed: {'; '.join(messages)}",
                provider_name=self.name,
                error_code="QUERY_ERROR",
                details={"errors": messages},
            )

        try:
            homes = body["data"]["viewer"]["homes"]
            price_info = homes[0]["currentSubscription"]["priceInfo"]
        except (KeyError, IndexError, TypeError) as e:
            raise DataValidationError(
                "Tibber response has no price information",
                provider_name=self.name,
                details={"missing": str(e)},
            ) from e

        entries = [*(price_info.get("today") or []), *(price_info.get("tomorrow") or [])]
        try:
            return [PriceRecord.model_validate(entry) for entry in entries]
        except ValidationError as e:
            raise DataValidationError(
                "Tibber returned malformed price entries",
                provider_name=self.name,
                validation_errors={"errors": e.errors(include_url=False)},
            ) from e


__all__ = ["PRICE_QUERY", "TibberProvider"]
