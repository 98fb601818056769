"""Publisher for the AWTRIX custom app HTTP API."""

from __future__ import annotations

import httpx

from pricepixel.core.config import AwtrixConfig
from pricepixel.core.exceptions import PublishError
from pricepixel.core.logging import get_logger
from pricepixel.core.models.display import CustomApp

logger = get_logger("awtrix")


class AwtrixPublisher:
    """Pushes custom app frames to an AWTRIX device on the local network."""

    def __init__(
        self,
        config: AwtrixConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or AwtrixConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "AwtrixPublisher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @property
    def endpoint(self) -> str:
        return f"http://{self.config.address}/api/custom"

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def publish(self, app: CustomApp) -> None:
        """Replace the custom app's content with ``app``."""
        client = self._ensure_client()
        try:
            response = await client.post(
                self.endpoint,
                params={"name": self.config.app_name},
                json=app.to_payload(),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PublishError(
                f"Display rejected custom app {self.config.app_name}: {e.response.status_code}",
                address=self.config.address,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise PublishError(
                f"Could not reach display at {self.config.address}: {e}",
                address=self.config.address,
                details={"error_type": type(e).__name__},
            ) from e

        logger.debug("Published {} draw commands to {}", len(app.draw), self.config.address)


__all__ = ["AwtrixPublisher"]
