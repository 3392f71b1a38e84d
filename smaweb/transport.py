"""HTTP transport for the inverter web API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from .exceptions import SmaWebConnectionError, SmaWebDataError

_LOGGER = logging.getLogger(__name__)


class SmaWebTransport:
    """Posts JSON to the inverter and returns the decoded response."""

    def __init__(
        self,
        host: str,
        websession: aiohttp.ClientSession | None = None,
        verify_ssl: bool = False,
    ) -> None:
        """Initialize the transport.

        Args:
            host: Hostname, IP address or base URL of the inverter
            websession: Optional aiohttp ClientSession. If not provided, one will be created.
            verify_ssl: Verify the TLS certificate of the inverter
        """
        if not host.startswith("http"):
            host = f"http://{host}"
        self.base_url = host.rstrip("/")
        self._websession = websession
        self._own_session = websession is None
        self._ssl: bool | None = None if verify_ssl else False

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure a websession exists."""
        if self._websession is None:
            self._websession = aiohttp.ClientSession()
            self._own_session = True
        return self._websession

    async def close(self) -> None:
        """Close the websession if it was created here."""
        if self._own_session and self._websession:
            await self._websession.close()
            self._websession = None

    async def post_json(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON body and return the decoded JSON object.

        The inverter reports failures inside the payload, so the HTTP status
        is not checked.
        """
        websession = await self._ensure_session()
        url = f"{self.base_url}{path}"
        endpoint = path.split("?", 1)[0]
        _LOGGER.debug("POST %s", endpoint)
        try:
            async with websession.post(url, json=body, ssl=self._ssl) as response:
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise SmaWebConnectionError(f"Failed to connect to device: {err}") from err
        except ValueError as err:
            raise SmaWebDataError(f"Failed to decode response: {err}") from err

        if not isinstance(data, dict):
            raise SmaWebDataError(f"Unexpected response from {endpoint}: {data!r}")
        return data
