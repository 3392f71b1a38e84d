"""Main SmaWeb class for reading SMA inverters."""

from __future__ import annotations

import asyncio
from datetime import datetime
import logging
from typing import Any

import aiohttp

from .const import (
    DEFAULT_PASSWORD,
    DEFAULT_USERNAME,
    UNIT_ENERGY,
    VALUE_CURRENT_POWER,
    VALUE_KEYS,
    VALUE_MAXIMUM_POWER,
    VALUE_TODAY_YIELD,
    VALUE_TOTAL_YIELD,
    VALUE_UPTIME,
    YIELD_KEY_BEFORE,
)
from .exceptions import SmaWebError
from .extractor import MetricExtractor
from .fetcher import ValueFetcher
from .models import Metric
from .session import SmaWebSession
from .transport import SmaWebTransport

_LOGGER = logging.getLogger(__name__)


class SmaWeb:
    """Main class for reading SMA inverters through the WebConnect API.

    Use as an async context manager, the session is opened on entry and
    closed on exit::

        async with SmaWeb("192.168.0.2", password="secret") as inverter:
            metrics = await inverter.get_metrics()

    Values are cached between calls. Only get_metrics() refreshes the cache,
    the single metric getters reuse whatever the last fetch returned. Calls
    on one instance are expected to come from one task at a time.
    """

    def __init__(
        self,
        host: str,
        username: str = "",
        password: str = "",
        websession: aiohttp.ClientSession | None = None,
        verify_ssl: bool = False,
    ) -> None:
        """Initialize the SmaWeb connection.

        Args:
            host: Hostname, IP address or base URL of the inverter
            username: User right, "usr" when empty
            password: Password of the user, "0000" when empty
            websession: Optional aiohttp ClientSession. If not provided, one will be created.
            verify_ssl: Verify the TLS certificate of the inverter
        """
        self._username = username or DEFAULT_USERNAME
        self._password = password or DEFAULT_PASSWORD
        self._transport = SmaWebTransport(host, websession, verify_ssl)
        self._session = SmaWebSession(self._transport)
        self._fetcher = ValueFetcher(self._transport, self._session)
        self._extractor = MetricExtractor(self._fetcher)
        self._cache: dict[str, Any] | None = None
        self._lock = asyncio.Lock()

    @property
    def base_url(self) -> str:
        """Base URL of the inverter."""
        return self._transport.base_url

    @property
    def sid(self) -> str | None:
        """Current session id."""
        return self._session.sid

    @property
    def is_authenticated(self) -> bool:
        """Check if a session is held."""
        return self._session.is_authenticated

    async def open(self) -> None:
        """Log into the inverter.

        The connection is released again when the login fails.
        """
        async with self._lock:
            try:
                await self._session.login(self._username, self._password)
            except Exception:
                await self._transport.close()
                raise

    async def close(self) -> None:
        """Log out and release the connection.

        A failed logout is logged, the connection is released regardless.
        """
        async with self._lock:
            try:
                await self._session.logout()
            except SmaWebError as err:
                _LOGGER.warning("Logout from %s failed: %s", self.base_url, err)
            finally:
                self._cache = None
                await self._transport.close()

    async def __aenter__(self) -> SmaWeb:
        """Async context manager entry."""
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def get_data(self) -> dict[str, Any]:
        """Return a copy of the normalized values, fetching them when not cached."""
        async with self._lock:
            if self._cache is None:
                raw = await self._fetcher.fetch_bulk_values(VALUE_KEYS)
                self._cache = await self._extractor.normalize(raw, datetime.now())
            return dict(self._cache)

    async def get_metrics(self) -> dict[str, Any]:
        """Fetch fresh values and return all metrics."""
        self._cache = None
        return {
            "power": await self.get_power_metrics(),
            "yield": await self.get_yield_metrics(),
            "uptime": await self.get_uptime(),
        }

    async def get_power_metrics(self) -> dict[str, Metric]:
        """Return maximum and current power."""
        return {
            "maximum": await self.get_maximum_power(),
            "current": await self.get_current_power(),
        }

    async def get_yield_metrics(self) -> dict[str, Metric]:
        """Return total and today yield."""
        return {
            "total": await self.get_total_yield(),
            "today": await self.get_today_yield(),
        }

    async def get_maximum_power(self) -> Metric:
        """Return maximum power in W."""
        return self._extractor.metric(await self.get_data(), VALUE_MAXIMUM_POWER)

    async def get_current_power(self) -> Metric:
        """Return current power in W."""
        return self._extractor.metric(await self.get_data(), VALUE_CURRENT_POWER)

    async def get_total_yield(self) -> Metric:
        """Return total yield in Wh."""
        return self._extractor.metric(await self.get_data(), VALUE_TOTAL_YIELD)

    async def get_today_yield(self) -> Metric:
        """Return today's yield in Wh."""
        return self._extractor.metric(await self.get_data(), VALUE_TODAY_YIELD)

    async def get_uptime(self) -> Metric:
        """Return uptime in s."""
        return self._extractor.metric(await self.get_data(), VALUE_UPTIME)

    async def get_periodic_yield(
        self, start: int, end: int | None = None, key: int = YIELD_KEY_BEFORE
    ) -> Metric:
        """Return the logged yield between two unix timestamps.

        Args:
            start: Start of the window
            end: End of the window, one day after start when omitted
            key: Logger key, the daily yield log by default
        """
        value = await self._fetcher.fetch_periodic_yield(key, start, end)
        return Metric(value=value, unit=UNIT_ENERGY)
