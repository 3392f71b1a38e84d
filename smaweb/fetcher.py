"""Queries against the getValues and getLogger endpoints."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Any

from .const import ENDPOINT_LOGGER, ENDPOINT_VALUES, LOGGER_WINDOW, VALUE_CHANNEL
from .models import YieldSample
from .session import SmaWebSession
from .transport import SmaWebTransport

_LOGGER = logging.getLogger(__name__)


class ValueFetcher:
    """Reads raw values and logger series from the inverter.

    Only the first device in a response is read. Inverters with several
    attached devices report the others after it and they are ignored.
    """

    def __init__(self, transport: SmaWebTransport, session: SmaWebSession) -> None:
        """Initialize the fetcher."""
        self._transport = transport
        self._session = session

    async def fetch_bulk_values(self, keys: Iterable[str]) -> dict[str, Any]:
        """Fetch the current value of every key.

        Keys the device does not report map to None. Without a session no
        request is sent and every key maps to None.
        """
        keys = list(keys)
        values: dict[str, Any] = dict.fromkeys(keys)
        sid = self._session.sid
        if sid is None:
            return values

        response = await self._transport.post_json(
            f"{ENDPOINT_VALUES}?sid={sid}", {"destDev": [], "keys": keys}
        )
        _LOGGER.debug("Values: %s", response)
        device = _first_device(response)
        if not isinstance(device, dict):
            return values

        for key in keys:
            values[key] = _extract_value(device.get(key))
        return values

    async def fetch_logger(
        self, key: int, start: int, end: int | None = None
    ) -> list[YieldSample]:
        """Fetch the logger series of a key for the window [start, end).

        The window defaults to one day. Without a session no request is sent
        and the series is empty.
        """
        sid = self._session.sid
        if sid is None:
            return []
        if end is None:
            end = start + LOGGER_WINDOW

        response = await self._transport.post_json(
            f"{ENDPOINT_LOGGER}?sid={sid}",
            {"destDev": [], "key": key, "tStart": start, "tEnd": end},
        )
        _LOGGER.debug("Logger %s: %s", key, response)
        logs = _first_device(response)
        if not isinstance(logs, list):
            return []
        return [
            YieldSample(timestamp=entry.get("t"), value=entry.get("v"))
            for entry in logs
            if isinstance(entry, dict) and entry.get("t") is not None
        ]

    async def fetch_periodic_yield(
        self, key: int, start: int, end: int | None = None
    ) -> float | int:
        """Return the yield between the first and last logged sample.

        Samples are used in the order the device returns them. With fewer
        than two samples the yield is 0.
        """
        samples = await self.fetch_logger(key, start, end)
        if len(samples) < 2:
            return 0
        first, last = samples[0], samples[-1]
        if first.value is None or last.value is None:
            return 0
        return last.value - first.value


def _first_device(response: dict[str, Any]) -> Any:
    """Return the entry of the first device in a response."""
    result = response.get("result")
    if not isinstance(result, dict) or not result:
        return None
    return next(iter(result.values()))


def _extract_value(entry: Any) -> Any:
    """Return the reported value of a key entry, None when missing.

    Only channel "1" is read, e.g. {"1": [{"val": 42}]}. Some firmware sends
    the channels as a list instead, its first element is read then.
    """
    if isinstance(entry, dict):
        channel = entry.get(VALUE_CHANNEL)
    elif isinstance(entry, list) and entry:
        channel = entry[0]
    else:
        return None

    if not isinstance(channel, list) or not channel:
        return None
    first = channel[0]
    if not isinstance(first, dict):
        return None
    return first.get("val")
