"""Normalization of raw inverter values into unit-tagged metrics."""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any

from .const import (
    METRIC_NAMES,
    VALUE_TODAY_YIELD,
    VALUE_TOTAL_YIELD,
    VALUE_UNITS,
    YIELD_KEY_TODAY,
)
from .fetcher import ValueFetcher
from .models import Metric

_LOGGER = logging.getLogger(__name__)


def start_of_day(now: datetime) -> int:
    """Return the unix timestamp of local midnight of the given day."""
    return int(now.replace(hour=0, minute=0, second=0, microsecond=0).timestamp())


class MetricExtractor:
    """Turns raw value sets into normalized metrics."""

    def __init__(self, fetcher: ValueFetcher) -> None:
        """Initialize the extractor."""
        self._fetcher = fetcher

    async def normalize(self, raw: dict[str, Any], now: datetime) -> dict[str, Any]:
        """Apply unit conversion and the today yield fallback.

        Total yield is reported in kWh and converted to Wh. Inverters without
        a today yield value (e.g. Tripower units) report nothing or 0, the
        yield is then computed from today's logger series.
        """
        values = dict(raw)

        if values.get(VALUE_TOTAL_YIELD):
            values[VALUE_TOTAL_YIELD] *= 1000

        if not values.get(VALUE_TODAY_YIELD):
            _LOGGER.debug("No today yield reported, using logger")
            values[VALUE_TODAY_YIELD] = await self._fetcher.fetch_periodic_yield(
                YIELD_KEY_TODAY, start_of_day(now)
            )

        return values

    @staticmethod
    def metric(values: dict[str, Any], key: str) -> Metric:
        """Tag a normalized value with the unit of its key."""
        return Metric(value=values.get(key), unit=VALUE_UNITS[key])

    async def extract(self, raw: dict[str, Any], now: datetime) -> dict[str, Metric]:
        """Normalize a raw value set and return every metric by name."""
        values = await self.normalize(raw, now)
        return {name: self.metric(values, key) for key, name in METRIC_NAMES.items()}
