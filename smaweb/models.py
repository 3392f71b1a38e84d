"""Data models for smaweb library."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionState(Enum):
    """Lifecycle of an inverter session."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    CLOSED = "closed"


@dataclass
class Metric:
    """Represents a normalized reading."""

    value: float | int | None
    unit: str


@dataclass
class YieldSample:
    """One point of a logger time series."""

    timestamp: int
    value: float | int | None
