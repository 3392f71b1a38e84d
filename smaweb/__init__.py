"""Python library for the local web API of SMA inverters."""

from .exceptions import (
    SmaWebAuthenticationError,
    SmaWebConnectionError,
    SmaWebDataError,
    SmaWebError,
    SmaWebLogoutError,
)
from .models import Metric, SessionState, YieldSample
from .smaweb import SmaWeb

__all__ = [
    "Metric",
    "SessionState",
    "SmaWeb",
    "SmaWebAuthenticationError",
    "SmaWebConnectionError",
    "SmaWebDataError",
    "SmaWebError",
    "SmaWebLogoutError",
    "YieldSample",
]
