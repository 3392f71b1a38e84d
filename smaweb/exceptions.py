"""Exceptions for the smaweb library."""

from __future__ import annotations


class SmaWebError(Exception):
    """Base error for the smaweb library."""


class SmaWebAuthenticationError(SmaWebError):
    """The inverter rejected the login."""

    def __init__(self, message: str, error_code: int | None = None) -> None:
        """Initialize with the error code reported by the device."""
        super().__init__(message)
        self.error_code = error_code


class SmaWebLogoutError(SmaWebError):
    """The inverter still reports a logged in session after logout."""


class SmaWebConnectionError(SmaWebError):
    """The inverter could not be reached."""


class SmaWebDataError(SmaWebError):
    """The inverter returned a payload that could not be decoded."""
