"""Login session handling for the inverter web API."""

from __future__ import annotations

import logging

from .const import ENDPOINT_LOGIN, ENDPOINT_LOGOUT
from .exceptions import SmaWebAuthenticationError, SmaWebLogoutError
from .models import SessionState
from .transport import SmaWebTransport

_LOGGER = logging.getLogger(__name__)


class SmaWebSession:
    """Holds the session id granted by the inverter."""

    def __init__(self, transport: SmaWebTransport) -> None:
        """Initialize the session."""
        self._transport = transport
        self._sid: str | None = None
        self._state = SessionState.UNAUTHENTICATED

    @property
    def sid(self) -> str | None:
        """Session id, None when no session is held."""
        return self._sid

    @property
    def state(self) -> SessionState:
        """Current session state."""
        return self._state

    @property
    def is_authenticated(self) -> bool:
        """Check if a session id is held."""
        return self._sid is not None

    async def login(self, username: str, password: str) -> str | None:
        """Log into the inverter.

        Returns the session id. A session that is already logged in is kept
        and no request is sent. Some devices answer without a session id, in
        that case None is returned, the session stays unauthenticated and
        value queries return no data.

        Raises:
            SmaWebAuthenticationError: The device reported a login error.
        """
        if self._state is SessionState.AUTHENTICATED:
            return self._sid

        response = await self._transport.post_json(
            ENDPOINT_LOGIN, {"right": username, "pass": password}
        )
        error = response.get("err")
        if error not in (None, "", 0, "0"):
            try:
                error_code: int | None = int(error)
            except (TypeError, ValueError):
                error_code = None
            raise SmaWebAuthenticationError(
                f"Unable to login, server error: {error}", error_code=error_code
            )

        result = response.get("result")
        sid = result.get("sid") if isinstance(result, dict) else None
        if not sid:
            _LOGGER.info("Login to %s returned no session id", self._transport.base_url)
            return None

        self._sid = sid
        self._state = SessionState.AUTHENTICATED
        _LOGGER.debug("Logged in to %s", self._transport.base_url)
        return sid

    async def logout(self) -> bool:
        """Close the session on the inverter.

        Returns False when there was no session to close.

        Raises:
            SmaWebLogoutError: The device still reports the session as logged in.
        """
        sid = self._sid
        self._sid = None
        self._state = SessionState.CLOSED
        if sid is None:
            return False

        response = await self._transport.post_json(f"{ENDPOINT_LOGOUT}?sid={sid}", {})
        result = response.get("result")
        if isinstance(result, dict) and result.get("isLogin") is not False:
            raise SmaWebLogoutError("Unable to logout")
        _LOGGER.debug("Logged out from %s", self._transport.base_url)
        return True
