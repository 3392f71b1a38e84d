"""Helpers simulating an inverter for smaweb tests.

The inverter is simulated by a mocked transport whose post_json answers
per endpoint. Every request stays recorded on the mock for assertions.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

from smaweb.const import (
    ENDPOINT_LOGGER,
    ENDPOINT_LOGIN,
    ENDPOINT_LOGOUT,
    ENDPOINT_VALUES,
)

DEVICE_ID = "0199-B32F1234"
SID = "Tq3vDfWQ8mMVMH4L"


def values_response(values: dict[str, Any], device_id: str = DEVICE_ID) -> dict[str, Any]:
    """Build a getValues response for one device, skipping None values."""
    return {
        "result": {
            device_id: {
                key: {"1": [{"val": value}]}
                for key, value in values.items()
                if value is not None
            }
        }
    }


def logger_response(
    values: list[float], start: int = 1_700_000_000, device_id: str = DEVICE_ID
) -> dict[str, Any]:
    """Build a getLogger response with samples five minutes apart."""
    return {
        "result": {
            device_id: [{"t": start + 300 * i, "v": v} for i, v in enumerate(values)]
        }
    }


def make_transport(
    login: dict[str, Any] | None = None,
    values: dict[str, Any] | None = None,
    logger: dict[str, Any] | None = None,
    logout: dict[str, Any] | None = None,
) -> MagicMock:
    """Create a mocked SmaWebTransport answering per endpoint."""
    responses = {
        ENDPOINT_LOGIN: login if login is not None else {"result": {"sid": SID}},
        ENDPOINT_LOGOUT: logout if logout is not None else {"result": {"isLogin": False}},
        ENDPOINT_VALUES: values if values is not None else {"result": {}},
        ENDPOINT_LOGGER: logger if logger is not None else {"result": {}},
    }

    async def _post_json(path: str, body: dict[str, Any]) -> dict[str, Any]:
        return responses[path.split("?", 1)[0]]

    transport = MagicMock()
    transport.base_url = "http://192.168.0.2"
    transport.post_json = AsyncMock(side_effect=_post_json)
    transport.close = AsyncMock()
    return transport


def calls_to(transport: MagicMock, endpoint: str) -> list[Any]:
    """Return the recorded post_json calls for one endpoint."""
    return [
        c for c in transport.post_json.call_args_list
        if c.args[0].split("?", 1)[0] == endpoint
    ]


def make_session(sid: str | None = SID) -> MagicMock:
    """Create a mocked SmaWebSession holding the given session id."""
    session = MagicMock()
    session.sid = sid
    session.is_authenticated = sid is not None
    return session
