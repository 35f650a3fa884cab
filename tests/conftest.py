"""Pytest configuration and fixtures for weather_report tests."""

from __future__ import annotations

import copy
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

PARIS_PAYLOAD: dict[str, Any] = {
    "name": "Paris",
    "sys": {"country": "FR"},
    "main": {"temp": 15, "feels_like": 14, "humidity": 60, "pressure": 1012},
    "weather": [{"description": "clear sky"}],
    "wind": {"speed": 3.5},
}


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def paris_payload() -> dict[str, Any]:
    """A minimal current-weather response for Paris."""
    return copy.deepcopy(PARIS_PAYLOAD)


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception raised by json() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_data is not None:
        response.json.return_value = json_data
    if json_error is not None:
        response.json.side_effect = json_error

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
