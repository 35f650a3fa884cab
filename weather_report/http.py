"""HTTP client for the OpenWeatherMap current weather endpoint."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from .errors import (
    WeatherClientError,
    WeatherConnectionError,
    WeatherNotFoundError,
    WeatherResponseError,
    WeatherTimeout,
    WeatherUnauthorizedError,
)
from .outcome import FetchOutcome
from .protocol import OPENWEATHER_URL, WeatherQuery

_LOGGER = logging.getLogger(__name__)


class WeatherHttpClient:
    """HTTP client wrapper for the OpenWeatherMap weather endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str,
        *,
        url: str = OPENWEATHER_URL,
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._url = url

    def _query(self, city: str) -> WeatherQuery:
        return WeatherQuery(city=city, api_key=self._api_key)

    async def fetch_weather(self, city: str) -> dict[str, Any]:
        """Fetch current weather for a city.

        Issues exactly one GET request. No retries are attempted and the
        session's default timeout applies.

        Returns:
            The parsed JSON response body.

        Raises:
            WeatherNotFoundError: If the API returns 404.
            WeatherUnauthorizedError: If the API returns 401.
            WeatherResponseError: For any other non-200 status, or a 200
                whose body is empty or not a JSON object.
            WeatherTimeout: If the request times out.
            WeatherConnectionError: If no response is received.
        """
        params = self._query(city).to_params()
        _LOGGER.debug("[%s] Requesting current weather", city)
        try:
            async with self._session.get(self._url, params=params) as resp:
                if resp.status == 200:
                    try:
                        data = await resp.json(content_type=None)
                    except ValueError as err:
                        raise WeatherResponseError(
                            resp.status, "Weather response is not valid JSON"
                        ) from err
                    if not isinstance(data, dict):
                        raise WeatherResponseError(
                            resp.status, "Weather response is not a JSON object"
                        )
                    return data
                if resp.status == 404:
                    raise WeatherNotFoundError(resp.status, f"City not found: {city}")
                if resp.status == 401:
                    raise WeatherUnauthorizedError(resp.status, "Invalid API key")
                raise WeatherResponseError(
                    resp.status,
                    f"Weather request failed with status {resp.status}",
                )
        except TimeoutError as err:
            raise WeatherTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            detail = str(err) or type(err).__name__
            raise WeatherConnectionError(f"Weather request failed: {detail}") from err

    async def fetch(self, city: str) -> FetchOutcome:
        """Fetch current weather and classify the result.

        Never raises for API or transport failures; they are folded into
        the returned outcome.
        """
        try:
            result = await self.fetch_weather(city)
        except WeatherNotFoundError:
            _LOGGER.debug("[%s] City not recognised", city)
            return FetchOutcome.not_found()
        except WeatherUnauthorizedError:
            _LOGGER.debug("[%s] API key rejected", city)
            return FetchOutcome.unauthorized()
        except WeatherResponseError as err:
            _LOGGER.debug("[%s] Unexpected response: %s", city, err)
            return FetchOutcome.network_error(str(err), status=err.status)
        except WeatherClientError as err:
            _LOGGER.debug("[%s] Transport failure: %s", city, err)
            return FetchOutcome.network_error(str(err))
        return FetchOutcome.success(result)


async def fetch(
    api_key: str,
    city: str,
    *,
    session: aiohttp.ClientSession | None = None,
) -> FetchOutcome:
    """Fetch current weather for a city, opening a session if needed."""
    if session is not None:
        return await WeatherHttpClient(session, api_key).fetch(city)
    async with aiohttp.ClientSession() as own_session:
        return await WeatherHttpClient(own_session, api_key).fetch(city)
