"""Error types for weather report configuration, requests and output."""

from __future__ import annotations


class WeatherReportError(Exception):
    """Base error for weather report failures."""


class ConfigError(WeatherReportError):
    """Configuration file is missing, unreadable or malformed."""


class PersistError(WeatherReportError):
    """Writing the weather result to disk failed."""


class WeatherClientError(WeatherReportError):
    """Base error for weather API client failures."""


class WeatherTimeout(WeatherClientError):
    """Timeout while communicating with the weather API."""


class WeatherConnectionError(WeatherClientError):
    """No response was received from the weather API."""


class WeatherResponseError(WeatherClientError):
    """HTTP response error from the weather API."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class WeatherNotFoundError(WeatherResponseError):
    """The weather API does not recognise the requested city."""


class WeatherUnauthorizedError(WeatherResponseError):
    """The weather API rejected the API key."""
