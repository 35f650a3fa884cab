"""Request helpers for the OpenWeatherMap current weather endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

OPENWEATHER_URL: Final = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_UNITS: Final = "metric"
DEFAULT_LANGUAGE: Final = "en"


@dataclass(frozen=True)
class WeatherQuery:
    """A single current-weather lookup.

    The city is passed through exactly as the user typed it; the remote
    service decides whether it is valid.
    """

    city: str
    api_key: str
    units: str = DEFAULT_UNITS
    language: str = DEFAULT_LANGUAGE

    def to_params(self) -> dict[str, str]:
        """Convert to query parameters for the wire format."""
        return build_query_params(
            city=self.city,
            api_key=self.api_key,
            units=self.units,
            language=self.language,
        )


def build_query_params(
    *,
    city: str,
    api_key: str,
    units: str = DEFAULT_UNITS,
    language: str = DEFAULT_LANGUAGE,
) -> dict[str, str]:
    """Build the query string parameters for a current-weather request."""
    return {
        "q": city,
        "appid": api_key,
        "units": units,
        "lang": language,
    }
