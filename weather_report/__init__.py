"""Current weather lookup against the OpenWeatherMap API."""

__version__ = "0.1.0"

from .config import Config, load_config, load_config_or_exit
from .errors import (
    ConfigError,
    PersistError,
    WeatherClientError,
    WeatherConnectionError,
    WeatherNotFoundError,
    WeatherReportError,
    WeatherResponseError,
    WeatherTimeout,
    WeatherUnauthorizedError,
)
from .http import WeatherHttpClient, fetch
from .outcome import FetchOutcome, FetchOutcomeType
from .protocol import OPENWEATHER_URL, WeatherQuery, build_query_params
from .sink import display, format_summary, persist, write_result

__all__ = [
    "OPENWEATHER_URL",
    "Config",
    "ConfigError",
    "FetchOutcome",
    "FetchOutcomeType",
    "PersistError",
    "WeatherClientError",
    "WeatherConnectionError",
    "WeatherHttpClient",
    "WeatherNotFoundError",
    "WeatherQuery",
    "WeatherReportError",
    "WeatherResponseError",
    "WeatherTimeout",
    "WeatherUnauthorizedError",
    "__version__",
    "build_query_params",
    "display",
    "fetch",
    "format_summary",
    "load_config",
    "load_config_or_exit",
    "persist",
    "write_result",
]
