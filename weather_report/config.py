"""Configuration loading for the weather report.

The configuration file is a JSON object holding at least the OpenWeatherMap
API key:

    {"api_key": "<your key>"}

Any additional keys are preserved untouched in ``Config.raw``.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, NoReturn

from .errors import ConfigError

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")


@dataclass(frozen=True)
class Config:
    """Settings loaded once per run.

    Attributes:
        api_key: OpenWeatherMap API key. Not validated locally.
        raw: The parsed JSON document, exactly as read from disk.
    """

    api_key: str
    raw: dict[str, Any] = field(default_factory=lambda: {})

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        """Build a Config from a parsed JSON document."""
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a JSON object")
        if "api_key" not in data:
            raise ConfigError("Missing required key: api_key")
        api_key = data["api_key"]
        if not isinstance(api_key, str):
            raise ConfigError("api_key must be a string")
        return cls(api_key=api_key, raw=data)


def _load_json(path: Path) -> Any:
    """Load JSON file with error handling."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigError(f"Cannot read {path}: {err.strerror or err}") from err
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise ConfigError(f"Invalid JSON in {path}: {err}") from err


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    """Load the configuration file.

    The key value itself is not checked; an empty or wrong key is left
    for the weather API to reject with 401. A file without ``api_key``
    is treated as malformed.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        Parsed Config.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or
            does not hold a string ``api_key``.
    """
    path = Path(path)
    config = Config.from_dict(_load_json(path))
    _LOGGER.debug("Loaded config from %s", path)
    return config


def load_config_or_exit(path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    """Load the configuration file, terminating the process on failure."""
    try:
        return load_config(path)
    except ConfigError as err:
        _fail(err)


def _fail(err: ConfigError) -> NoReturn:
    _LOGGER.error("Config load failed: %s", err)
    print(f"Error loading config: {err}", file=sys.stderr)
    sys.exit(1)
