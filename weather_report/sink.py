"""Presentation and storage of a successful weather result."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from .errors import PersistError

_LOGGER = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("output.json")

HEADER = "========== Weather Report =========="
FOOTER = "=" * len(HEADER)


def format_summary(result: dict[str, Any]) -> str:
    """Render the human-readable weather summary.

    Raises KeyError or IndexError if the payload lacks a displayed field.
    """
    main = result["main"]
    lines = [
        HEADER,
        f"Location: {result['name']}, {result['sys']['country']}",
        f"Temperature: {main['temp']}°C",
        f"Feels like: {main['feels_like']}°C",
        f"Humidity: {main['humidity']}%",
        f"Pressure: {main['pressure']} hPa",
        f"Conditions: {result['weather'][0]['description']}",
        f"Wind speed: {result['wind']['speed']} m/s",
        FOOTER,
    ]
    return "\n".join(lines)


def display(result: dict[str, Any], stream: TextIO | None = None) -> None:
    """Print the weather summary."""
    print(format_summary(result), file=stream or sys.stdout)


def write_result(path: str | Path, result: dict[str, Any]) -> None:
    """Write the result as indented JSON, replacing any existing file.

    Raises:
        PersistError: If the file cannot be written.
    """
    path = Path(path)
    text = json.dumps(result, indent=2, ensure_ascii=False)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as err:
        raise PersistError(f"Cannot write {path}: {err.strerror or err}") from err


def persist(path: str | Path, result: dict[str, Any]) -> bool:
    """Save the result and report the outcome to the operator.

    Returns:
        True if the file was written.
    """
    try:
        write_result(path, result)
    except PersistError as err:
        _LOGGER.warning("Failed to persist weather data: %s", err)
        print(f"Error saving weather data: {err}", file=sys.stderr)
        return False
    print(f"Weather data saved to {path}")
    return True
