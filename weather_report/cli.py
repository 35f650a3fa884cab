"""Command line entry point: config, prompt, fetch, display, persist."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import aiohttp

from .config import DEFAULT_CONFIG_PATH, Config, load_config_or_exit
from .http import fetch
from .outcome import FetchOutcome, FetchOutcomeType
from .sink import DEFAULT_OUTPUT_PATH, display, persist

_LOGGER = logging.getLogger(__name__)

PROMPT = "Enter city name to get weather forecast: "


def prompt_city() -> str:
    """Ask the operator for a city name."""
    return input(PROMPT)


def report_failure(outcome: FetchOutcome, city: str) -> None:
    """Print a diagnostic naming why the fetch failed."""
    if outcome.type is FetchOutcomeType.NOT_FOUND:
        message = f'Error: City "{city}" not found.'
    elif outcome.type is FetchOutcomeType.UNAUTHORIZED:
        message = "Error: Invalid API key. Please check your config.json."
    else:
        message = f"Error fetching weather data: {outcome.message}"
    _LOGGER.warning("[%s] Fetch failed: %s", city, outcome.type.value)
    print(message, file=sys.stderr)


async def fetch_and_report(
    config: Config,
    city: str,
    *,
    output_path: str | Path = DEFAULT_OUTPUT_PATH,
    session: aiohttp.ClientSession | None = None,
) -> FetchOutcome:
    """Fetch weather for a city, then display and persist it on success."""
    print(f"Fetching weather data for {city}...")
    outcome = await fetch(config.api_key, city, session=session)

    if outcome.result is None:
        report_failure(outcome, city)
        return outcome

    display(outcome.result)
    persist(output_path, outcome.result)
    return outcome


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="weather-report",
        description="Fetch current weather for a city from OpenWeatherMap",
    )
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to JSON config file holding api_key",
    )
    parser.add_argument(
        "--output",
        default=str(DEFAULT_OUTPUT_PATH),
        help="Path the raw JSON response is written to",
    )
    parser.add_argument(
        "--city",
        default=None,
        help="City to look up (prompts when omitted)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one weather lookup.

    Exits with status 1 when the config cannot be loaded. Fetch failures
    are reported but still return 0.
    """
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config_or_exit(args.config)
    city = args.city if args.city is not None else prompt_city()
    asyncio.run(fetch_and_report(config, city, output_path=args.output))
    return 0
