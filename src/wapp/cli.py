"""wapp CLI: pick a weather provider, then fetch raw weather data from it."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from .config import AppConfig, Settings, load_config, load_settings, save_config
from .exceptions import (
    ConfigError,
    MissingCredentialError,
    UnsupportedProviderError,
    WeatherProviderError,
)
from .log_setup import setup_logger
from .weather import SUPPORTED_PROVIDERS, resolve_provider

EXIT_USAGE = 1
EXIT_CONFIG = 2
EXIT_PROVIDER = 3
EXIT_FETCH = 4
EXIT_UNEXPECTED = 99


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wapp",
        description="Fetch weather data from the configured provider.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    configure = subparsers.add_parser("configure", help="Select and save the weather provider.")
    configure.add_argument(
        "provider",
        help=f"Provider name ({', '.join(SUPPORTED_PROVIDERS)}).",
    )

    get = subparsers.add_parser("get", help="Get weather data from the configured provider.")
    get.add_argument("--city", type=str, default=None, help="City name (required).")
    get.add_argument(
        "--data",
        type=str,
        default="now",
        help="Type of weather data: now, forecast or tomorrow (default: now).",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    return build_parser().parse_args(argv)


def _configure(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    err_console = Console(stderr=True)
    if args.provider not in SUPPORTED_PROVIDERS:
        err_console.print(
            f"Error: provider '{args.provider}' is not supported.",
            markup=False,
            highlight=False,
        )
        err_console.print(
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}",
            markup=False,
            highlight=False,
        )
        return EXIT_USAGE

    save_config(AppConfig(provider=args.provider), settings.config_path)
    console.print("Provider saved", highlight=False)
    return 0


def _get(args: argparse.Namespace, settings: Settings, logger: logging.Logger) -> int:
    if not args.city:
        Console(stderr=True).print(
            "Error: city is required. Use --city <NAME>",
            markup=False,
            highlight=False,
        )
        return EXIT_USAGE

    cfg = load_config(settings.config_path)

    try:
        provider = resolve_provider(
            cfg.provider,
            logger=logger,
            timeout_seconds=settings.http_timeout_seconds,
        )
    except (UnsupportedProviderError, MissingCredentialError) as exc:
        logger.error("Provider setup failure: %s", exc)
        return EXIT_PROVIDER

    with provider:
        try:
            response = provider.fetch_weather(args.city, args.data)
        except WeatherProviderError as exc:
            logger.error("Weather request failure: %s", exc)
            return EXIT_FETCH

    # Bypass rich so tabs and carriage returns in the body are preserved.
    sys.stdout.write(response + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the wapp command line."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console()

    try:
        settings = load_settings()
        logger.setLevel(settings.log_level)
        if args.command == "configure":
            return _configure(args, settings, console)
        return _get(args, settings, logger)
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return EXIT_CONFIG
    except Exception as exc:  # pragma: no cover - defensive catch for CLI runtime
        logger.exception("Unexpected failure: %s", exc)
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
