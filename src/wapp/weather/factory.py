"""Resolve a configured provider name into a ready-to-use provider."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import load_environment
from ..exceptions import UnsupportedProviderError
from .base import WeatherProvider
from .models import ProviderName
from .openweather import OpenWeatherProvider
from .weatherapi import WeatherApiProvider


class ProviderFactory(Protocol):
    """Anything that builds a provider from an environment mapping."""

    def from_env(
        self,
        env: Mapping[str, str] | None = None,
        *,
        logger: logging.Logger | None = None,
        client: httpx.Client | None = None,
        timeout_seconds: float | None = None,
    ) -> WeatherProvider: ...


# New providers only need an entry here and a from_env() constructor.
PROVIDER_REGISTRY: dict[str, ProviderFactory] = {
    ProviderName.WEATHERAPI.value: WeatherApiProvider,
    ProviderName.OPENWEATHER.value: OpenWeatherProvider,
}

SUPPORTED_PROVIDERS: tuple[str, ...] = tuple(PROVIDER_REGISTRY)


def resolve_provider(
    name: str,
    env: Mapping[str, str] | None = None,
    *,
    logger: logging.Logger | None = None,
    client: httpx.Client | None = None,
    timeout_seconds: float | None = None,
) -> WeatherProvider:
    """Construct the provider registered under `name`.

    Raises UnsupportedProviderError for unknown names. Errors raised while the
    provider reads its environment (e.g. MissingCredentialError) propagate
    unchanged.
    """
    provider_cls = PROVIDER_REGISTRY.get(name)
    if provider_cls is None:
        raise UnsupportedProviderError(name)
    return provider_cls.from_env(
        load_environment() if env is None else env,
        logger=logger,
        client=client,
        timeout_seconds=timeout_seconds,
    )
