"""OpenWeatherMap (api.openweathermap.org) weather provider implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from ..config import env_value, load_environment
from ..exceptions import MissingCredentialError
from .base import HttpWeatherProvider
from .models import OpenWeatherConfig, RequestKind, encode_component

KEY_VAR = "OPENWEATHER_KEY"
BASE_URL_VAR = "OPENWEATHER_BASE_URL"
UNITS_VAR = "OPENWEATHER_UNITS"
LANG_VAR = "OPENWEATHER_LANG"


class OpenWeatherProvider(HttpWeatherProvider):
    """Current weather and 5-day forecast from OpenWeatherMap.

    OpenWeatherMap has no day-count parameter, so "tomorrow" is served by the
    same forecast request as "forecast".
    """

    provider_name = "openweather"

    def __init__(
        self,
        config: OpenWeatherConfig,
        logger: logging.Logger | None = None,
        client: httpx.Client | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        super().__init__(logger=logger, client=client, timeout_seconds=timeout_seconds)
        self.config = config

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        logger: logging.Logger | None = None,
        client: httpx.Client | None = None,
        timeout_seconds: float | None = None,
    ) -> OpenWeatherProvider:
        """Build a provider from OPENWEATHER_* variables.

        OPENWEATHER_KEY is required. OPENWEATHER_BASE_URL falls back to the
        public API root. OPENWEATHER_UNITS and OPENWEATHER_LANG are sent only
        when set.
        """
        env = load_environment() if env is None else env
        api_key = env_value(env, KEY_VAR)
        if api_key is None:
            raise MissingCredentialError(KEY_VAR)

        fields: dict[str, str | None] = {
            "api_key": api_key,
            "units": env_value(env, UNITS_VAR),
            "lang": env_value(env, LANG_VAR),
        }
        base_url = env_value(env, BASE_URL_VAR)
        if base_url is not None:
            fields["base_url"] = base_url.rstrip("/")
        return cls(
            OpenWeatherConfig(**fields),
            logger=logger,
            client=client,
            timeout_seconds=timeout_seconds,
        )

    def build_url(self, city: str, kind: RequestKind | str = RequestKind.NOW) -> str:
        endpoint = "weather" if RequestKind.parse(kind) is RequestKind.NOW else "forecast"
        url = (
            f"{self.config.base_url}/{endpoint}"
            f"?q={encode_component(city)}&appid={encode_component(self.config.api_key)}"
        )
        if self.config.units is not None:
            url += f"&units={encode_component(self.config.units)}"
        if self.config.lang is not None:
            url += f"&lang={encode_component(self.config.lang)}"
        return url
