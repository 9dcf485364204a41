"""WeatherAPI.com weather provider implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from ..config import env_value, load_environment
from ..exceptions import MissingCredentialError
from .base import HttpWeatherProvider
from .models import RequestKind, WeatherApiConfig, encode_component

KEY_VAR = "WEATHERAPI_KEY"
BASE_URL_VAR = "WEATHERAPI_BASE_URL"
LANG_VAR = "WEATHERAPI_LANG"

FORECAST_DAYS = {
    RequestKind.FORECAST: 3,
    RequestKind.TOMORROW: 1,
}


class WeatherApiProvider(HttpWeatherProvider):
    """Current conditions and day-count forecasts from WeatherAPI.com."""

    provider_name = "weatherapi"

    def __init__(
        self,
        config: WeatherApiConfig,
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
    ) -> WeatherApiProvider:
        """Build a provider from WEATHERAPI_* variables."""
        env = load_environment() if env is None else env
        api_key = env_value(env, KEY_VAR)
        if api_key is None:
            raise MissingCredentialError(KEY_VAR)

        fields: dict[str, str | None] = {
            "api_key": api_key,
            "lang": env_value(env, LANG_VAR),
        }
        base_url = env_value(env, BASE_URL_VAR)
        if base_url is not None:
            fields["base_url"] = base_url.rstrip("/")
        return cls(
            WeatherApiConfig(**fields),
            logger=logger,
            client=client,
            timeout_seconds=timeout_seconds,
        )

    def build_url(self, city: str, kind: RequestKind | str = RequestKind.NOW) -> str:
        request_kind = RequestKind.parse(kind)
        query = f"key={encode_component(self.config.api_key)}&q={encode_component(city)}"
        if request_kind is RequestKind.NOW:
            url = f"{self.config.base_url}/current.json?{query}"
        else:
            url = (
                f"{self.config.base_url}/forecast.json?{query}"
                f"&days={FORECAST_DAYS[request_kind]}"
            )
        if self.config.lang is not None:
            url += f"&lang={encode_component(self.config.lang)}"
        return url
