"""Typed models shared by the weather providers."""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import UnsupportedRequestKindError, WeatherProviderError


class RequestKind(str, Enum):
    """Temporal scope of a weather query."""

    NOW = "now"
    FORECAST = "forecast"
    TOMORROW = "tomorrow"

    @classmethod
    def parse(cls, value: RequestKind | str) -> RequestKind:
        """Return the matching kind or raise UnsupportedRequestKindError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise UnsupportedRequestKindError(str(value)) from exc


class ProviderName(str, Enum):
    """Names accepted in the persisted config."""

    WEATHERAPI = "weatherapi"
    OPENWEATHER = "openweather"


class OpenWeatherConfig(BaseModel):
    """Connection settings for the OpenWeatherMap API."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    base_url: str = "https://api.openweathermap.org/data/3.0"
    units: str | None = None
    lang: str | None = None


class WeatherApiConfig(BaseModel):
    """Connection settings for the WeatherAPI.com API."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    base_url: str = "https://api.weatherapi.com/v1"
    lang: str | None = None


def encode_component(value: str) -> str:
    """Percent-encode a value for use as a single URL query component.

    Lone surrogates (undecodable bytes smuggled in through argv) are turned
    back into their original bytes before encoding.
    """
    try:
        raw = value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as exc:
        raise WeatherProviderError(f"Cannot URL-encode {value!r}: {exc}") from exc
    return quote(raw, safe="")
