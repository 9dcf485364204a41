"""Weather provider integrations."""

from .base import HttpWeatherProvider, WeatherProvider
from .factory import PROVIDER_REGISTRY, SUPPORTED_PROVIDERS, resolve_provider
from .models import OpenWeatherConfig, ProviderName, RequestKind, WeatherApiConfig
from .openweather import OpenWeatherProvider
from .weatherapi import WeatherApiProvider

__all__ = [
    "HttpWeatherProvider",
    "OpenWeatherConfig",
    "OpenWeatherProvider",
    "PROVIDER_REGISTRY",
    "ProviderName",
    "RequestKind",
    "SUPPORTED_PROVIDERS",
    "WeatherApiConfig",
    "WeatherApiProvider",
    "WeatherProvider",
    "resolve_provider",
]
