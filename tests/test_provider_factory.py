"""Provider resolution and contract substitutability tests."""

from __future__ import annotations

import pytest

from wapp.exceptions import MissingCredentialError, UnsupportedProviderError
from wapp.weather import (
    SUPPORTED_PROVIDERS,
    OpenWeatherProvider,
    RequestKind,
    WeatherApiProvider,
    WeatherProvider,
    resolve_provider,
)


class MockProvider(WeatherProvider):
    """Contract implementation that always answers with a fixed body."""

    provider_name = "mock"

    def __init__(self, response: str) -> None:
        self.response = response
        self.calls: list[tuple[str, RequestKind | str]] = []

    def fetch_weather(self, city: str, kind: RequestKind | str = RequestKind.NOW) -> str:
        self.calls.append((city, kind))
        return self.response


def test_supported_providers_listed_in_registry_order() -> None:
    assert SUPPORTED_PROVIDERS == ("weatherapi", "openweather")


def test_weatherapi_provider_resolves() -> None:
    provider = resolve_provider("weatherapi", {"WEATHERAPI_KEY": "dummy"})
    assert isinstance(provider, WeatherApiProvider)
    assert isinstance(provider, WeatherProvider)
    provider.close()


def test_openweather_provider_resolves() -> None:
    provider = resolve_provider("openweather", {"OPENWEATHER_KEY": "dummy"})
    assert isinstance(provider, OpenWeatherProvider)
    provider.close()


@pytest.mark.parametrize("name", ["unknown", "", "WeatherAPI", "openweather ", "nws"])
def test_invalid_provider_raises(name: str) -> None:
    env = {"WEATHERAPI_KEY": "dummy", "OPENWEATHER_KEY": "dummy"}
    with pytest.raises(UnsupportedProviderError) as excinfo:
        resolve_provider(name, env)
    assert excinfo.value.name == name


@pytest.mark.parametrize(
    ("name", "variable"),
    [("weatherapi", "WEATHERAPI_KEY"), ("openweather", "OPENWEATHER_KEY")],
)
def test_missing_credential_propagates_unchanged(name: str, variable: str) -> None:
    with pytest.raises(MissingCredentialError) as excinfo:
        resolve_provider(name, {})
    assert excinfo.value.variable == variable


def test_resolver_defaults_to_process_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENWEATHER_KEY", "from-process")
    provider = resolve_provider("openweather")
    assert provider.config.api_key == "from-process"
    provider.close()


def test_mock_provider_satisfies_contract() -> None:
    mock = MockProvider(response="DATA_OK")
    with mock as provider:
        out = provider.fetch_weather("Kyiv", "now")
    assert out == "DATA_OK"
    assert mock.calls == [("Kyiv", "now")]
