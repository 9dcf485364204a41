"""Provider-agnostic weather interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..exceptions import TransportError
from ..redaction import sanitize_text
from .models import RequestKind


class WeatherProvider(ABC):
    """Base contract for weather providers used by the CLI."""

    provider_name: str = "unknown"

    def __enter__(self) -> WeatherProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    @abstractmethod
    def fetch_weather(self, city: str, kind: RequestKind | str = RequestKind.NOW) -> str:
        """Fetch weather for `city` and return the raw response body."""

    def close(self) -> None:
        """Release provider resources."""


class HttpWeatherProvider(WeatherProvider):
    """Weather provider backed by a single HTTP GET per fetch.

    Subclasses only describe how a request URL is assembled; the response body
    is returned as text whatever the status code.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        client: httpx.Client | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger(f"wapp.weather.{self.provider_name}")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    @abstractmethod
    def build_url(self, city: str, kind: RequestKind | str = RequestKind.NOW) -> str:
        """Return the full request URL for `city` and `kind`."""

    def fetch_weather(self, city: str, kind: RequestKind | str = RequestKind.NOW) -> str:
        url = self.build_url(city, kind)
        return self._get_text(url)

    def _get_text(self, url: str) -> str:
        self.logger.info("Requesting %s weather: %s", self.provider_name, sanitize_text(url))
        try:
            response = self._client.get(url)
            body = response.text
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            raise TransportError(
                f"{self.provider_name} request failed: {sanitize_text(str(exc))}"
            ) from exc
        self.logger.debug(
            "%s responded with HTTP %d (%d chars)",
            self.provider_name,
            response.status_code,
            len(body),
        )
        return body
