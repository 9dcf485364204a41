"""Redaction of API keys in log output."""

from __future__ import annotations

import json
import logging

from wapp.log_setup import JsonConsoleFormatter, setup_logger
from wapp.redaction import REDACTED, sanitize_text


def test_query_string_keys_redacted_rest_of_url_kept() -> None:
    url = "https://api.weatherapi.com/v1/forecast.json?key=secret123&q=London&days=3"
    assert sanitize_text(url) == (
        f"https://api.weatherapi.com/v1/forecast.json?key={REDACTED}&q=London&days=3"
    )


def test_openweather_appid_redacted() -> None:
    url = "https://api.openweathermap.org/data/3.0/weather?q=Kyiv&appid=abc&units=metric"
    sanitized = sanitize_text(url)
    assert "abc" not in sanitized
    assert sanitized.endswith("&units=metric")


def test_bearer_token_redacted() -> None:
    sanitized = sanitize_text("Authorization: Bearer abc.def")
    assert "abc.def" not in sanitized
    assert sanitized.startswith(f"Authorization={REDACTED}")


def test_json_formatter_redacts_message() -> None:
    record = logging.LogRecord(
        name="wapp",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Requesting %s",
        args=("https://example.com/current.json?key=topsecret&q=Oslo",),
        exc_info=None,
    )
    event = json.loads(JsonConsoleFormatter().format(record))
    assert event["level"] == "INFO"
    assert event["logger"] == "wapp"
    assert "topsecret" not in event["message"]
    assert event["message"].endswith("&q=Oslo")


def test_setup_logger_attaches_single_stderr_handler() -> None:
    logger = setup_logger("wapp_test_setup", level="INFO")
    again = setup_logger("wapp_test_setup", level="DEBUG")

    assert again is logger
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonConsoleFormatter)
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
