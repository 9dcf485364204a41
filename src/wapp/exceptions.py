"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class WeatherProviderError(Exception):
    """Raised when weather provider construction or requests fail."""


class MissingCredentialError(WeatherProviderError):
    """Raised when a provider's required credential variable is not set."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"Missing required environment variable {variable}.")
        self.variable = variable


class UnsupportedProviderError(WeatherProviderError):
    """Raised when the configured provider name matches no known provider."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported provider: {name}")
        self.name = name


class UnsupportedRequestKindError(WeatherProviderError):
    """Raised when a fetch is asked for a data kind outside now/forecast/tomorrow."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown data type: {kind}")
        self.kind = kind


class TransportError(WeatherProviderError):
    """Raised when the HTTP request or reading its body fails."""
