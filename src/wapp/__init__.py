"""Command-line client for OpenWeatherMap and WeatherAPI.com."""

__version__ = "0.1.0"
