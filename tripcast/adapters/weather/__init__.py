"""Weather adapters."""

from tripcast.adapters.weather.mock import StaticForecastFetcher
from tripcast.adapters.weather.real import YandexForecastFetcher, parse_forecast

__all__ = ["StaticForecastFetcher", "YandexForecastFetcher", "parse_forecast"]
