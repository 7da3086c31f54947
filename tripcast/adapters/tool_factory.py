"""Concrete fetcher selection and wiring."""

from __future__ import annotations

import logging
from typing import Optional

from tripcast.adapters.weather.mock import StaticForecastFetcher
from tripcast.adapters.weather.real import YandexForecastFetcher
from tripcast.config.settings import PlannerSettings, load_settings
from tripcast.domain.enums import WeatherProvider
from tripcast.security.key_manager import WEATHER_KEY_NAME, get_key_manager
from tripcast.shared.exceptions import ToolError
from tripcast.tools.interfaces import ForecastFetcher

_logger = logging.getLogger("tripcast.tools")


def get_forecast_fetcher(settings: Optional[PlannerSettings] = None) -> ForecastFetcher:
    settings = settings or load_settings()
    has_key = get_key_manager().has_key(WEATHER_KEY_NAME)

    if settings.weather_provider == WeatherProvider.YANDEX:
        if settings.strict_external_data and not has_key:
            raise ToolError("weather", f"STRICT_EXTERNAL_DATA=true requires {WEATHER_KEY_NAME}")
        return YandexForecastFetcher(
            base_url=settings.weather_base_url,
            limit=settings.forecast_limit,
            timeout=settings.timeout_seconds,
        )

    if settings.strict_external_data:
        raise ToolError("weather", "STRICT_EXTERNAL_DATA=true forbids the mock weather provider")
    _logger.info("Using static demo forecasts (no %s configured)", WEATHER_KEY_NAME)
    return StaticForecastFetcher()


def describe_active_tools(settings: Optional[PlannerSettings] = None) -> dict[str, str]:
    settings = settings or load_settings()
    return {"weather": settings.weather_provider.value}


__all__ = ["get_forecast_fetcher", "describe_active_tools"]
