"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from tripcast.domain.constants import FORECAST_LIMIT_DAYS
from tripcast.domain.enums import WeatherProvider
from tripcast.i18n.messages import DEFAULT_LOCALE
from tripcast.security.key_manager import WEATHER_KEY_NAME

DEFAULT_WEATHER_BASE_URL = "https://api.weather.yandex.ru/v1/forecast"

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = str(os.getenv(name) or "").strip()
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def strict_external_data_enabled() -> bool:
    return _is_enabled(os.getenv("STRICT_EXTERNAL_DATA"))


def resolve_weather_provider() -> WeatherProvider:
    mode = str(os.getenv("WEATHER_PROVIDER") or "").strip().lower()
    if mode == WeatherProvider.YANDEX.value:
        return WeatherProvider.YANDEX
    if mode == WeatherProvider.MOCK.value:
        return WeatherProvider.MOCK
    if _is_configured(os.getenv(WEATHER_KEY_NAME)) or strict_external_data_enabled():
        return WeatherProvider.YANDEX
    return WeatherProvider.MOCK


class PlannerSettings(BaseModel):
    weather_provider: WeatherProvider = Field(default=WeatherProvider.MOCK)
    weather_base_url: str = Field(default=DEFAULT_WEATHER_BASE_URL)
    forecast_limit: int = Field(default=FORECAST_LIMIT_DAYS, ge=1)
    timeout_seconds: float = Field(default=10.0, gt=0)
    locale: str = Field(default=DEFAULT_LOCALE)
    strict_external_data: bool = Field(default=False)


def load_settings() -> PlannerSettings:
    return PlannerSettings(
        weather_provider=resolve_weather_provider(),
        weather_base_url=str(os.getenv("WEATHER_BASE_URL") or "").strip() or DEFAULT_WEATHER_BASE_URL,
        forecast_limit=max(1, _int_env("WEATHER_FORECAST_LIMIT", FORECAST_LIMIT_DAYS)),
        timeout_seconds=max(0.1, _float_env("WEATHER_TIMEOUT_SECONDS", 10.0)),
        locale=str(os.getenv("TRIP_LOCALE") or "").strip().lower() or DEFAULT_LOCALE,
        strict_external_data=strict_external_data_enabled(),
    )


__all__ = [
    "DEFAULT_WEATHER_BASE_URL",
    "PlannerSettings",
    "load_settings",
    "resolve_weather_provider",
    "strict_external_data_enabled",
]
