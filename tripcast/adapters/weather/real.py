"""Yandex.Weather forecast adapter."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from tripcast.domain.constants import FORECAST_LIMIT_DAYS
from tripcast.domain.exceptions import ForecastFetchError
from tripcast.domain.models import LocationForecast
from tripcast.security.http_client import AsyncSecureHttpClient
from tripcast.security.key_manager import get_key_manager
from tripcast.shared.exceptions import ToolError

_BASE_URL = "https://api.weather.yandex.ru/v1/forecast"
_KEY_HEADER = "X-Yandex-API-Key"
_logger = logging.getLogger("tripcast.weather")


def _day_condition(day: Any) -> str:
    condition = day["parts"]["day_short"]["condition"]
    if not isinstance(condition, str):
        raise ValueError(f"condition is not a string: {condition!r}")
    return condition


def parse_forecast(payload: Any) -> LocationForecast:
    """Reduce a forecast payload to the locality id and daytime condition per day."""
    try:
        location_id = int(payload["geo_object"]["locality"]["id"])
        conditions = tuple(_day_condition(day) for day in payload["forecasts"])
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise ValueError(f"unexpected forecast payload: {exc!r}") from exc
    return LocationForecast(location_id=location_id, daily_conditions=conditions)


class YandexForecastFetcher:
    """One GET per location; no retry, no cache."""

    def __init__(
        self,
        *,
        base_url: str = _BASE_URL,
        limit: int = FORECAST_LIMIT_DAYS,
        timeout: float = 10.0,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url
        self._limit = limit
        self._api_key = api_key
        self._http = AsyncSecureHttpClient(timeout=timeout, tool_name="yandex_weather", transport=transport)

    async def __aenter__(self) -> "YandexForecastFetcher":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        key = self._api_key or get_key_manager().get_weather_key()
        return {_KEY_HEADER: key} if key else {}

    async def fetch(self, location_id: int) -> LocationForecast:
        params = {"hours": "false", "limit": self._limit, "geoid": location_id}
        try:
            payload = await self._http.get_json(self._base_url, params=params, headers=self._headers())
        except ToolError as exc:
            _logger.warning("Forecast request failed for location %s: %s", location_id, exc)
            raise ForecastFetchError(location_id, str(exc)) from exc

        try:
            return parse_forecast(payload)
        except ValueError as exc:
            _logger.warning("Forecast payload rejected for location %s: %s", location_id, exc)
            raise ForecastFetchError(location_id, str(exc)) from exc
