"""In-memory forecast fetcher for offline runs and tests."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from tripcast.domain.exceptions import ForecastFetchError
from tripcast.domain.models import LocationForecast

# Yandex geoids: Moscow, Saint Petersburg, Yekaterinburg, Kazan.
DEMO_FORECASTS: dict[int, tuple[str, ...]] = {
    213: ("clear", "partly-cloudy", "cloudy", "overcast", "light-rain", "clear", "clear"),
    2: ("overcast", "clear", "clear", "partly-cloudy", "cloudy", "cloudy", "rain"),
    54: ("cloudy", "cloudy", "overcast", "clear", "clear", "partly-cloudy", "snow"),
    43: ("partly-cloudy", "clear", "overcast", "cloudy", "clear", "overcast", "cloudy"),
}


class StaticForecastFetcher:
    """Serves forecasts from a table; unknown ids fail like an unreachable provider."""

    def __init__(self, forecasts: Optional[Mapping[int, Sequence[str]]] = None):
        table = DEMO_FORECASTS if forecasts is None else forecasts
        self._forecasts = {int(k): tuple(v) for k, v in table.items()}
        self.calls: list[int] = []

    async def fetch(self, location_id: int) -> LocationForecast:
        self.calls.append(location_id)
        conditions = self._forecasts.get(location_id)
        if conditions is None:
            raise ForecastFetchError(location_id, f"no forecast for location {location_id}")
        return LocationForecast(location_id=location_id, daily_conditions=conditions)
