"""Tool abstraction protocols."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tripcast.domain.models import LocationForecast


@runtime_checkable
class ForecastFetcher(Protocol):
    async def fetch(self, location_id: int) -> LocationForecast: ...


__all__ = ["ForecastFetcher"]
