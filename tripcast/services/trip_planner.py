"""Trip planning service: concurrent forecast fetch, then backtracking search."""

from __future__ import annotations

import asyncio
import contextlib
from typing import Iterable, Optional, Sequence

from tripcast.config.settings import load_settings
from tripcast.domain.exceptions import ForecastFetchError, NoTripFoundError
from tripcast.domain.models import LocationForecast, TripAssignment, TripRequest
from tripcast.domain.planning.builder import ConditionSpecBuilder
from tripcast.domain.planning.search import TripSearch
from tripcast.i18n.messages import MessageCatalog, get_catalog
from tripcast.infrastructure.logging import StructuredLogger, get_logger
from tripcast.shared.exceptions import ToolError
from tripcast.tools.interfaces import ForecastFetcher


class TripPlanner:
    """Configuration calls chain; ``build()`` is the single unit of work.

    Forecasts are fetched anew on every ``build()``.
    """

    def __init__(
        self,
        location_ids: Sequence[int],
        *,
        fetcher: Optional[ForecastFetcher] = None,
        catalog: Optional[MessageCatalog] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self._location_ids = [int(location_id) for location_id in location_ids]
        self._fetcher = fetcher
        self._catalog = catalog or get_catalog(load_settings().locale)
        self._logger = logger
        self._spec = ConditionSpecBuilder()

    @property
    def location_ids(self) -> list[int]:
        return list(self._location_ids)

    @property
    def request(self) -> TripRequest:
        return self._spec.build()

    def require_days(self, conditions: Iterable[str], count: int) -> "TripPlanner":
        self._spec.require_days(conditions, count)
        return self

    def sunny(self, days: int) -> "TripPlanner":
        self._spec.sunny(days)
        return self

    def cloudy(self, days: int) -> "TripPlanner":
        self._spec.cloudy(days)
        return self

    def max(self, days: Optional[int]) -> "TripPlanner":
        self._spec.set_max_consecutive_days(days)
        return self

    def _get_fetcher(self) -> ForecastFetcher:
        if self._fetcher is None:
            from tripcast.adapters.tool_factory import get_forecast_fetcher

            self._fetcher = get_forecast_fetcher()
        return self._fetcher

    async def _fetch_one(self, fetcher: ForecastFetcher, location_id: int) -> LocationForecast:
        logger = self._logger or get_logger()
        logger.fetch_start(location_id)
        try:
            forecast = await fetcher.fetch(location_id)
        except ToolError as exc:
            raise ForecastFetchError(location_id, str(exc)) from exc
        logger.fetch_end(location_id, days=len(forecast.daily_conditions))
        return forecast

    async def fetch_forecasts(self) -> list[LocationForecast]:
        fetcher = self._get_fetcher()
        if isinstance(fetcher, contextlib.AbstractAsyncContextManager):
            async with fetcher:
                return await self._gather(fetcher)
        return await self._gather(fetcher)

    async def _gather(self, fetcher: ForecastFetcher) -> list[LocationForecast]:
        tasks = [asyncio.create_task(self._fetch_one(fetcher, lid)) for lid in self._location_ids]
        if not tasks:
            return []
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            # One failure fails the whole build; nothing may outlive it.
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        for task in tasks:
            if not task.cancelled() and task.exception() is not None:
                raise task.exception()
        return [task.result() for task in tasks]

    def _prefixed(self, exc: ForecastFetchError) -> ForecastFetchError:
        message = f"{self._catalog.get(exc.kind)}{exc}"
        return ForecastFetchError(exc.location_id, message)

    async def build(self) -> TripAssignment:
        logger = self._logger or get_logger()
        request = self._spec.build()

        try:
            forecasts = await self.fetch_forecasts()
        except ForecastFetchError as exc:
            logger.error("fetch", str(exc), location_id=exc.location_id)
            raise self._prefixed(exc) from exc

        search = TripSearch(forecasts, request)
        logger.search_start(locations=len(forecasts), trip_days=request.trip_length)
        try:
            trip = search.run()
        except NoTripFoundError:
            logger.search_end(found=False, nodes_explored=search.nodes_explored)
            raise NoTripFoundError(self._catalog.get(NoTripFoundError.kind)) from None
        logger.search_end(found=True, nodes_explored=search.nodes_explored)
        return trip


def plan_trip(location_ids: Sequence[int], **kwargs) -> TripPlanner:
    """Factory: planner over the given locations, tried in the given order."""
    return TripPlanner(location_ids, **kwargs)


__all__ = ["TripPlanner", "plan_trip"]
