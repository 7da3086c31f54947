"""FastAPI application."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from tripcast.adapters.tool_factory import describe_active_tools, get_forecast_fetcher
from tripcast.api.schemas import ErrorResponse, HealthResponse, PlanRequest, PlanResponse, TripItemResponse
from tripcast.config.settings import load_settings
from tripcast.domain.exceptions import ForecastFetchError, NoTripFoundError, TripPlanningError
from tripcast.i18n.messages import get_catalog
from tripcast.services.trip_planner import TripPlanner
from tripcast.shared.exceptions import ToolError

_api_logger = logging.getLogger("tripcast.api")

load_dotenv()

app = FastAPI(
    title="tripcast",
    version="1.0.0",
    docs_url="/docs" if os.getenv("ENABLE_DOCS", "false").lower() == "true" else None,
    redoc_url=None,
)

_STATUS_BY_ERROR: dict[type[TripPlanningError], int] = {
    NoTripFoundError: 422,
    ForecastFetchError: 502,
}


def _error_response(exc: TripPlanningError) -> JSONResponse:
    body = ErrorResponse(kind=exc.kind.value, message=str(exc))
    return JSONResponse(status_code=_STATUS_BY_ERROR.get(type(exc), 500), content=body.model_dump())


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(weather_provider=describe_active_tools()["weather"])


@app.post("/plan", response_model=PlanResponse, responses={422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}})
async def plan(req: PlanRequest):
    settings = load_settings()
    try:
        fetcher = get_forecast_fetcher(settings)
    except ToolError as exc:
        _api_logger.warning("Weather provider unavailable: %s", exc)
        return JSONResponse(status_code=503, content={"status": "error", "kind": "provider_unavailable", "message": str(exc)})

    planner = TripPlanner(req.location_ids, fetcher=fetcher, catalog=get_catalog(req.locale or settings.locale))
    for segment in req.segments:
        if segment.kind == "sunny":
            planner.sunny(segment.days)
        else:
            planner.cloudy(segment.days)
    planner.max(req.max_days)

    try:
        trip = await planner.build()
    except TripPlanningError as exc:
        _api_logger.info("Planning failed (%s) for locations %s", exc.kind.value, req.location_ids)
        return _error_response(exc)

    return PlanResponse(trip=[TripItemResponse(location_id=item.location_id, day=item.day) for item in trip])
