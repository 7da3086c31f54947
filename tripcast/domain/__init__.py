"""Domain package exports."""

from tripcast.domain.constants import CLOUDY_CONDITIONS, FORECAST_LIMIT_DAYS, SUNNY_CONDITIONS
from tripcast.domain.enums import Condition, FailureKind, WeatherProvider
from tripcast.domain.exceptions import (
    DomainError,
    ForecastFetchError,
    NoTripFoundError,
    TripPlanningError,
)
from tripcast.domain.models import LocationForecast, TripAssignment, TripItem, TripRequest

__all__ = [
    "Condition",
    "FailureKind",
    "WeatherProvider",
    "DomainError",
    "TripPlanningError",
    "ForecastFetchError",
    "NoTripFoundError",
    "LocationForecast",
    "TripRequest",
    "TripItem",
    "TripAssignment",
    "SUNNY_CONDITIONS",
    "CLOUDY_CONDITIONS",
    "FORECAST_LIMIT_DAYS",
]
