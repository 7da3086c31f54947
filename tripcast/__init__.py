"""tripcast: plan a multi-day trip across locations by weather forecast."""

from tripcast.domain.exceptions import ForecastFetchError, NoTripFoundError, TripPlanningError
from tripcast.domain.models import LocationForecast, TripAssignment, TripItem, TripRequest
from tripcast.domain.planning import ConditionSpecBuilder, TripSearch, search_trip
from tripcast.services.trip_planner import TripPlanner, plan_trip

__version__ = "1.0.0"

__all__ = [
    "ConditionSpecBuilder",
    "ForecastFetchError",
    "LocationForecast",
    "NoTripFoundError",
    "TripAssignment",
    "TripItem",
    "TripPlanner",
    "TripPlanningError",
    "TripRequest",
    "TripSearch",
    "plan_trip",
    "search_trip",
]
