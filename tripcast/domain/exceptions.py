"""Domain semantic exceptions."""

from __future__ import annotations

from typing import Optional

from tripcast.domain.enums import FailureKind


class DomainError(Exception):
    """Base domain exception."""


class TripPlanningError(DomainError):
    """A planning run failed; ``kind`` selects the user-facing message."""

    kind: FailureKind

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)


class ForecastFetchError(TripPlanningError):
    """The weather provider was unreachable or returned an unusable response."""

    kind = FailureKind.FORECAST_FETCH_FAILED

    def __init__(self, location_id: Optional[int], message: str = ""):
        self.location_id = location_id
        super().__init__(message)


class NoTripFoundError(TripPlanningError):
    """Every candidate combination was exhausted without a complete trip."""

    kind = FailureKind.TRIP_NOT_FOUND
