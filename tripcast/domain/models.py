"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationForecast(BaseModel):
    """Normalized forecast: one daytime condition code per forecast day."""

    model_config = ConfigDict(frozen=True)

    location_id: int
    daily_conditions: tuple[str, ...] = Field(default_factory=tuple)

    def condition_on(self, day_index: int) -> Optional[str]:
        if 0 <= day_index < len(self.daily_conditions):
            return self.daily_conditions[day_index]
        return None


class TripRequest(BaseModel):
    """Accepted condition set per trip day plus the consecutive-use cap."""

    model_config = ConfigDict(frozen=True)

    condition_sequence: tuple[frozenset[str], ...] = Field(default_factory=tuple)
    max_consecutive_days: Optional[int] = Field(default=None, description="None means unbounded")

    @property
    def trip_length(self) -> int:
        return len(self.condition_sequence)

    def accepts(self, day_index: int, condition: Optional[str]) -> bool:
        return condition is not None and condition in self.condition_sequence[day_index]

    def allows_run(self, run_length: int) -> bool:
        return self.max_consecutive_days is None or run_length < self.max_consecutive_days


class TripItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    location_id: int
    day: int = Field(ge=1, description="1-based trip day")


TripAssignment = list[TripItem]
