"""API request/response models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class Segment(BaseModel):
    kind: Literal["sunny", "cloudy"] = Field(description="Weather required for this block of days")
    days: int = Field(ge=0, le=31)


class PlanRequest(BaseModel):
    location_ids: list[int] = Field(min_length=1, max_length=50, description="Candidate geoids, in priority order")
    segments: list[Segment] = Field(min_length=1)
    max_days: Optional[int] = Field(default=None, ge=1, description="Cap on consecutive days per location")
    locale: Optional[str] = Field(default=None, max_length=8)


class TripItemResponse(BaseModel):
    location_id: int
    day: int


class PlanResponse(BaseModel):
    status: str = Field(default="done")
    trip: list[TripItemResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    status: str = Field(default="error")
    kind: str
    message: str


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
    weather_provider: str
