"""Backtracking trip search.

Walks trip days in order and, for each day, tries candidate locations in the
order they were given. A location is admissible on a day when its forecast
matches the accepted condition set, its current run is below the cap, and it
either has never been used or occupied the previous day. Run counters are only
restored by backtracking, so a location whose run was closed by another
location stays inadmissible for the rest of the trip: each location contributes
at most one contiguous run.

The search keeps an explicit frame per day instead of recursing, so trip length
is not bounded by the interpreter recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from tripcast.domain.exceptions import NoTripFoundError
from tripcast.domain.models import LocationForecast, TripAssignment, TripItem, TripRequest


@dataclass
class _Frame:
    cursor: int = 0
    placed_id: Optional[int] = None
    saved_run: int = 0


@dataclass
class _SearchState:
    trip: list[TripItem] = field(default_factory=list)
    runs: dict[int, int] = field(default_factory=dict)

    def is_continuing(self, location_id: int) -> bool:
        return bool(self.trip) and self.trip[-1].location_id == location_id

    def place(self, frame: _Frame, location_id: int, day_index: int) -> None:
        run = self.runs.get(location_id, 0)
        frame.placed_id = location_id
        frame.saved_run = run
        self.runs[location_id] = run + 1
        self.trip.append(TripItem(location_id=location_id, day=day_index + 1))

    def undo(self, frame: _Frame) -> None:
        self.runs[frame.placed_id] = frame.saved_run
        self.trip.pop()
        frame.placed_id = None


class TripSearch:
    """First-found (not optimal) assignment of one location per trip day."""

    def __init__(self, forecasts: Sequence[LocationForecast], request: TripRequest):
        self._forecasts = list(forecasts)
        self._request = request
        self.nodes_explored = 0

    def _admissible(self, state: _SearchState, forecast: LocationForecast, day_index: int) -> bool:
        if not self._request.accepts(day_index, forecast.condition_on(day_index)):
            return False
        run = state.runs.get(forecast.location_id, 0)
        if not self._request.allows_run(run):
            return False
        return run == 0 or state.is_continuing(forecast.location_id)

    def run(self) -> TripAssignment:
        trip_length = self._request.trip_length
        if trip_length == 0 or not self._forecasts:
            raise NoTripFoundError()

        state = _SearchState()
        frames: list[_Frame] = [_Frame()]

        while frames:
            frame = frames[-1]
            day_index = len(frames) - 1
            if frame.placed_id is not None:
                # Everything below this day failed; try the next candidate.
                state.undo(frame)

            while frame.cursor < len(self._forecasts):
                forecast = self._forecasts[frame.cursor]
                frame.cursor += 1
                if self._admissible(state, forecast, day_index):
                    state.place(frame, forecast.location_id, day_index)
                    self.nodes_explored += 1
                    break

            if frame.placed_id is None:
                frames.pop()
                continue

            if len(state.trip) == trip_length:
                return list(state.trip)
            frames.append(_Frame())

        raise NoTripFoundError()


def search_trip(forecasts: Sequence[LocationForecast], request: TripRequest) -> TripAssignment:
    return TripSearch(forecasts, request).run()


__all__ = ["TripSearch", "search_trip"]
