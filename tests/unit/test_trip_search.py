"""Backtracking trip search tests."""

from __future__ import annotations

import itertools
import random

import pytest

from tripcast.domain.exceptions import NoTripFoundError
from tripcast.domain.models import LocationForecast, TripItem, TripRequest
from tripcast.domain.planning import ConditionSpecBuilder, TripSearch, search_trip

A, B, C = 1, 2, 3


def _fc(location_id: int, *conditions: str) -> LocationForecast:
    return LocationForecast(location_id=location_id, daily_conditions=conditions)


def _ids(trip) -> list[int]:
    return [item.location_id for item in trip]


def _is_valid(sequence, forecasts_by_id, request: TripRequest) -> bool:
    """Check a full assignment against the trip rules directly."""
    runs: dict[int, int] = {}
    previous = None
    for day_index, location_id in enumerate(sequence):
        condition = forecasts_by_id[location_id].condition_on(day_index)
        if not request.accepts(day_index, condition):
            return False
        if location_id != previous:
            if location_id in runs:
                return False
            runs[location_id] = 0
        runs[location_id] += 1
        if request.max_consecutive_days is not None and runs[location_id] > request.max_consecutive_days:
            return False
        previous = location_id
    return True


def test_sunny_then_cloudy_keeps_first_admissible_location():
    forecasts = [_fc(A, "clear", "clear", "cloudy"), _fc(B, "cloudy", "clear", "clear")]
    request = ConditionSpecBuilder().sunny(2).cloudy(1).build()

    trip = search_trip(forecasts, request)

    assert trip == [TripItem(location_id=A, day=1), TripItem(location_id=A, day=2), TripItem(location_id=A, day=3)]


def test_cap_switches_location_when_another_can_take_over():
    forecasts = [_fc(A, "clear", "clear", "cloudy"), _fc(B, "cloudy", "clear", "overcast")]
    request = ConditionSpecBuilder().sunny(2).cloudy(1).set_max_consecutive_days(2).build()

    assert _ids(search_trip(forecasts, request)) == [A, A, B]


def test_cap_of_one_with_single_location_fails():
    request = ConditionSpecBuilder().sunny(3).set_max_consecutive_days(1).build()

    with pytest.raises(NoTripFoundError):
        search_trip([_fc(A, "clear", "clear", "clear")], request)


def test_required_condition_never_reported_fails():
    forecasts = [_fc(A, "clear", "rain", "clear"), _fc(B, "clear", "snow", "clear")]
    request = ConditionSpecBuilder().sunny(3).build()

    with pytest.raises(NoTripFoundError):
        search_trip(forecasts, request)


def test_closed_run_is_never_reopened_even_under_cap():
    # A, B, A would satisfy the weather, but A's run closed on day 2.
    forecasts = [_fc(A, "clear", "rain", "clear"), _fc(B, "rain", "clear", "rain")]
    request = ConditionSpecBuilder().sunny(3).build()

    with pytest.raises(NoTripFoundError):
        search_trip(forecasts, request)


def test_dead_end_backtracks_to_earlier_day():
    forecasts = [_fc(A, "clear", "rain", "clear"), _fc(B, "clear", "clear", "rain")]
    request = ConditionSpecBuilder().sunny(3).build()

    search = TripSearch(forecasts, request)
    trip = search.run()

    assert _ids(trip) == [B, B, A]
    assert [item.day for item in trip] == [1, 2, 3]
    # A@1, B@2 dead-ends, then B@1, B@2, A@3.
    assert search.nodes_explored == 5


def test_short_forecast_is_a_mismatch_not_an_error():
    forecasts = [_fc(A, "clear", "clear"), _fc(B, "clear", "clear", "clear")]
    request = ConditionSpecBuilder().sunny(3).build()

    assert _ids(search_trip(forecasts, request)) == [A, A, B]

    with pytest.raises(NoTripFoundError):
        search_trip([_fc(A, "clear", "clear")], request)


def test_unknown_condition_codes_simply_do_not_match():
    request = ConditionSpecBuilder().cloudy(1).build()

    with pytest.raises(NoTripFoundError):
        search_trip([_fc(A, "thunderstorm-with-hail")], request)


def test_empty_request_or_no_locations_fails():
    with pytest.raises(NoTripFoundError):
        search_trip([_fc(A, "clear")], ConditionSpecBuilder().build())
    with pytest.raises(NoTripFoundError):
        search_trip([], ConditionSpecBuilder().sunny(1).build())


def test_non_positive_cap_admits_nothing():
    request = ConditionSpecBuilder().sunny(1).set_max_consecutive_days(0).build()

    with pytest.raises(NoTripFoundError):
        search_trip([_fc(A, "clear")], request)


def test_search_is_deterministic():
    forecasts = [_fc(A, "clear", "cloudy", "clear"), _fc(B, "partly-cloudy", "overcast", "clear")]
    request = ConditionSpecBuilder().sunny(1).cloudy(1).sunny(1).set_max_consecutive_days(2).build()

    assert search_trip(forecasts, request) == search_trip(forecasts, request)


def test_long_trip_does_not_hit_recursion_limit():
    days = 5000
    request = ConditionSpecBuilder().sunny(days).build()

    trip = search_trip([_fc(A, *(["clear"] * days))], request)

    assert len(trip) == days
    assert trip[-1] == TripItem(location_id=A, day=days)


def test_search_matches_exhaustive_enumeration():
    rng = random.Random(20261018)
    codes = ["clear", "partly-cloudy", "cloudy", "overcast", "rain"]

    for _ in range(200):
        location_ids = [10, 20, 30]
        days = rng.randint(1, 5)
        forecasts = [
            _fc(location_id, *(rng.choice(codes) for _ in range(rng.randint(days - 1, days) or 1)))
            for location_id in location_ids
        ]
        builder = ConditionSpecBuilder()
        for _ in range(days):
            if rng.random() < 0.5:
                builder.sunny(1)
            else:
                builder.cloudy(1)
        builder.set_max_consecutive_days(rng.choice([None, 1, 2, 3]))
        request = builder.build()

        by_id = {forecast.location_id: forecast for forecast in forecasts}
        expected = next(
            (seq for seq in itertools.product(location_ids, repeat=days) if _is_valid(seq, by_id, request)),
            None,
        )

        if expected is None:
            with pytest.raises(NoTripFoundError):
                search_trip(forecasts, request)
            continue

        trip = search_trip(forecasts, request)
        assert _ids(trip) == list(expected)
        assert [item.day for item in trip] == list(range(1, days + 1))
        assert len(trip) == request.trip_length
