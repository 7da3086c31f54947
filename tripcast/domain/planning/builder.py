"""Accumulates per-day weather requirements into a TripRequest."""

from __future__ import annotations

from typing import Iterable, Optional

from tripcast.domain.constants import CLOUDY_CONDITIONS, SUNNY_CONDITIONS
from tripcast.domain.models import TripRequest


class ConditionSpecBuilder:
    """Chained configuration: every call returns the builder itself.

    Nothing is validated here; a sequence longer than the forecasts simply
    leaves the extra days without admissible locations during search.
    """

    def __init__(self) -> None:
        self._conditions: list[frozenset[str]] = []
        self._max_days: Optional[int] = None

    def require_days(self, conditions: Iterable[str], count: int) -> "ConditionSpecBuilder":
        accepted = frozenset(conditions)
        self._conditions.extend(accepted for _ in range(max(0, count)))
        return self

    def sunny(self, days: int) -> "ConditionSpecBuilder":
        return self.require_days(SUNNY_CONDITIONS, days)

    def cloudy(self, days: int) -> "ConditionSpecBuilder":
        return self.require_days(CLOUDY_CONDITIONS, days)

    def set_max_consecutive_days(self, days: Optional[int]) -> "ConditionSpecBuilder":
        self._max_days = days
        return self

    def build(self) -> TripRequest:
        return TripRequest(
            condition_sequence=tuple(self._conditions),
            max_consecutive_days=self._max_days,
        )


__all__ = ["ConditionSpecBuilder"]
