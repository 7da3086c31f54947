"""Trip planning core: requirement builder and backtracking search."""

from tripcast.domain.planning.builder import ConditionSpecBuilder
from tripcast.domain.planning.search import TripSearch, search_trip

__all__ = ["ConditionSpecBuilder", "TripSearch", "search_trip"]
