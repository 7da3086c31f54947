"""Application services."""

from tripcast.services.trip_planner import TripPlanner, plan_trip

__all__ = ["TripPlanner", "plan_trip"]
