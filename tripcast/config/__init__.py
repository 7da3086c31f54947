"""Configuration package."""

from tripcast.config.settings import PlannerSettings, load_settings

__all__ = ["PlannerSettings", "load_settings"]
