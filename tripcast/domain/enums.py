"""Domain enums."""

from enum import Enum


class Condition(str, Enum):
    """Daytime condition codes reported by Yandex.Weather."""

    CLEAR = "clear"
    PARTLY_CLOUDY = "partly-cloudy"
    CLOUDY = "cloudy"
    OVERCAST = "overcast"
    DRIZZLE = "drizzle"
    LIGHT_RAIN = "light-rain"
    RAIN = "rain"
    MODERATE_RAIN = "moderate-rain"
    HEAVY_RAIN = "heavy-rain"
    CONTINUOUS_HEAVY_RAIN = "continuous-heavy-rain"
    SHOWERS = "showers"
    WET_SNOW = "wet-snow"
    LIGHT_SNOW = "light-snow"
    SNOW = "snow"
    SNOW_SHOWERS = "snow-showers"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    THUNDERSTORM_WITH_RAIN = "thunderstorm-with-rain"
    THUNDERSTORM_WITH_HAIL = "thunderstorm-with-hail"


class FailureKind(str, Enum):
    TRIP_NOT_FOUND = "trip_not_found"
    FORECAST_FETCH_FAILED = "forecast_fetch_failed"


class WeatherProvider(str, Enum):
    YANDEX = "yandex"
    MOCK = "mock"
