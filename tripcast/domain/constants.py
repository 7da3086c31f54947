"""Domain constants."""

from tripcast.domain.enums import Condition

# Yandex.Weather has no single "sunny" code; clear and partly-cloudy both count.
SUNNY_CONDITIONS: frozenset[str] = frozenset({Condition.CLEAR.value, Condition.PARTLY_CLOUDY.value})
CLOUDY_CONDITIONS: frozenset[str] = frozenset({Condition.CLOUDY.value, Condition.OVERCAST.value})

FORECAST_LIMIT_DAYS = 7
