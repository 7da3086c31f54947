"""pytest global fixtures: environment isolation."""

import pytest


@pytest.fixture(autouse=True)
def no_real_apis(monkeypatch):
    """Tests never reach the real weather provider by default."""
    for name in (
        "YANDEX_WEATHER_API_KEY",
        "WEATHER_PROVIDER",
        "WEATHER_BASE_URL",
        "WEATHER_FORECAST_LIMIT",
        "WEATHER_TIMEOUT_SECONDS",
        "TRIP_LOCALE",
        "STRICT_EXTERNAL_DATA",
    ):
        monkeypatch.delenv(name, raising=False)

    from tripcast.security.key_manager import WEATHER_KEY_NAME, get_key_manager

    get_key_manager().reload(WEATHER_KEY_NAME)
    yield
    get_key_manager().reload(WEATHER_KEY_NAME)
