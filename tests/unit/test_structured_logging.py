"""StructuredLogger tests."""

import io
import json

from tripcast.infrastructure.logging import StructuredLogger, get_logger


def _events(output: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in output.getvalue().splitlines()]


def test_events_carry_trace_id_and_duration():
    output = io.StringIO()
    logger = StructuredLogger(trace_id="abc", output=output)

    logger.fetch_start(213)
    logger.fetch_end(213, days=7)
    logger.search_start(locations=1, trip_days=3)
    logger.search_end(found=False, nodes_explored=4)

    events = _events(output)
    assert [e["event"] for e in events] == ["fetch_start", "fetch_end", "search_start", "search_end"]
    assert all(e["trace_id"] == "abc" for e in events)
    assert events[1]["days"] == 7
    assert events[1]["duration_ms"] >= 0
    assert events[3]["nodes_explored"] == 4


def test_error_messages_are_scrubbed(monkeypatch):
    monkeypatch.setenv("YANDEX_WEATHER_API_KEY", "TEST_FAKE_SECRET")
    from tripcast.security.key_manager import get_key_manager

    get_key_manager().reload("YANDEX_WEATHER_API_KEY")
    output = io.StringIO()

    StructuredLogger(output=output).error("fetch", "rejected key TEST_FAKE_SECRET")

    assert "TEST_FAKE_SECRET" not in output.getvalue()
    assert _events(output)[0]["error"] == "rejected key [YANDEX_WEATHER_API_KEY:***REDACTED***]"
    assert _events(output)[0]["stage"] == "fetch"


def test_get_logger_reuses_instance_per_trace():
    assert get_logger("t-1") is get_logger("t-1")
    assert get_logger("t-2").trace_id == "t-2"
