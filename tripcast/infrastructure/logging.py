"""Structured logging: JSON lines with secret scrubbing."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


def _get_scrubber():
    """Import KeyManager lazily to avoid an import cycle."""
    try:
        from tripcast.security.key_manager import get_key_manager
        return get_key_manager()
    except ImportError:
        return None


class StructuredLogger:
    """Writes one JSON object per event, scrubbing known keys."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output
        self._timers: dict[str, float] = {}

    def _scrub(self, text: str) -> str:
        km = _get_scrubber()
        if km:
            return km.scrub_text(text)
        return text

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        line = json.dumps(data, ensure_ascii=False, default=str)
        output = self._output if self._output is not None else sys.stderr
        output.write(self._scrub(line) + "\n")
        output.flush()

    def _elapsed_ms(self, timer: str) -> float:
        start = self._timers.pop(timer, time.time())
        return round((time.time() - start) * 1000, 1)

    def fetch_start(self, location_id: int, **extra: Any) -> None:
        self._timers[f"fetch:{location_id}"] = time.time()
        self._emit({"event": "fetch_start", "location_id": location_id, **extra})

    def fetch_end(self, location_id: int, *, days: int = 0, **extra: Any) -> None:
        self._emit({
            "event": "fetch_end",
            "location_id": location_id,
            "days": days,
            "duration_ms": self._elapsed_ms(f"fetch:{location_id}"),
            **extra,
        })

    def search_start(self, *, locations: int, trip_days: int, **extra: Any) -> None:
        self._timers["search"] = time.time()
        self._emit({"event": "search_start", "locations": locations, "trip_days": trip_days, **extra})

    def search_end(self, *, found: bool, nodes_explored: int = 0, **extra: Any) -> None:
        self._emit({
            "event": "search_end",
            "found": found,
            "nodes_explored": nodes_explored,
            "duration_ms": self._elapsed_ms("search"),
            **extra,
        })

    def error(self, stage: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "stage": stage, "error": error, **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger
