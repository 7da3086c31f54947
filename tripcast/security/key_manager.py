"""Central API key manager.

Every outbound call reads its key through this module instead of calling
os.getenv directly, so keys can be scrubbed from logs and error messages.
"""

from __future__ import annotations

import os
from typing import Optional

from tripcast.security.redact import redact_sensitive
from tripcast.shared.exceptions import KeyMissingError

WEATHER_KEY_NAME = "YANDEX_WEATHER_API_KEY"


class KeyManager:
    """Process-wide key cache."""

    def __init__(self):
        self._keys: dict[str, str] = {}

    def get(self, name: str, *, required: bool = False) -> Optional[str]:
        """Return the cached key, loading it from the environment on first use."""
        value = self._keys.get(name)
        if value is None:
            value = os.getenv(name, "")
            if value:
                self._keys[name] = value
            elif required:
                raise KeyMissingError(name)
            else:
                return None
        return value

    def get_weather_key(self, *, required: bool = False) -> str:
        return self.get(WEATHER_KEY_NAME, required=required) or ""

    @staticmethod
    def redact(value: str) -> str:
        """Keep only the first and last four characters."""
        if not value or len(value) <= 8:
            return "****"
        return value[:4] + "****" + value[-4:]

    def scrub_text(self, text: str) -> str:
        """Erase every known key value from ``text``.

        Pattern redaction runs first so it never rewrites the key markers.
        """
        result = redact_sensitive(str(text) if text is not None else "")
        for name, value in self._keys.items():
            if value and value in result:
                result = result.replace(value, f"[{name}:***REDACTED***]")
        return result

    def has_key(self, name: str) -> bool:
        if name in self._keys:
            return True
        return bool(os.getenv(name, ""))

    def reload(self, name: str) -> None:
        """Force a re-read from the environment (key rotation, tests)."""
        raw = os.getenv(name, "")
        if raw:
            self._keys[name] = raw
        else:
            self._keys.pop(name, None)


_manager: Optional[KeyManager] = None


def get_key_manager() -> KeyManager:
    global _manager
    if _manager is None:
        _manager = KeyManager()
    return _manager
