"""Localized user-facing messages keyed by failure kind."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from tripcast.domain.enums import FailureKind

DEFAULT_LOCALE = "ru"

_MESSAGES: dict[str, dict[FailureKind, str]] = {
    "ru": {
        FailureKind.TRIP_NOT_FOUND: "Не могу построить маршрут!",
        FailureKind.FORECAST_FETCH_FAILED: "Ошибка при получении данных о погоде из Яндекс.Погода: ",
    },
    "en": {
        FailureKind.TRIP_NOT_FOUND: "Can't generate a trip.",
        FailureKind.FORECAST_FETCH_FAILED: "Failed to get weather from Yandex.Weather: ",
    },
}


@runtime_checkable
class MessageCatalog(Protocol):
    def get(self, kind: FailureKind) -> str: ...


class DictMessageCatalog:
    """Catalog backed by per-locale dictionaries.

    Unknown locales fall back to ``fallback_locale``; unknown kinds fall back
    to the kind value itself.
    """

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        *,
        tables: Optional[Mapping[str, Mapping[FailureKind, str]]] = None,
        fallback_locale: str = DEFAULT_LOCALE,
    ):
        self._tables = tables if tables is not None else _MESSAGES
        self._fallback = fallback_locale
        self.locale = locale if locale in self._tables else fallback_locale

    def get(self, kind: FailureKind) -> str:
        table = self._tables.get(self.locale) or self._tables.get(self._fallback) or {}
        return table.get(kind, kind.value)


def available_locales() -> list[str]:
    return sorted(_MESSAGES)


def get_catalog(locale: Optional[str] = None) -> DictMessageCatalog:
    return DictMessageCatalog((locale or DEFAULT_LOCALE).strip().lower())


__all__ = ["DEFAULT_LOCALE", "MessageCatalog", "DictMessageCatalog", "available_locales", "get_catalog"]
