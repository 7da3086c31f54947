"""Message catalogs."""

from tripcast.i18n.messages import DEFAULT_LOCALE, DictMessageCatalog, MessageCatalog, get_catalog

__all__ = ["DEFAULT_LOCALE", "DictMessageCatalog", "MessageCatalog", "get_catalog"]
