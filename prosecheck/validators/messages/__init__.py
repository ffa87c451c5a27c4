"""Locale-keyed message templates for findings."""

from prosecheck.validators.messages.loader import MessageCatalog, get_all_locales, load_messages

__all__ = ["MessageCatalog", "get_all_locales", "load_messages"]
