"""UI string tables."""

from .locales import LANGUAGES, LocaleTable, get_locale_table

__all__ = ["LANGUAGES", "LocaleTable", "get_locale_table"]
