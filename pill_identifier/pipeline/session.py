"""Display state for one user: original content, shown content and language."""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from pill_identifier.config import settings
from pill_identifier.errors import TranslationFailure
from pill_identifier.i18n.locales import LocaleTable, get_locale_table
from pill_identifier.models.content import MedicineContent
from pill_identifier.pipeline.translator import ContentTranslator

logger = logging.getLogger(__name__)


class TranslationTicket(NamedTuple):
    """Identifies the (content, language) pair a translation was started for."""

    content_id: int
    language: str
    generation: int


class DisplaySession:
    """Keeps the last good content on screen and drops stale translations.

    A translation result is applied only if, when it arrives, the session
    still shows the same original content in the same language it was
    requested for. Newer requests therefore always win over older ones,
    whatever order the results come back in.
    """

    def __init__(
        self,
        language: Optional[str] = None,
        locales: Optional[LocaleTable] = None,
    ) -> None:
        self.locales = locales or get_locale_table()
        self.language = language or settings.native_language
        self.original: Optional[MedicineContent] = None
        self.displayed: Optional[MedicineContent] = None
        self.error: Optional[str] = None
        self.translating = False
        self._generation = 0

    def show(self, content: Optional[MedicineContent]) -> None:
        """Replace the original content; pending translations become stale."""
        self._generation += 1
        self.original = content
        self.displayed = content
        self.error = None
        self.translating = False

    def begin_translation(self, language: str) -> TranslationTicket:
        self._generation += 1
        self.language = language
        self.error = None
        if self.original is not None:
            # Always show the untranslated content until the translation lands.
            self.displayed = self.original
        self.translating = self.original is not None and language != self.original.language
        return TranslationTicket(id(self.original), language, self._generation)

    def is_current(self, ticket: TranslationTicket) -> bool:
        return (
            self.original is not None
            and ticket.content_id == id(self.original)
            and ticket.language == self.language
            and ticket.generation == self._generation
        )

    def complete_translation(
        self, ticket: TranslationTicket, translated: MedicineContent
    ) -> bool:
        if not self.is_current(ticket):
            logger.warning("Discarding stale %s translation", ticket.language)
            return False
        self.displayed = translated
        self.translating = False
        return True

    def fail_translation(self, ticket: TranslationTicket, error: Exception) -> bool:
        if not self.is_current(ticket):
            logger.warning("Ignoring failure of stale %s translation: %s", ticket.language, error)
            return False
        logger.error("Translation to %s failed: %s", ticket.language, error)
        self.error = self.locales.text(self.language, "translationError")
        self.translating = False
        return True

    def translate_to(
        self, language: str, translator: ContentTranslator
    ) -> Optional[MedicineContent]:
        """Select a language and translate the current content into it."""
        ticket = self.begin_translation(language)
        if not self.translating or self.original is None:
            return self.displayed
        try:
            translated = translator.translate(self.original, language)
        except TranslationFailure as exc:
            self.fail_translation(ticket, exc)
        else:
            self.complete_translation(ticket, translated)
        return self.displayed
