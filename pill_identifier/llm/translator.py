"""Batch translation of ordered strings."""

from __future__ import annotations

import logging
from typing import List, Sequence

from pill_identifier.errors import TranslationFailure
from pill_identifier.i18n.locales import LocaleTable, get_locale_table
from pill_identifier.llm.openai_client import OpenAIChatClient
from pill_identifier.llm.prompts import (
    TRANSLATION_SCHEMA,
    TRANSLATION_SYSTEM_PROMPT,
    build_translation_prompt,
)

logger = logging.getLogger(__name__)


class TextTranslator:
    """Translates a list of texts in one request, keeping order and length."""

    def __init__(
        self,
        client: OpenAIChatClient | None = None,
        locales: LocaleTable | None = None,
    ) -> None:
        self.client = client or OpenAIChatClient()
        self.locales = locales or get_locale_table()

    def translate_texts(self, texts: Sequence[str], target_language: str) -> List[str]:
        language_name = self.locales.language_name(target_language)
        prompt = build_translation_prompt(texts, language_name)
        try:
            payload = self.client.complete_json(
                TRANSLATION_SYSTEM_PROMPT,
                prompt,
                "translations",
                TRANSLATION_SCHEMA,
                temperature=0,
                max_output_tokens=4000,
            )
        except Exception as exc:
            logger.error("Translation to %s failed: %s", target_language, exc)
            raise TranslationFailure("Failed to translate the medicine information.") from exc
        translations = payload.get("translations") if isinstance(payload, dict) else payload
        if not isinstance(translations, list):
            raise TranslationFailure("Translation reply did not contain a list of texts.")
        return [str(item) for item in translations]
