"""Generate structured content for medicines missing from the label database."""

from __future__ import annotations

import logging

from pill_identifier.llm.openai_client import OpenAIChatClient
from pill_identifier.llm.prompts import FALLBACK_SCHEMA, SYSTEM_PROMPT, build_fallback_prompt
from pill_identifier.models.content import FallbackContent

logger = logging.getLogger(__name__)


class FallbackGenerator:
    """Asks the model for the full content model of a medicine."""

    def __init__(self, client: OpenAIChatClient | None = None) -> None:
        self.client = client or OpenAIChatClient()

    def generate(self, medicine_name: str) -> FallbackContent:
        logger.info("Generating fallback content for %r", medicine_name)
        payload = self.client.complete_json(
            SYSTEM_PROMPT,
            build_fallback_prompt(medicine_name),
            "medicine_info",
            FALLBACK_SCHEMA,
        )
        return FallbackContent.model_validate(payload)
