"""Rewrite regulatory label sections in plain language."""

from __future__ import annotations

import logging
from typing import Mapping

from pill_identifier.config import settings
from pill_identifier.errors import SummarizationFailure
from pill_identifier.llm.openai_client import OpenAIChatClient
from pill_identifier.llm.prompts import SUMMARY_SCHEMA, SYSTEM_PROMPT, build_summary_prompt
from pill_identifier.models.content import SummarizedLabel
from pill_identifier.utils.tokenization import clip_to_tokens, get_cl100k_encoding

logger = logging.getLogger(__name__)


class LabelSummarizer:
    """Summarizes raw label sections and extracts side-effect chart rows."""

    def __init__(
        self,
        client: OpenAIChatClient | None = None,
        max_field_tokens: int | None = None,
    ) -> None:
        self.client = client or OpenAIChatClient()
        self.max_field_tokens = (
            settings.max_summary_field_tokens if max_field_tokens is None else max_field_tokens
        )

    def summarize(self, fields: Mapping[str, str]) -> SummarizedLabel:
        encoding = get_cl100k_encoding()
        clipped = {
            key: clip_to_tokens(value, self.max_field_tokens, encoding)
            for key, value in fields.items()
        }
        prompt = build_summary_prompt(clipped)
        try:
            payload = self.client.complete_json(
                SYSTEM_PROMPT, prompt, "summarized_label", SUMMARY_SCHEMA
            )
            return SummarizedLabel.model_validate(payload)
        except Exception as exc:
            logger.error("Label summarization failed: %s", exc)
            raise SummarizationFailure(
                "Failed to summarize the medicine information via AI."
            ) from exc
