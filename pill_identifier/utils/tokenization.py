"""Helpers for counting and clipping tokens with operator-controlled fallback."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

import tiktoken

from pill_identifier.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_cl100k_encoding() -> Optional[tiktoken.Encoding]:
    """Load the OpenAI tokenizer, or None when the whitespace fallback is allowed."""
    try:
        return tiktoken.get_encoding("cl100k_base")
    except Exception as exc:
        if not settings.allow_tiktoken_fallback:
            raise RuntimeError(
                f"Failed to load tiktoken 'cl100k_base': {exc}. "
                "Set ALLOW_TIKTOKEN_FALLBACK=1 to allow whitespace token counts."
            ) from exc
        logger.warning(
            "Failed to load tiktoken 'cl100k_base' (%s). Proceeding with whitespace "
            "token approximation because ALLOW_TIKTOKEN_FALLBACK=1.",
            exc,
        )
        return None


def count_tokens(text: str, encoding: Optional[tiktoken.Encoding]) -> int:
    """Count tokens using tiktoken if available, otherwise whitespace approximation."""
    if encoding:
        return len(encoding.encode(text))
    return len(text.split())


def clip_to_tokens(text: str, max_tokens: int, encoding: Optional[tiktoken.Encoding]) -> str:
    """Return text cut down to at most max_tokens tokens."""
    if max_tokens <= 0 or count_tokens(text, encoding) <= max_tokens:
        return text
    if encoding:
        return encoding.decode(encoding.encode(text)[:max_tokens]).rstrip()
    return " ".join(text.split()[:max_tokens])
