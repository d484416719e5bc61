"""Exception taxonomy for the identification and content pipeline."""

from __future__ import annotations


class PillIdentifierError(Exception):
    """Base class for all errors raised by the pipeline."""


class NotIdentifiable(PillIdentifierError):
    """No medicine name could be obtained from the input."""


class LookupFailure(PillIdentifierError):
    """Neither the regulatory source nor the generative fallback produced content."""


class SummarizationFailure(PillIdentifierError):
    """The summarization capability failed on regulatory label text."""


class TranslationFailure(PillIdentifierError):
    """The translation capability failed."""


class TranslationMismatch(TranslationFailure):
    """The translated batch does not line up with the request."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(
            f"Translation returned {received} items for a batch of {expected}."
        )
        self.expected = expected
        self.received = received


class RegulatoryLookupError(PillIdentifierError):
    """The regulatory label database could not be queried."""


class LLMResponseError(PillIdentifierError):
    """The model reply was empty or did not match the requested JSON shape."""
