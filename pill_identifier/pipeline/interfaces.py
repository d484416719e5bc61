"""Contracts for the external capabilities the pipeline consumes."""

from __future__ import annotations

from typing import List, Mapping, Optional, Protocol, Sequence

from pill_identifier.models.content import FallbackContent, SummarizedLabel
from pill_identifier.models.regulatory import FdaResult


class IdentificationCapability(Protocol):
    def identify(self, image_bytes: bytes, mime_type: str) -> str: ...


class RegulatoryLookup(Protocol):
    def lookup(self, medicine_name: str) -> Optional[FdaResult]: ...


class SummarizationCapability(Protocol):
    def summarize(self, fields: Mapping[str, str]) -> SummarizedLabel: ...


class FallbackCapability(Protocol):
    def generate(self, medicine_name: str) -> FallbackContent: ...


class TranslationCapability(Protocol):
    def translate_texts(self, texts: Sequence[str], target_language: str) -> List[str]: ...
