"""Request/response models for the public API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from pill_identifier.config import settings
from pill_identifier.models.blocks import TextBlock
from pill_identifier.models.content import DataSource, MedicineContent
from pill_identifier.presentation import MedicineCard


class MedicineResponse(BaseModel):
    """Content, its rendered card, and any non-fatal translation error."""

    medicine_name: str
    source: DataSource
    language: str
    content: Dict[str, Any]
    card: MedicineCard
    translation_error: Optional[str] = None

    @classmethod
    def build(
        cls,
        content: MedicineContent,
        card: MedicineCard,
        translation_error: Optional[str] = None,
    ) -> "MedicineResponse":
        return cls(
            medicine_name=content.name,
            source=content.source,
            language=content.language,
            content=content.to_tree(),
            card=card,
            translation_error=translation_error,
        )


class TranslateRequest(BaseModel):
    """A content tree to translate."""

    content: Dict[str, Any]
    source: DataSource
    language: str = Field(default_factory=lambda: settings.native_language)
    target_language: str = Field(..., min_length=2)


class TranslateResponse(BaseModel):
    language: str
    content: Dict[str, Any]


class FormatRequest(BaseModel):
    """Raw field text, either a single string or a list of paragraphs."""

    content: Union[str, List[str], None] = None


class FormatResponse(BaseModel):
    blocks: List[TextBlock]


class LanguageOption(BaseModel):
    code: str
    name: str
