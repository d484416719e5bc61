"""Typed models shared across the application."""

from .blocks import ListBlock, ParagraphBlock, TextBlock
from .content import (
    ContentField,
    DataSource,
    EmptyText,
    FallbackContent,
    MedicineContent,
    MultipleText,
    PlainSideEffects,
    SideEffectEntry,
    SideEffectsField,
    SingleText,
    StructuredSideEffects,
    SummarizedLabel,
    TranslationUnit,
)
from .regulatory import FdaLabel, FdaResult, OpenFdaNames

__all__ = [
    "ContentField",
    "DataSource",
    "EmptyText",
    "FallbackContent",
    "FdaLabel",
    "FdaResult",
    "ListBlock",
    "MedicineContent",
    "MultipleText",
    "OpenFdaNames",
    "ParagraphBlock",
    "PlainSideEffects",
    "SideEffectEntry",
    "SideEffectsField",
    "SingleText",
    "StructuredSideEffects",
    "SummarizedLabel",
    "TextBlock",
    "TranslationUnit",
]
