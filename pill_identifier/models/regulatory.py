"""Shapes of the openFDA drug label API response."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OpenFdaNames(BaseModel):
    """Harmonized names attached to a label."""

    model_config = ConfigDict(extra="ignore")

    brand_name: Optional[List[str]] = None
    generic_name: Optional[List[str]] = None


class FdaLabel(BaseModel):
    """One label entry; every section is a list of raw text paragraphs."""

    model_config = ConfigDict(extra="ignore")

    active_ingredient: Optional[List[str]] = None
    purpose: Optional[List[str]] = None
    warnings: Optional[List[str]] = None
    dosage_and_administration: Optional[List[str]] = None
    adverse_reactions: Optional[List[str]] = None
    drug_interactions: Optional[List[str]] = None
    storage_and_handling: Optional[List[str]] = None
    openfda: OpenFdaNames = Field(default_factory=OpenFdaNames)


class FdaResult(BaseModel):
    """Envelope returned by the label endpoint."""

    model_config = ConfigDict(extra="ignore")

    results: List[FdaLabel] = Field(default_factory=list)

    def first(self) -> Optional[FdaLabel]:
        return self.results[0] if self.results else None
