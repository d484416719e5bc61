"""Shared fakes for the external capabilities."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from pill_identifier.errors import TranslationFailure
from pill_identifier.models.content import (
    DataSource,
    FallbackContent,
    MedicineContent,
    SummarizedLabel,
)
from pill_identifier.models.regulatory import FdaResult


class FakeRegulatory:
    def __init__(self, result: Optional[FdaResult] = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[str] = []

    def lookup(self, medicine_name: str) -> Optional[FdaResult]:
        self.calls.append(medicine_name)
        if self.error:
            raise self.error
        return self.result


class FakeSummarizer:
    def __init__(self, result: Optional[SummarizedLabel] = None, error: Optional[Exception] = None):
        self.result = result or SummarizedLabel(summary="Summarized.")
        self.error = error
        self.calls: List[Dict[str, str]] = []

    def summarize(self, fields):
        self.calls.append(dict(fields))
        if self.error:
            raise self.error
        return self.result


class FakeFallback:
    def __init__(self, result: Optional[FallbackContent] = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[str] = []

    def generate(self, medicine_name: str) -> FallbackContent:
        self.calls.append(medicine_name)
        if self.error:
            raise self.error
        return self.result


class FakeIdentifier:
    def __init__(self, name: str = "Tylenol", error: Optional[Exception] = None):
        self.name = name
        self.error = error
        self.calls: List[tuple] = []

    def identify(self, image_bytes: bytes, mime_type: str) -> str:
        self.calls.append((image_bytes, mime_type))
        if self.error:
            raise self.error
        return self.name


class FakeTranslation:
    """Prefixes every text with the language code; can be told to misbehave."""

    def __init__(self, drop: int = 0, extra: int = 0, error: Optional[Exception] = None):
        self.drop = drop
        self.extra = extra
        self.error = error
        self.calls: List[tuple] = []

    def translate_texts(self, texts, target_language: str) -> List[str]:
        self.calls.append((list(texts), target_language))
        if self.error:
            raise self.error
        translated = [f"[{target_language}] {text}" for text in texts]
        if self.drop:
            translated = translated[: -self.drop]
        return translated + ["surplus"] * self.extra


FALLBACK_PAYLOAD: Dict[str, Any] = {
    "summary": "Dolo 650 relieves fever and mild pain.",
    "activeIngredients": "Paracetamol 650 mg",
    "purpose": "Reduces fever and relieves mild to moderate pain.",
    "howToTake": "Take 1 tablet every 6 hours with water.",
    "sideEffects": {
        "summary": "Usually well tolerated.",
        "chartData": [
            {"name": "Nausea", "frequencyPercent": 2, "frequencyDescription": "Uncommon"},
            {"name": "Rash", "frequencyPercent": 0.5, "frequencyDescription": "Rare"},
        ],
    },
    "whatToAvoid": "Avoid alcohol and other paracetamol products.",
    "storage": "Store below 30°C.",
    "warnings": "Do not exceed 4 g per day.",
}

FDA_PAYLOAD: Dict[str, Any] = {
    "results": [
        {
            "active_ingredient": ["Acetaminophen 500 mg"],
            "purpose": ["Pain reliever/fever reducer"],
            "dosage_and_administration": ["2 DOSAGE\n1. Take 2 caplets every 6 hours\n2. Do not exceed 6 caplets"],
            "adverse_reactions": ["Nausea [5.1] and rash (6)"],
            "warnings": ["Liver warning: severe liver damage may occur."],
            "openfda": {"brand_name": ["Tylenol Extra Strength"], "generic_name": ["ACETAMINOPHEN"]},
        }
    ]
}


@pytest.fixture
def fallback_content() -> FallbackContent:
    return FallbackContent.model_validate(FALLBACK_PAYLOAD)


@pytest.fixture
def fda_result() -> FdaResult:
    return FdaResult.model_validate(FDA_PAYLOAD)


@pytest.fixture
def generative_content() -> MedicineContent:
    return MedicineContent.from_tree(
        {"name": "Dolo 650", **FALLBACK_PAYLOAD}, DataSource.GENERATIVE, "en"
    )


@pytest.fixture
def failing_translation() -> FakeTranslation:
    return FakeTranslation(error=TranslationFailure("service unavailable"))
