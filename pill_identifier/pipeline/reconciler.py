"""Merge regulatory label data or generated fallback content into one model."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from pill_identifier.errors import (
    LookupFailure,
    NotIdentifiable,
    SummarizationFailure,
)
from pill_identifier.models.content import (
    DataSource,
    FallbackContent,
    MedicineContent,
    SummarizedLabel,
)
from pill_identifier.models.regulatory import FdaLabel
from pill_identifier.pipeline.interfaces import (
    FallbackCapability,
    RegulatoryLookup,
    SummarizationCapability,
)

logger = logging.getLogger(__name__)

# Label section -> content key, in summarization order.
LABEL_FIELD_MAP = (
    ("purpose", "purpose"),
    ("dosage_and_administration", "howToTake"),
    ("adverse_reactions", "sideEffects"),
    ("drug_interactions", "whatToAvoid"),
    ("storage_and_handling", "storage"),
    ("warnings", "warnings"),
)


def _first(values: Optional[List[str]]) -> str:
    for value in values or []:
        if value and value.strip():
            return value.strip()
    return ""


def resolve_display_name(label: FdaLabel, medicine_name: str) -> str:
    """Brand name, then generic name, then the name read off the image."""
    return (
        _first(label.openfda.brand_name)
        or _first(label.openfda.generic_name)
        or medicine_name
    )


def build_summary_request(label: FdaLabel) -> Dict[str, str]:
    """Collect the non-blank label sections, paragraphs separated by a blank line."""
    request: Dict[str, str] = {}
    for label_field, content_key in LABEL_FIELD_MAP:
        value = "\n\n".join(getattr(label, label_field) or [])
        if value.strip():
            request[content_key] = value
    return request


def from_regulatory(
    label: FdaLabel,
    medicine_name: str,
    summarize: Callable[[Dict[str, str]], SummarizedLabel],
    on_summarize: Optional[Callable[[], None]] = None,
) -> MedicineContent:
    name = resolve_display_name(label, medicine_name)
    request = build_summary_request(label)
    if not request:
        logger.info("FDA label for %r has no text sections; using raw fields", name)
        return MedicineContent(
            name=name,
            source=DataSource.REGULATORY,
            active_ingredients=label.active_ingredient,
            purpose=label.purpose,
            how_to_take=label.dosage_and_administration,
            side_effects=label.adverse_reactions,
            what_to_avoid=label.drug_interactions,
            storage=label.storage_and_handling,
            warnings=label.warnings,
        )

    if on_summarize:
        on_summarize()
    try:
        summarized = summarize(request)
    except SummarizationFailure:
        raise
    except Exception as exc:
        raise SummarizationFailure(
            "Failed to summarize the medicine information via AI."
        ) from exc
    return MedicineContent(
        name=name,
        source=DataSource.REGULATORY,
        summary=summarized.summary,
        active_ingredients=label.active_ingredient,
        purpose=summarized.purpose,
        how_to_take=summarized.how_to_take,
        side_effects=summarized.side_effects,
        what_to_avoid=summarized.what_to_avoid,
        storage=summarized.storage,
        warnings=summarized.warnings,
    )


def from_fallback(fallback: FallbackContent, medicine_name: str) -> MedicineContent:
    return MedicineContent(
        name=medicine_name,
        source=DataSource.GENERATIVE,
        summary=fallback.summary,
        active_ingredients=fallback.active_ingredients,
        purpose=fallback.purpose,
        how_to_take=fallback.how_to_take,
        side_effects=fallback.side_effects,
        what_to_avoid=fallback.what_to_avoid,
        storage=fallback.storage,
        warnings=fallback.warnings,
    )


class SourceReconciler:
    """Chooses between the regulatory record and the generative fallback."""

    def __init__(
        self,
        regulatory: RegulatoryLookup,
        summarizer: SummarizationCapability,
        fallback: FallbackCapability,
    ) -> None:
        self.regulatory = regulatory
        self.summarizer = summarizer
        self.fallback = fallback

    def reconcile(
        self,
        medicine_name: str,
        on_summarize: Optional[Callable[[], None]] = None,
        on_fallback: Optional[Callable[[], None]] = None,
    ) -> MedicineContent:
        name = (medicine_name or "").strip()
        if not name:
            raise NotIdentifiable("No medicine name was identified.")

        regulatory_error: Optional[Exception] = None
        record = None
        try:
            record = self.regulatory.lookup(name)
        except Exception as exc:
            logger.warning("Regulatory lookup for %r failed, trying fallback: %s", name, exc)
            regulatory_error = exc

        label = record.first() if record else None
        if label is not None:
            return from_regulatory(label, name, self.summarizer.summarize, on_summarize)

        if on_fallback:
            on_fallback()
        try:
            fallback = self.fallback.generate(name)
        except Exception as exc:
            if regulatory_error is not None:
                message = f'No source could provide information for "{name}".'
            else:
                message = f'Failed to get information for "{name}" from the AI knowledge base.'
            logger.error("%s (%s)", message, exc)
            raise LookupFailure(message) from exc
        return from_fallback(fallback, name)


def reconcile(
    medicine_name: str,
    regulatory_label: Optional[FdaLabel] = None,
    fallback: Optional[FallbackContent] = None,
    summarize: Optional[Callable[[Dict[str, str]], SummarizedLabel]] = None,
) -> MedicineContent:
    """Reconcile already-fetched source data; the regulatory label wins when present."""
    name = (medicine_name or "").strip()
    if not name:
        raise NotIdentifiable("No medicine name was identified.")
    if regulatory_label is not None:
        if summarize is None and build_summary_request(regulatory_label):
            raise ValueError("A summarizer is required for a label with text.")
        return from_regulatory(regulatory_label, name, summarize)
    if fallback is not None:
        return from_fallback(fallback, name)
    raise LookupFailure(f'No source could provide information for "{name}".')
