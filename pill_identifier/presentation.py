"""Render MedicineContent into localized card sections."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from pill_identifier.config import settings
from pill_identifier.i18n.locales import LocaleTable, get_locale_table
from pill_identifier.models.blocks import ListBlock, ParagraphBlock, TextBlock
from pill_identifier.models.content import (
    DataSource,
    MedicineContent,
    PlainSideEffects,
    SideEffectEntry,
    StructuredSideEffects,
)
from pill_identifier.text.segmenter import format_content, segment

# (content attribute, locale key for the section title)
SECTION_TITLES: Tuple[Tuple[str, str], ...] = (
    ("active_ingredients", "activeIngredients"),
    ("purpose", "purpose"),
    ("how_to_take", "howToTake"),
    ("side_effects", "commonSideEffects"),
    ("what_to_avoid", "whatToAvoid"),
    ("storage", "storage"),
    ("warnings", "warnings"),
)

SOURCE_BADGES = {
    DataSource.REGULATORY: "dataSourceFda",
    DataSource.GENERATIVE: "dataSourceGenerative",
}


class CardSection(BaseModel):
    """One accordion section of the card."""

    key: str
    title: str
    blocks: List[TextBlock] = Field(default_factory=list)
    chart_title: Optional[str] = None
    chart: List[SideEffectEntry] = Field(default_factory=list)


class MedicineCard(BaseModel):
    """Everything a client needs to draw the medicine card."""

    name: str
    language: str
    source: DataSource
    source_label: str
    summary: Optional[str] = None
    sections: List[CardSection] = Field(default_factory=list)
    disclaimer: str


def _side_effects_section(
    side_effects, key: str, title: str, language: str, locales: LocaleTable
) -> Optional[CardSection]:
    if isinstance(side_effects, StructuredSideEffects):
        if side_effects.is_blank():
            return None
        chart = list(side_effects.chart_data or [])
        return CardSection(
            key=key,
            title=title,
            blocks=segment(side_effects.summary),
            chart_title=locales.text(language, "sideEffectsVisualization") if chart else None,
            chart=chart,
        )
    if isinstance(side_effects, PlainSideEffects):
        blocks = format_content(side_effects.content)
        return CardSection(key=key, title=title, blocks=blocks) if blocks else None
    raise TypeError(f"Unknown side effects variant {type(side_effects).__name__}")


def render_card(
    content: MedicineContent,
    language: Optional[str] = None,
    locales: Optional[LocaleTable] = None,
) -> MedicineCard:
    """Build the card for content; UI labels follow language, text follows content."""
    locales = locales or get_locale_table()
    language = language or content.language
    sections: List[CardSection] = []
    for attribute, key in SECTION_TITLES:
        title = locales.text(language, key)
        value = getattr(content, attribute)
        if attribute == "side_effects":
            section = _side_effects_section(value, key, title, language, locales)
        else:
            blocks = format_content(value)
            section = CardSection(key=key, title=title, blocks=blocks) if blocks else None
        if section is not None:
            sections.append(section)

    return MedicineCard(
        name=content.name,
        language=content.language,
        source=content.source,
        source_label=locales.text(language, SOURCE_BADGES[content.source]),
        summary=content.summary or None,
        sections=sections,
        disclaimer=settings.medical_disclaimer,
    )


def _render_blocks(blocks: List[TextBlock]) -> List[str]:
    lines: List[str] = []
    for block in blocks:
        if isinstance(block, ParagraphBlock):
            lines.append(block.text)
        elif isinstance(block, ListBlock):
            lines.extend(f"  • {item}" for item in block.items)
        lines.append("")
    return lines


def render_text(card: MedicineCard) -> str:
    """Plain-text rendering used by the command line."""
    lines = [card.name, f"[{card.source_label}]", ""]
    if card.summary:
        lines.extend([card.summary, ""])
    for section in card.sections:
        lines.append(section.title.upper())
        lines.extend(_render_blocks(section.blocks))
        if section.chart:
            lines.append(section.chart_title or "")
            for entry in section.chart:
                lines.append(
                    f"  {entry.name}: ~{entry.frequency_percent:g}% ({entry.frequency_description})"
                )
            lines.append("")
    lines.append(f"{card.disclaimer}.")
    return "\n".join(lines).rstrip() + "\n"
