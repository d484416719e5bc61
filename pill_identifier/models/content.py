"""Normalized medicine content and its shape-polymorphic fields."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pill_identifier.config import settings

MAX_CHART_ENTRIES = 5


class ContentModel(BaseModel):
    """Immutable base with camelCase wire names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class EmptyText(ContentModel):
    """No information at all."""

    kind: Literal["empty"] = "empty"

    def plain(self) -> None:
        return None

    def as_text(self) -> str:
        return ""

    def is_blank(self) -> bool:
        return True


class SingleText(ContentModel):
    """A single free-form string."""

    kind: Literal["single"] = "single"
    text: str

    def plain(self) -> str:
        return self.text

    def as_text(self) -> str:
        return self.text

    def is_blank(self) -> bool:
        return not self.text.strip()


class MultipleText(ContentModel):
    """An ordered sequence of strings, e.g. the paragraphs of a label section."""

    kind: Literal["multiple"] = "multiple"
    items: Tuple[str, ...] = ()

    def plain(self) -> List[str]:
        return list(self.items)

    def as_text(self) -> str:
        return "\n\n".join(self.items)

    def is_blank(self) -> bool:
        return not self.as_text().strip()


EMPTY = EmptyText()


def to_content_field(value: Any) -> Any:
    """Build the tagged variant from a plain value (absent, string or sequence)."""
    if isinstance(value, (EmptyText, SingleText, MultipleText)):
        return value
    if value is None:
        return EMPTY
    if isinstance(value, str):
        return SingleText(text=value)
    if isinstance(value, dict) and "kind" in value:
        return value
    if isinstance(value, (list, tuple)):
        return MultipleText(items=tuple(str(item) for item in value if item is not None))
    raise ValueError(f"Unsupported content value of type {type(value).__name__}")


ContentField = Annotated[
    Union[EmptyText, SingleText, MultipleText],
    BeforeValidator(to_content_field),
]


class SideEffectEntry(ContentModel):
    """One bar of the side-effect frequency chart."""

    name: str
    frequency_percent: float = 0.0
    frequency_description: str = ""

    @field_validator("frequency_percent")
    @classmethod
    def _clamp_percent(cls, value: float) -> float:
        return min(max(value, 0.0), 100.0)


class StructuredSideEffects(ContentModel):
    """Side effects as a plain-language summary plus optional chart rows."""

    kind: Literal["structured"] = "structured"
    summary: str = ""
    chart_data: Optional[Tuple[SideEffectEntry, ...]] = None

    @field_validator("chart_data", mode="before")
    @classmethod
    def _limit_entries(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(value)[:MAX_CHART_ENTRIES]
        return value

    def plain(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"summary": self.summary}
        if self.chart_data is not None:
            payload["chartData"] = [
                entry.model_dump(by_alias=True) for entry in self.chart_data
            ]
        return payload

    def is_blank(self) -> bool:
        return not self.summary.strip() and not self.chart_data


class PlainSideEffects(ContentModel):
    """Side effects as raw label text."""

    kind: Literal["plain"] = "plain"
    content: ContentField = EMPTY

    def plain(self) -> Any:
        return self.content.plain()

    def is_blank(self) -> bool:
        return self.content.is_blank()


def to_side_effects_field(value: Any) -> Any:
    if isinstance(value, (PlainSideEffects, StructuredSideEffects)):
        return value
    if isinstance(value, dict):
        if "kind" in value:
            return value
        return StructuredSideEffects.model_validate(value)
    return PlainSideEffects(content=to_content_field(value))


SideEffectsField = Annotated[
    Union[PlainSideEffects, StructuredSideEffects],
    BeforeValidator(to_side_effects_field),
]

NO_SIDE_EFFECTS = PlainSideEffects()


class DataSource(str, Enum):
    """Which source produced a MedicineContent."""

    REGULATORY = "regulatory"
    GENERATIVE = "generative"


# Content keys in display order; metadata fields are not part of the tree.
CONTENT_FIELDS = (
    "active_ingredients",
    "purpose",
    "how_to_take",
    "side_effects",
    "what_to_avoid",
    "storage",
    "warnings",
)


class MedicineContent(ContentModel):
    """The normalized display model for one identified medicine."""

    name: str
    summary: Optional[str] = None
    active_ingredients: ContentField = EMPTY
    purpose: ContentField = EMPTY
    how_to_take: ContentField = EMPTY
    side_effects: SideEffectsField = NO_SIDE_EFFECTS
    what_to_avoid: ContentField = EMPTY
    storage: ContentField = EMPTY
    warnings: ContentField = EMPTY

    source: DataSource
    language: str = Field(default_factory=lambda: settings.native_language)

    def to_tree(self) -> Dict[str, Any]:
        """Return the plain camelCase content tree, omitting absent fields."""
        tree: Dict[str, Any] = {"name": self.name}
        if self.summary is not None:
            tree["summary"] = self.summary
        for field_name in CONTENT_FIELDS:
            value = getattr(self, field_name).plain()
            if value is not None:
                tree[to_camel(field_name)] = value
        return tree

    @classmethod
    def from_tree(
        cls, tree: Dict[str, Any], source: DataSource, language: str
    ) -> "MedicineContent":
        return cls.model_validate({**tree, "source": source, "language": language})


class SummarizedLabel(ContentModel):
    """Plain-language rewrite of regulatory label sections."""

    summary: str = ""
    purpose: ContentField = EMPTY
    how_to_take: ContentField = EMPTY
    side_effects: SideEffectsField = NO_SIDE_EFFECTS
    what_to_avoid: ContentField = EMPTY
    storage: ContentField = EMPTY
    warnings: ContentField = EMPTY


class FallbackContent(SummarizedLabel):
    """Generated content for medicines without a regulatory record."""

    active_ingredients: ContentField = EMPTY


class TranslationUnit(BaseModel):
    """A translatable leaf string and the path that reaches it."""

    model_config = ConfigDict(frozen=True)

    path: Tuple[Union[str, int], ...]
    text: str
