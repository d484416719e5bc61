"""Typed text blocks produced by the segmenter."""

from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


class ParagraphBlock(BaseModel):
    """A run of prose joined into a single line."""

    kind: Literal["paragraph"] = "paragraph"
    text: str


class ListBlock(BaseModel):
    """An ordered list of items, markers removed."""

    kind: Literal["list"] = "list"
    items: List[str] = Field(default_factory=list)


TextBlock = Annotated[Union[ParagraphBlock, ListBlock], Field(discriminator="kind")]
