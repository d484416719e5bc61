"""Re-flow raw label text into paragraph and list blocks."""

from __future__ import annotations

import re
from typing import List

from pill_identifier.models.blocks import ListBlock, ParagraphBlock, TextBlock
from pill_identifier.models.content import EmptyText, MultipleText, SingleText

# "2 DOSAGE AND ADMINISTRATION" style heading occupying the whole first line.
TITLE_PATTERN = re.compile(r"\A\d+(?:\.\d+)?[ \t]*[A-Za-z][\w \t]*(?:\n|\Z)")
# Only purely numeric citations such as [5] or (2.1); "(1 tablet)" must survive.
BRACKET_CITATION_PATTERN = re.compile(r"\[\s*\d+(?:\.\d+)?\s*\]")
PAREN_CITATION_PATTERN = re.compile(r"\(\s*\d+(?:\.\d+)?\s*\)")
BLANK_LINE_PATTERN = re.compile(r"\n\s*\n")
LIST_MARKER_PATTERN = re.compile(r"^\s*(?:[•*-]|\d+[.)]|[a-zA-Z][.)])\s+")

LIST_LINE_RATIO = 0.5


def clean_text(raw_text: str) -> str:
    """Normalize line endings and drop the title line and numeric citations."""
    text = raw_text.replace("\r\n", "\n").replace("\r", "\n")
    text = TITLE_PATTERN.sub("", text, count=1)
    text = BRACKET_CITATION_PATTERN.sub("", text)
    text = PAREN_CITATION_PATTERN.sub("", text)
    return text.strip()


def is_list_line(line: str) -> bool:
    return LIST_MARKER_PATTERN.match(line) is not None


def looks_like_list(lines: List[str]) -> bool:
    if len(lines) <= 1:
        return False
    marked = sum(1 for line in lines if is_list_line(line))
    return marked / len(lines) >= LIST_LINE_RATIO


def collect_list_items(lines: List[str]) -> List[str]:
    items: List[str] = []
    for line in lines:
        if is_list_line(line):
            items.append(LIST_MARKER_PATTERN.sub("", line, count=1))
        elif items:
            # Soft-wrapped continuation of the previous item.
            items[-1] = f"{items[-1]} {line}"
        elif line:
            items.append(line)
    return items


def segment_block(block: str) -> List[TextBlock]:
    lines = [line.strip() for line in block.split("\n")]
    if looks_like_list(lines):
        return [ListBlock(items=collect_list_items(lines))]
    paragraph = " ".join(lines)
    if not paragraph:
        return []
    return [ParagraphBlock(text=paragraph)]


def segment(raw_text: str) -> List[TextBlock]:
    """Split raw regulatory text into ordered paragraph and list blocks.

    Blocks are separated by one or more blank lines. A block with more than
    one line is a list when at least half of its lines start with a bullet,
    number or letter marker; otherwise its lines are joined into a single
    paragraph. Never raises; blank input yields an empty list.
    """
    cleaned = clean_text(raw_text or "")
    if not cleaned:
        return []
    blocks: List[TextBlock] = []
    for block in BLANK_LINE_PATTERN.split(cleaned):
        if not block.strip():
            continue
        blocks.extend(segment_block(block))
    return blocks


def format_content(field) -> List[TextBlock]:
    """Segment a content field; sequence elements become separate blocks."""
    if isinstance(field, EmptyText) or field is None:
        return []
    if isinstance(field, (SingleText, MultipleText)):
        if field.is_blank():
            return []
        return segment(field.as_text())
    raise TypeError(f"Cannot format content of type {type(field).__name__}")
