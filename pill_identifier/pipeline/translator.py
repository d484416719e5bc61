"""Structure-preserving translation of a MedicineContent tree."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Sequence, Tuple, Union

from pill_identifier.errors import TranslationFailure, TranslationMismatch
from pill_identifier.models.content import MedicineContent, TranslationUnit
from pill_identifier.pipeline.interfaces import TranslationCapability

logger = logging.getLogger(__name__)

PathKey = Union[str, int]

CHART_KEY = "chartData"
CHART_TRANSLATABLE_KEYS = frozenset({"name", "frequencyDescription"})
NEVER_TRANSLATED_KEYS = frozenset({"frequencyPercent"})


def is_translatable(path: Tuple[PathKey, ...], text: str) -> bool:
    if not text.strip():
        return False
    key = path[-1]
    if key in NEVER_TRANSLATED_KEYS:
        return False
    if CHART_KEY in path[:-1]:
        return key in CHART_TRANSLATABLE_KEYS
    return True


def _visit(node: Any, path: Tuple[PathKey, ...], units: List[TranslationUnit]) -> None:
    if isinstance(node, str):
        if path and is_translatable(path, node):
            units.append(TranslationUnit(path=path, text=node))
    elif isinstance(node, dict):
        for key, value in node.items():
            _visit(value, path + (key,), units)
    elif isinstance(node, (list, tuple)):
        # Strings inside sequences are units too, addressed by their index.
        for index, item in enumerate(node):
            _visit(item, path + (index,), units)
    elif node is None or isinstance(node, (bool, int, float)):
        return
    else:
        raise TypeError(f"Unexpected node of type {type(node).__name__} at {list(path)}")


def collect_translation_units(tree: Dict[str, Any]) -> List[TranslationUnit]:
    """Return translatable leaves in pre-order, keys in insertion order."""
    units: List[TranslationUnit] = []
    _visit(tree, (), units)
    return units


def set_path(tree: Any, path: Sequence[PathKey], value: str) -> None:
    node = tree
    for key in path[:-1]:
        node = node[key]
    node[path[-1]] = value


def apply_translations(
    tree: Dict[str, Any], units: Sequence[TranslationUnit], texts: Sequence[str]
) -> Dict[str, Any]:
    """Return a deep copy of tree with each unit's leaf replaced by its translation."""
    if len(texts) != len(units):
        raise TranslationMismatch(expected=len(units), received=len(texts))
    translated = copy.deepcopy(tree)
    for unit, text in zip(units, texts):
        set_path(translated, unit.path, text)
    return translated


class ContentTranslator:
    """Translates every text leaf of a MedicineContent in a single batch."""

    def __init__(self, capability: TranslationCapability) -> None:
        self.capability = capability

    def translate(self, content: MedicineContent, target_language: str) -> MedicineContent:
        if target_language == content.language:
            return content

        tree = content.to_tree()
        units = collect_translation_units(tree)
        if not units:
            return content

        logger.info(
            "Translating %s text fields of %r to %s", len(units), content.name, target_language
        )
        try:
            texts = self.capability.translate_texts([unit.text for unit in units], target_language)
        except TranslationFailure:
            raise
        except Exception as exc:
            raise TranslationFailure("Failed to translate the medicine information.") from exc

        translated = apply_translations(tree, units, list(texts))
        return MedicineContent.from_tree(translated, content.source, target_language)
