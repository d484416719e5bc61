"""Immutable table of UI strings per language with fallback to the base locale."""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping

logger = logging.getLogger(__name__)

BASE_LOCALE = "en"

LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        "en": "English",
        "es": "Spanish",
        "fr": "French",
        "de": "German",
        "hi": "Hindi",
    }
)

EN_STRINGS: Dict[str, str] = {
    "pageTitle": "Pill Identifier AI",
    "identifyYourMedicine": "Identify Your Medicine",
    "uploadAPhoto": "Upload a photo, and let AI provide you with information.",
    "errorTitle": "Error",
    "translationError": "Translation failed. Displaying original language.",
    "placeholderText": "Your medicine information will appear here.",
    "noInformation": "No information available.",
    "convertingImage": "Converting image...",
    "identifyingMedicine": "Identifying medicine from image with AI...",
    "searchingFda": 'Searching FDA database for "{name}"...',
    "summarizingInfo": "Summarizing information for easier reading...",
    "consultingKnowledgeBase": '"{name}" not in FDA database. Consulting the AI knowledge base...',
    "translating": "Translating to {language}...",
    "activeIngredients": "Active Ingredient(s)",
    "purpose": "Purpose",
    "howToTake": "How to Take",
    "commonSideEffects": "Common Side Effects",
    "sideEffectsVisualization": "Most Common Side Effects Visualization",
    "whatToAvoid": "What to Avoid",
    "storage": "Storage",
    "warnings": "Warnings",
    "dataSourceFda": "Data sourced from openFDA",
    "dataSourceGenerative": "Data sourced from an AI knowledge base",
}

OVERLAYS: Dict[str, Dict[str, str]] = {
    "es": {
        "pageTitle": "Identificador de Píldoras IA",
        "identifyYourMedicine": "Identifica tu Medicamento",
        "uploadAPhoto": "Sube una foto y deja que la IA te proporcione información.",
        "errorTitle": "Error",
        "translationError": "La traducción falló. Mostrando el idioma original.",
        "placeholderText": "La información de tu medicamento aparecerá aquí.",
        "noInformation": "No hay información disponible.",
        "convertingImage": "Convirtiendo imagen...",
        "identifyingMedicine": "Identificando medicina de la imagen con IA...",
        "searchingFda": 'Buscando en la base de datos de la FDA por "{name}"...',
        "summarizingInfo": "Resumiendo información para una lectura más fácil...",
        "consultingKnowledgeBase": (
            '"{name}" no encontrado en la base de datos de la FDA. '
            "Consultando la base de conocimientos de IA..."
        ),
        "translating": "Traduciendo al {language}...",
        "activeIngredients": "Ingrediente(s) Activo(s)",
        "purpose": "Propósito",
        "howToTake": "Cómo Tomar",
        "commonSideEffects": "Efectos Secundarios Comunes",
        "sideEffectsVisualization": "Visualización de Efectos Secundarios Más Comunes",
        "whatToAvoid": "Qué Evitar",
        "storage": "Almacenamiento",
        "warnings": "Advertencias",
        "dataSourceFda": "Datos de openFDA",
        "dataSourceGenerative": "Datos de una base de conocimientos de IA",
    },
    "fr": {
        "pageTitle": "Identificateur de Pilule IA",
        "translationError": "La traduction a échoué. Affichage de la langue originale.",
    },
    "de": {
        "pageTitle": "Pillen-Identifikator KI",
        "translationError": "Übersetzung fehlgeschlagen. Originalsprache wird angezeigt.",
    },
    "hi": {
        "pageTitle": "गोली पहचानकर्ता एआई",
        "translationError": "अनुवाद विफल रहा। मूल भाषा प्रदर्शित हो रही है।",
    },
}


class LocaleTable:
    """Read-only lookup of UI strings; every locale shares the base key set."""

    def __init__(
        self,
        base: Mapping[str, str],
        overlays: Mapping[str, Mapping[str, str]],
        languages: Mapping[str, str],
        base_locale: str = BASE_LOCALE,
    ) -> None:
        tables: Dict[str, Mapping[str, str]] = {
            base_locale: MappingProxyType(dict(base))
        }
        for code, strings in overlays.items():
            unknown = sorted(set(strings) - set(base))
            if unknown:
                raise ValueError(f"Locale '{code}' defines unknown keys: {', '.join(unknown)}")
            tables[code] = MappingProxyType({**base, **strings})
        self._tables: Mapping[str, Mapping[str, str]] = MappingProxyType(tables)
        self._languages = MappingProxyType(dict(languages))
        self.base_locale = base_locale

    @property
    def languages(self) -> Mapping[str, str]:
        return self._languages

    def supports(self, code: str) -> bool:
        return code in self._languages

    def language_name(self, code: str) -> str:
        return self._languages.get(code, "the target language")

    def text(self, language: str, key: str, /, **kwargs: str) -> str:
        table = self._tables.get(language) or self._tables[self.base_locale]
        template = table[key]
        return template.format(**kwargs) if kwargs else template


@lru_cache(maxsize=1)
def get_locale_table() -> LocaleTable:
    """Build the locale table once per process."""
    table = LocaleTable(EN_STRINGS, OVERLAYS, LANGUAGES)
    logger.debug("Loaded %s UI locales", len(OVERLAYS) + 1)
    return table
