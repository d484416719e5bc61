"""Prompt templates and response schemas for the model-backed capabilities."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Sequence

IDENTIFY_PROMPT = (
    "Identify the primary brand or generic name of the medicine in this image. "
    "The image may have poor quality, so correct for any potential OCR errors or "
    "typos to provide the most likely standardized name. Provide only the name. "
    "Do not include dosage, form (e.g., 'tablets'), or other extra information."
)

SYSTEM_PROMPT = """You are a medication information assistant for a general audience.
Write in clear, plain language and avoid medical jargon where possible.
Do not fabricate data. Always answer with JSON that matches the requested schema."""

TRANSLATION_SYSTEM_PROMPT = """You are a professional medical translator.
Translate faithfully, keep numbers, units and drug names unchanged, and answer only with JSON."""

NOT_PROVIDED = "Not provided."

# Label sections in prompt order, keyed as in the summarization request.
SUMMARY_SECTIONS = (
    ("purpose", "Purpose"),
    ("howToTake", "How to Take (Dosage and Administration)"),
    ("sideEffects", "Common Side Effects (Adverse Reactions)"),
    ("whatToAvoid", "What to Avoid (Drug Interactions)"),
    ("storage", "Storage Instructions"),
    ("warnings", "Important Warnings"),
)

CHART_DATA_SCHEMA: Dict[str, Any] = {
    "type": "array",
    "description": (
        "Up to 5 of the most common side effects for visualization. "
        "Omit if no specific side effects are known."
    ),
    "maxItems": 5,
    "items": {
        "type": "object",
        "properties": {
            "name": {"type": "string", "description": "The name of the side effect."},
            "frequencyPercent": {
                "type": "number",
                "description": (
                    "Estimated percentage of occurrence. Estimate from terms like "
                    "'common' (>1%) or 'frequent' (>10%) if no exact number is given."
                ),
            },
            "frequencyDescription": {
                "type": "string",
                "description": "The original text describing the frequency, e.g. 'Common'.",
            },
        },
        "required": ["name", "frequencyPercent", "frequencyDescription"],
    },
}

SIDE_EFFECTS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": {
            "type": "string",
            "description": "A text summary of the common side effects in plain language.",
        },
        "chartData": CHART_DATA_SCHEMA,
    },
    "required": ["summary"],
}


def _string_property(description: str) -> Dict[str, str]:
    return {"type": "string", "description": description}


SUMMARY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": _string_property(
            "A brief, one or two-sentence summary of the medicine's purpose and key warnings."
        ),
        "purpose": _string_property("The purpose or use of the medicine, in simple terms."),
        "howToTake": _string_property("Easy-to-follow instructions on how to take the medicine."),
        "sideEffects": SIDE_EFFECTS_SCHEMA,
        "whatToAvoid": _string_property(
            "Practical information on what to avoid (other drugs, food, activities)."
        ),
        "storage": _string_property("How to properly store the medicine."),
        "warnings": _string_property("Important warnings and precautions in direct language."),
    },
    "required": [
        "summary",
        "purpose",
        "howToTake",
        "sideEffects",
        "whatToAvoid",
        "storage",
        "warnings",
    ],
}

FALLBACK_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": _string_property(
            "A brief summary of the medicine, including common uses and what it treats."
        ),
        "activeIngredients": _string_property("The active ingredient(s) of the medicine."),
        "purpose": _string_property("The primary purpose or use of the medicine."),
        "howToTake": _string_property(
            "How to take the medicine: dosage, frequency, with food or water."
        ),
        "sideEffects": SIDE_EFFECTS_SCHEMA,
        "whatToAvoid": _string_property(
            "What to avoid while taking the medicine, such as other drugs, foods or driving."
        ),
        "storage": _string_property("How to store the medicine (temperature, light exposure)."),
        "warnings": _string_property("Important warnings and precautions."),
    },
    "required": [
        "summary",
        "activeIngredients",
        "purpose",
        "howToTake",
        "sideEffects",
        "whatToAvoid",
        "storage",
        "warnings",
    ],
}

TRANSLATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "translations": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["translations"],
}


def build_summary_prompt(fields: Mapping[str, str]) -> str:
    sections = "\n".join(
        f"- {label}: {fields.get(key) or NOT_PROVIDED}" for key, label in SUMMARY_SECTIONS
    )
    return f"""The following is technical medical information from an FDA drug label.
Summarize it into clear, concise, easy-to-understand language for a general audience.
If a section has no information provided, return an empty string for that field.

For the side effects, first provide a text summary. Then, if the text lists side effects,
extract up to 5 of the most common ones as chart data with a name, an estimated frequency
percentage and the original frequency description.

Here is the data to summarize:
{sections}

Also write a brief overall summary based on all available information."""


def build_fallback_prompt(medicine_name: str) -> str:
    return (
        f'The medicine named "{medicine_name.strip()}" was not found in the US FDA database. '
        "It might be an international medicine. Provide information for it, including "
        "practical details for daily life. For side effects, provide a text summary and "
        "also a structured list of up to 5 of the most common ones for a chart."
    )


def build_translation_prompt(texts: Sequence[str], language_name: str) -> str:
    return f"""Translate the following list of texts to {language_name}.
Return a JSON object whose "translations" array holds the translation of each input text.
Maintain the exact order and array length.

Input Texts:
{json.dumps(list(texts), ensure_ascii=False)}"""
