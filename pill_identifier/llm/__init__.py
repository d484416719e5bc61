"""LLM integration helpers."""

from .fallback import FallbackGenerator
from .identifier import MedicineIdentifier
from .openai_client import OpenAIChatClient
from .summarizer import LabelSummarizer
from .translator import TextTranslator

__all__ = [
    "FallbackGenerator",
    "LabelSummarizer",
    "MedicineIdentifier",
    "OpenAIChatClient",
    "TextTranslator",
]
