"""Reconciliation, translation and orchestration of medicine content."""

from .identify import MedicinePipeline
from .reconciler import SourceReconciler, reconcile
from .session import DisplaySession, TranslationTicket
from .translator import ContentTranslator, collect_translation_units

__all__ = [
    "ContentTranslator",
    "DisplaySession",
    "MedicinePipeline",
    "SourceReconciler",
    "TranslationTicket",
    "collect_translation_units",
    "reconcile",
]
