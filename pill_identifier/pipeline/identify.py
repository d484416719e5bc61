"""End-to-end identification: image to medicine name to normalized content."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pill_identifier.config import settings
from pill_identifier.errors import NotIdentifiable
from pill_identifier.i18n.locales import LocaleTable, get_locale_table
from pill_identifier.llm.fallback import FallbackGenerator
from pill_identifier.llm.identifier import MedicineIdentifier
from pill_identifier.llm.openai_client import OpenAIChatClient
from pill_identifier.llm.summarizer import LabelSummarizer
from pill_identifier.models.content import MedicineContent
from pill_identifier.pipeline.interfaces import IdentificationCapability
from pill_identifier.pipeline.reconciler import SourceReconciler
from pill_identifier.sources.fda_client import FdaLabelClient

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class MedicinePipeline:
    """Runs identification and reconciliation, reporting localized progress."""

    def __init__(
        self,
        identifier: IdentificationCapability,
        reconciler: SourceReconciler,
        locales: LocaleTable | None = None,
    ) -> None:
        self.identifier = identifier
        self.reconciler = reconciler
        self.locales = locales or get_locale_table()

    @classmethod
    def from_settings(cls) -> "MedicinePipeline":
        """Wire the OpenAI and openFDA collaborators from the global settings."""
        client = OpenAIChatClient()
        reconciler = SourceReconciler(
            regulatory=FdaLabelClient(),
            summarizer=LabelSummarizer(client),
            fallback=FallbackGenerator(client),
        )
        return cls(MedicineIdentifier(client), reconciler)

    def run(
        self,
        image_bytes: bytes,
        mime_type: str,
        language: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> MedicineContent:
        language = language or settings.native_language
        notify = self._notifier(language, on_progress)

        notify("convertingImage")
        notify("identifyingMedicine")
        medicine_name = self.identifier.identify(image_bytes, mime_type)
        if not medicine_name or not medicine_name.strip():
            raise NotIdentifiable("Could not identify a medicine name from the image.")
        return self.lookup(medicine_name, language, on_progress)

    def lookup(
        self,
        medicine_name: str,
        language: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> MedicineContent:
        language = language or settings.native_language
        notify = self._notifier(language, on_progress)
        name = (medicine_name or "").strip()

        notify("searchingFda", name=name)
        content = self.reconciler.reconcile(
            name,
            on_summarize=lambda: notify("summarizingInfo"),
            on_fallback=lambda: notify("consultingKnowledgeBase", name=name),
        )
        logger.info("Resolved %r from %s source", content.name, content.source.value)
        return content

    def _notifier(
        self, language: str, on_progress: Optional[ProgressCallback]
    ) -> Callable[..., None]:
        def notify(key: str, **kwargs: str) -> None:
            message = self.locales.text(language, key, **kwargs)
            logger.debug(message)
            if on_progress:
                on_progress(message)

        return notify
