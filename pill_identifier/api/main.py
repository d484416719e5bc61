"""FastAPI application entry point."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

from fastapi import Depends, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from pill_identifier.config import settings
from pill_identifier.errors import (
    LookupFailure,
    NotIdentifiable,
    PillIdentifierError,
    SummarizationFailure,
    TranslationFailure,
)
from pill_identifier.i18n.locales import LocaleTable, get_locale_table
from pill_identifier.llm.translator import TextTranslator
from pill_identifier.models.api import (
    FormatRequest,
    FormatResponse,
    LanguageOption,
    MedicineResponse,
    TranslateRequest,
    TranslateResponse,
)
from pill_identifier.models.content import MedicineContent, to_content_field
from pill_identifier.pipeline.identify import MedicinePipeline
from pill_identifier.pipeline.session import DisplaySession
from pill_identifier.pipeline.translator import ContentTranslator
from pill_identifier.presentation import render_card
from pill_identifier.text.segmenter import format_content

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Pill Identifier",
    description="Identify a medicine from a photo and explain it in plain language",
    version="0.1.0",
)

ERROR_STATUS: Tuple[Tuple[type, int], ...] = (
    (NotIdentifiable, 422),
    (LookupFailure, 502),
    (SummarizationFailure, 502),
    (TranslationFailure, 502),
)


@lru_cache(maxsize=1)
def get_pipeline() -> MedicinePipeline:
    return MedicinePipeline.from_settings()


@lru_cache(maxsize=1)
def get_content_translator() -> ContentTranslator:
    return ContentTranslator(TextTranslator())


def get_locales() -> LocaleTable:
    return get_locale_table()


def _http_error(exc: PillIdentifierError) -> HTTPException:
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    logger.error("Unhandled pipeline error: %s", exc)
    return HTTPException(status_code=500, detail="Medicine lookup failed.")


def _check_language(language: Optional[str], locales: LocaleTable) -> str:
    language = language or settings.native_language
    if not locales.supports(language):
        raise HTTPException(status_code=400, detail=f"Unsupported language '{language}'.")
    return language


def _localized_response(
    content: MedicineContent,
    language: str,
    translator: ContentTranslator,
    locales: LocaleTable,
) -> MedicineResponse:
    session = DisplaySession(language=content.language, locales=locales)
    session.show(content)
    displayed = session.translate_to(language, translator) or content
    card = render_card(displayed, language, locales)
    return MedicineResponse.build(displayed, card, translation_error=session.error)


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.get("/languages", response_model=List[LanguageOption])
def languages(locales: LocaleTable = Depends(get_locales)) -> List[LanguageOption]:
    return [LanguageOption(code=code, name=name) for code, name in locales.languages.items()]


@app.post("/identify", response_model=MedicineResponse)
async def identify(
    file: UploadFile = File(...),
    language: Optional[str] = Form(None),
    pipeline: MedicinePipeline = Depends(get_pipeline),
    translator: ContentTranslator = Depends(get_content_translator),
    locales: LocaleTable = Depends(get_locales),
) -> MedicineResponse:
    """Identify the medicine in an uploaded photo and describe it."""
    language = _check_language(language, locales)
    if not (file.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="Uploaded file must be an image.")
    image_bytes = await file.read(settings.max_upload_bytes + 1)
    if not image_bytes:
        raise HTTPException(status_code=400, detail="Uploaded image is empty.")
    if len(image_bytes) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Uploaded image is too large.")

    try:
        content = await run_in_threadpool(
            pipeline.run, image_bytes, file.content_type, language
        )
    except PillIdentifierError as exc:
        raise _http_error(exc) from exc
    return await run_in_threadpool(_localized_response, content, language, translator, locales)


@app.get("/medicines/{name}", response_model=MedicineResponse)
async def medicine(
    name: str,
    language: Optional[str] = None,
    pipeline: MedicinePipeline = Depends(get_pipeline),
    translator: ContentTranslator = Depends(get_content_translator),
    locales: LocaleTable = Depends(get_locales),
) -> MedicineResponse:
    """Describe a medicine by name, skipping image identification."""
    language = _check_language(language, locales)
    try:
        content = await run_in_threadpool(pipeline.lookup, name, language)
    except PillIdentifierError as exc:
        raise _http_error(exc) from exc
    return await run_in_threadpool(_localized_response, content, language, translator, locales)


@app.post("/translate", response_model=TranslateResponse)
async def translate(
    payload: TranslateRequest,
    translator: ContentTranslator = Depends(get_content_translator),
    locales: LocaleTable = Depends(get_locales),
) -> TranslateResponse:
    """Translate a content tree, keeping its structure and numeric fields."""
    target_language = _check_language(payload.target_language, locales)
    try:
        content = MedicineContent.from_tree(payload.content, payload.source, payload.language)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid content: {exc}") from exc
    try:
        translated = await run_in_threadpool(translator.translate, content, target_language)
    except PillIdentifierError as exc:
        raise _http_error(exc) from exc
    return TranslateResponse(language=translated.language, content=translated.to_tree())


@app.post("/format", response_model=FormatResponse)
def format_text(payload: FormatRequest) -> FormatResponse:
    """Re-flow raw label text into paragraph and list blocks."""
    return FormatResponse(blocks=format_content(to_content_field(payload.content)))
