"""Command-line entry point: identify a medicine photo and print its card."""

from __future__ import annotations

import argparse
import logging
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional

from pill_identifier.config import settings
from pill_identifier.errors import PillIdentifierError
from pill_identifier.i18n.locales import get_locale_table
from pill_identifier.llm.translator import TextTranslator
from pill_identifier.pipeline.identify import MedicinePipeline
from pill_identifier.pipeline.session import DisplaySession
from pill_identifier.pipeline.translator import ContentTranslator
from pill_identifier.presentation import render_card, render_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("image", nargs="?", type=Path, help="Photo of the medicine package.")
    target.add_argument("--name", help="Look up a medicine by name instead of a photo.")
    parser.add_argument(
        "--language",
        default=settings.native_language,
        choices=sorted(get_locale_table().languages),
        help="Display language.",
    )
    parser.add_argument("--mime-type", help="Override the image MIME type.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)
    locales = get_locale_table()
    try:
        pipeline = MedicinePipeline.from_settings()
    except ValueError as exc:
        logger.error("Configuration error: %s", exc)
        return 2

    try:
        if args.name:
            content = pipeline.lookup(args.name, args.language, on_progress=logger.info)
        else:
            image_path: Path = args.image
            if not image_path.exists():
                logger.error("Image %s does not exist", image_path)
                return 2
            mime_type = args.mime_type or mimetypes.guess_type(image_path.name)[0] or "image/jpeg"
            content = pipeline.run(
                image_path.read_bytes(), mime_type, args.language, on_progress=logger.info
            )
    except PillIdentifierError as exc:
        logger.error("%s: %s", locales.text(args.language, "errorTitle"), exc)
        return 1

    session = DisplaySession(language=content.language, locales=locales)
    session.show(content)
    if args.language != content.language:
        logger.info(
            locales.text(
                args.language, "translating", language=locales.language_name(args.language)
            )
        )
    displayed = session.translate_to(args.language, ContentTranslator(TextTranslator()))
    if session.error:
        logger.warning(session.error)

    sys.stdout.write(render_text(render_card(displayed, args.language, locales)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
