"""Read the medicine name off a package photo."""

from __future__ import annotations

import logging

from pill_identifier.errors import NotIdentifiable
from pill_identifier.llm.openai_client import OpenAIChatClient
from pill_identifier.llm.prompts import IDENTIFY_PROMPT

logger = logging.getLogger(__name__)


class MedicineIdentifier:
    """Identifies and spell-corrects a medicine name from an image."""

    def __init__(self, client: OpenAIChatClient | None = None) -> None:
        self.client = client or OpenAIChatClient()

    def identify(self, image_bytes: bytes, mime_type: str) -> str:
        if not image_bytes:
            raise NotIdentifiable("The uploaded image is empty.")
        try:
            reply = self.client.describe_image(IDENTIFY_PROMPT, image_bytes, mime_type)
        except Exception as exc:
            logger.error("Medicine identification request failed: %s", exc)
            raise NotIdentifiable("Failed to identify medicine from the image via AI.") from exc
        # Models occasionally wrap the name in quotes or add a trailing period.
        name = reply.strip().splitlines()[0].strip(" \"'.") if reply.strip() else ""
        if not name:
            raise NotIdentifiable("Could not identify a medicine name from the image.")
        logger.info("Identified medicine %r from image", name)
        return name
