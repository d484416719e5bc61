"""Thin wrapper around the OpenAI Responses API."""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, Optional

from openai import OpenAI

from pill_identifier.config import settings
from pill_identifier.errors import LLMResponseError


class OpenAIChatClient:
    """Lazily initializes the OpenAI Python SDK."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        vision_model: Optional[str] = None,
    ) -> None:
        api_key = api_key or settings.openai_api_key
        if not api_key:
            raise ValueError("OPENAI_API_KEY is not configured in the environment.")
        self.model = model or settings.openai_model_chat
        self.vision_model = vision_model or settings.openai_model_vision
        self.client = OpenAI(api_key=api_key, base_url=base_url or settings.openai_base_url)

    def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        schema_name: str,
        schema: Dict[str, Any],
        temperature: float = 0.2,
        max_output_tokens: int = 2000,
    ) -> Any:
        """Request a reply constrained to a JSON schema and decode it."""
        response = self.client.responses.create(
            model=self.model,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            input=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "schema": schema,
                    "strict": False,
                }
            },
        )
        raw = self._extract_text(response)
        if not raw:
            raise LLMResponseError(f"Empty reply for '{schema_name}'.")
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise LLMResponseError(f"Reply for '{schema_name}' is not valid JSON.") from exc

    def describe_image(
        self,
        prompt: str,
        image_bytes: bytes,
        mime_type: str,
        max_output_tokens: int = 100,
    ) -> str:
        encoded = base64.b64encode(image_bytes).decode("ascii")
        response = self.client.responses.create(
            model=self.vision_model,
            temperature=0,
            max_output_tokens=max_output_tokens,
            input=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "input_image",
                            "image_url": f"data:{mime_type};base64,{encoded}",
                        },
                        {"type": "input_text", "text": prompt},
                    ],
                }
            ],
        )
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response) -> str:
        chunks: list[str] = []
        for item in response.output or []:
            for content in getattr(item, "content", None) or []:
                content_type = getattr(content, "type", None)
                content_text = getattr(content, "text", None)
                if isinstance(content, dict):
                    content_type = content.get("type", content_type)
                    content_text = content.get("text", content_text)
                if content_type in {"output_text", "text"} and content_text:
                    chunks.append(str(content_text))
        return "\n".join(part.strip() for part in chunks if part).strip()
