from __future__ import annotations

import base64
import logging
from abc import ABC, abstractmethod

from google import genai
from google.genai import types

from ..core.config import DEFAULT_GEMINI_MODEL
from ..core.errors import TranslationError, TranslationErrorKind

logger = logging.getLogger(__name__)

# The mobile picker hands over JPEG and PNG alike; every image is declared as JPEG.
IMAGE_MIME_TYPE = "image/jpeg"


class TranslationClient(ABC):
    """One-shot access to a generative model that returns translated text."""

    async def aclose(self) -> None:
        """Release network resources held by the client."""

    @abstractmethod
    async def translate_text(self, prompt: str) -> str:
        """Send ``prompt`` as the whole user message and return the model text."""

    @abstractmethod
    async def translate_image(self, prompt: str, image_base64: str, mime_type: str = IMAGE_MIME_TYPE) -> str:
        """Send ``prompt`` together with an inline image and return the model text."""


def require_text(value: str | None) -> str:
    text = (value or "").strip()
    if not text:
        raise TranslationError(TranslationErrorKind.EMPTY_RESULT, "Empty translation result")
    return text


def extract_text(response) -> str:
    return require_text(getattr(response, "text", None))


class GeminiTranslationClient(TranslationClient):
    def __init__(self, client: genai.Client, model: str = DEFAULT_GEMINI_MODEL):
        self.client = client
        self.model = model

    async def aclose(self) -> None:
        await self.client.aio.aclose()

    async def translate_text(self, prompt: str) -> str:
        contents = [
            types.Content(role="user", parts=[types.Part.from_text(text=prompt)]),
        ]
        return await self._generate(contents)

    async def translate_image(self, prompt: str, image_base64: str, mime_type: str = IMAGE_MIME_TYPE) -> str:
        try:
            image_bytes = base64.b64decode(image_base64)
        except ValueError as exc:
            raise TranslationError(TranslationErrorKind.INVALID_IMAGE, f"Image payload is not base64: {exc}") from exc
        contents = [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=prompt),
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                ],
            ),
        ]
        return await self._generate(contents)

    async def _generate(self, contents: list[types.Content]) -> str:
        logger.debug("generate_content model=%s parts=%d", self.model, sum(len(c.parts or []) for c in contents))
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=contents,
            )
        except Exception as exc:
            raise TranslationError(TranslationErrorKind.PROVIDER, f"Model call failed: {exc}") from exc
        return extract_text(response)
