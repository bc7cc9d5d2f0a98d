from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request
from google import genai

from .config import get_settings
from ..services.ai_service import GeminiTranslationClient, TranslationClient

logger = logging.getLogger(__name__)

CLIENT_STATE_KEY = "translation_client"


def init_translation_client(app, api_key: Optional[str] = None, model: Optional[str] = None) -> None:
    settings = get_settings()
    key = api_key or settings.gemini_api_key
    if not key:
        raise RuntimeError('GEMINI_API_KEY must be set in environment (see .env)')
    client = GeminiTranslationClient(
        genai.Client(api_key=key),
        model=model or settings.gemini_model,
    )
    app.state.__setattr__(CLIENT_STATE_KEY, client)
    logger.info("Translation client ready (model=%s)", client.model)


async def close_translation_client(app) -> None:
    client: Optional[TranslationClient] = getattr(app.state, CLIENT_STATE_KEY, None)
    if client is not None:
        try:
            await client.aclose()
        finally:
            delattr(app.state, CLIENT_STATE_KEY)


def get_translation_client(request: Request) -> Optional[TranslationClient]:
    """FastAPI dependency returning the process-wide model client, if configured.

    Returns None instead of raising so the translate handler can still answer
    validation errors with 400 and report the missing client inside its own
    error boundary.
    """
    return getattr(request.app.state, CLIENT_STATE_KEY, None)
