from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from ..core.errors import (
    TRANSLATION_FAILED,
    TranslationError,
    TranslationErrorKind,
    error_response,
)
from ..core.genai import get_translation_client
from ..schemas.translate import ErrorResponse, TranslationRequest, TranslationResponse
from ..services.ai_service import IMAGE_MIME_TYPE, TranslationClient, require_text
from ..services.image_payload import strip_data_uri_prefix
from ..services.prompt_builder import TranslationMode, build_prompt

logger = logging.getLogger(__name__)

translate_route = APIRouter(prefix='/api', tags=['translate'])


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def select_mode(payload: TranslationRequest) -> TranslationMode | None:
    """Image wins over text; None means there is nothing to translate."""
    if not _is_blank(payload.image):
        return TranslationMode.IMAGE
    if not _is_blank(payload.text):
        return TranslationMode.TEXT
    return None


async def run_translation(
    client: Optional[TranslationClient],
    mode: TranslationMode,
    payload: TranslationRequest,
) -> str:
    if client is None:
        raise TranslationError(TranslationErrorKind.NOT_CONFIGURED, "Translation client is not configured")

    prompt = build_prompt(mode, payload.target_lang, payload.text)
    if mode is TranslationMode.IMAGE:
        image_base64 = strip_data_uri_prefix(payload.image.strip())
        result = await client.translate_image(prompt, image_base64, IMAGE_MIME_TYPE)
    else:
        result = await client.translate_text(prompt)

    # any TranslationClient may return blank text, not only the Gemini one
    return require_text(result)


@translate_route.post(
    '/translate',
    response_model=TranslationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def translate(
    request: Request,
    client: Optional[TranslationClient] = Depends(get_translation_client),
):
    try:
        payload = TranslationRequest.model_validate(await request.json())

        if _is_blank(payload.target_lang):
            return error_response(status.HTTP_400_BAD_REQUEST, "Missing targetLang")

        mode = select_mode(payload)
        if mode is None:
            return error_response(status.HTTP_400_BAD_REQUEST, "Missing text")

        logger.debug("Translating mode=%s target_lang=%r", mode.value, payload.target_lang)
        translated_text = await run_translation(client, mode, payload)
        return TranslationResponse(text=translated_text)
    except TranslationError as exc:
        logger.exception("Translation error (%s)", exc.kind.value, exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, TRANSLATION_FAILED)
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Translation error", exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, TRANSLATION_FAILED)
