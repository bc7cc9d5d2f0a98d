#!/usr/bin/env python3

"""Send a one-off translation to Gemini using SnapTranslate's settings."""

import asyncio
import sys

from google import genai

from src.backend.app.core.config import get_settings
from src.backend.app.services.ai_service import GeminiTranslationClient
from src.backend.app.services.prompt_builder import build_text_prompt

DEFAULT_TEXT = "hello world"
DEFAULT_TARGET_LANG = "zh-CN"


async def main() -> None:
    text = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_TEXT
    target_lang = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_TARGET_LANG

    settings = get_settings()
    if not settings.gemini_api_key:
        raise RuntimeError("GEMINI_API_KEY is not configured")

    client = GeminiTranslationClient(genai.Client(api_key=settings.gemini_api_key), model=settings.gemini_model)
    translated = await client.translate_text(build_text_prompt(target_lang, text))
    print(f"[{settings.gemini_model}] {text!r} -> {target_lang}: {translated}")


if __name__ == "__main__":
    asyncio.run(main())
