from __future__ import annotations

from enum import Enum


class TranslationMode(str, Enum):
    TEXT = "text"
    IMAGE = "image"


# Source text and target language are pasted in verbatim; whatever the client
# sends becomes part of the model instruction.
_TEXT_PROMPT = """
You are a professional translation engine.

Task:
- Translate the given text into the target language.
- Keep the original meaning.
- Do NOT add explanations.
- Do NOT add quotes.
- Output ONLY the translated text.

Target language:
{target_lang}

Text:
{text}
"""

_IMAGE_PROMPT = """
You are a professional translation engine.

Task:
- Read all text visible in the image.
- Translate it into the target language.
- Keep the original meaning.
- Do NOT add explanations.
- Do NOT add quotes.
- Output ONLY the translated text.

Target language:
{target_lang}
"""


def build_text_prompt(target_lang: str, text: str) -> str:
    return _TEXT_PROMPT.format(target_lang=target_lang, text=text).strip()


def build_image_prompt(target_lang: str) -> str:
    return _IMAGE_PROMPT.format(target_lang=target_lang).strip()


def build_prompt(mode: TranslationMode, target_lang: str, text: str | None = None) -> str:
    if mode is TranslationMode.IMAGE:
        return build_image_prompt(target_lang)
    return build_text_prompt(target_lang, text or "")
