from __future__ import annotations

DEFAULT_SPEECH_LOCALE = "en-US"

# Target languages offered by the mobile client, in display order.
LANGUAGE_OPTIONS: list[tuple[str, str]] = [
    ("zh-CN", "Chinese"),
    ("en", "English"),
    ("ja", "Japanese"),
]

SPEECH_LOCALES: dict[str, str] = {
    "en": "en-US",
    "zh-CN": "zh-CN",
    "zh-TW": "zh-TW",
    "ja": "ja-JP",
    "ko": "ko-KR",
    "fr": "fr-FR",
    "de": "de-DE",
    "es": "es-ES",
    "vi": "vi-VN",
}


def speech_locale(code: str | None) -> str:
    if not code:
        return DEFAULT_SPEECH_LOCALE
    return SPEECH_LOCALES.get(code.strip(), DEFAULT_SPEECH_LOCALE)


def language_options() -> list[dict[str, str]]:
    return [
        {"code": code, "label": label, "speech_locale": speech_locale(code)}
        for code, label in LANGUAGE_OPTIONS
    ]
