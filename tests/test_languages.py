import pytest
import httpx

from src.backend.app.main import app
from src.backend.app.services.language_utils import speech_locale


@pytest.mark.asyncio
async def test_list_languages():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/api/languages")
        assert resp.status_code == 200, resp.text
        assert resp.json() == [
            {"code": "zh-CN", "label": "Chinese", "speechLocale": "zh-CN"},
            {"code": "en", "label": "English", "speechLocale": "en-US"},
            {"code": "ja", "label": "Japanese", "speechLocale": "ja-JP"},
        ]


@pytest.mark.parametrize(
    "code, expected",
    [
        ("ja", "ja-JP"),
        ("zh-TW", "zh-TW"),
        ("vi", "vi-VN"),
        (" ko ", "ko-KR"),
        ("klingon", "en-US"),
        ("", "en-US"),
        (None, "en-US"),
    ],
)
def test_speech_locale(code, expected):
    assert speech_locale(code) == expected
