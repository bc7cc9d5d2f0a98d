import os
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["APP_ENV"] = "test"

from src.backend.app.main import app
from src.backend.app.core.genai import get_translation_client
from src.backend.app.services.ai_service import IMAGE_MIME_TYPE, TranslationClient


class FakeTranslationClient(TranslationClient):
    """Records every call and answers with a canned result or error."""

    def __init__(self, result: str = "", error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls = []

    async def translate_text(self, prompt: str) -> str:
        self.calls.append({"kind": "text", "prompt": prompt})
        if self.error is not None:
            raise self.error
        return self.result

    async def translate_image(self, prompt: str, image_base64: str, mime_type: str = IMAGE_MIME_TYPE) -> str:
        self.calls.append({"kind": "image", "prompt": prompt, "image": image_base64, "mime_type": mime_type})
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_client():
    return FakeTranslationClient(result="你好，世界")


@pytest_asyncio.fixture
async def client(fake_client):
    app.dependency_overrides[get_translation_client] = lambda: fake_client
    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
            yield http_client
    finally:
        app.dependency_overrides.pop(get_translation_client, None)
