import pytest

from src.backend.app.core.config import DEFAULT_GEMINI_MODEL, get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    for name in ("LOG_LEVEL", "GEMINI_API_KEY", "GEMINI_MODEL", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults(fresh_settings):
    settings = get_settings()
    assert settings.app_name == "snaptranslate"
    assert settings.app_env == "test"
    assert settings.log_level == "INFO"
    assert settings.gemini_api_key == ""
    assert settings.gemini_model == DEFAULT_GEMINI_MODEL
    assert settings.cors_allow_origins == ["*"]


def test_environment_overrides(fresh_settings):
    fresh_settings.setenv("GEMINI_API_KEY", "secret")
    fresh_settings.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    fresh_settings.setenv("LOG_LEVEL", "debug")
    fresh_settings.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,")
    settings = get_settings()
    assert settings.gemini_api_key == "secret"
    assert settings.gemini_model == "gemini-2.5-pro"
    assert settings.log_level == "DEBUG"
    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_settings_are_cached(fresh_settings):
    assert get_settings() is get_settings()
