from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache
import os
from dotenv import load_dotenv


DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"


class Settings(BaseSettings):
    app_name: str
    app_env: str
    log_level: str
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    cors_allow_origins: List[str] = ["*"]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # get_settings() reads the environment itself; comma separated lists
        # such as CORS_ALLOW_ORIGINS are not JSON and would fail env parsing
        return (init_settings,)


@lru_cache()
def get_settings() -> Settings:
    load_dotenv()

    app_env = os.getenv('APP_ENV', 'development').strip().lower() or 'development'
    log_level = os.getenv('LOG_LEVEL', 'INFO').strip().upper() or 'INFO'

    gemini_api_key = os.getenv('GEMINI_API_KEY', '')
    gemini_model = os.getenv('GEMINI_MODEL', '').strip() or DEFAULT_GEMINI_MODEL

    cors_origins = os.getenv('CORS_ALLOW_ORIGINS')
    if cors_origins:
        cors_allow_origins = [o.strip() for o in cors_origins.split(',') if o.strip()]
    else:
        cors_allow_origins = ["*"]

    return Settings(
        app_name="snaptranslate",
        app_env=app_env,
        log_level=log_level,
        gemini_api_key=gemini_api_key,
        gemini_model=gemini_model,
        cors_allow_origins=cors_allow_origins,
    )
