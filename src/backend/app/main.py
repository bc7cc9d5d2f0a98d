import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import get_settings
from .core.errors import register_exception_handlers
from .core.genai import init_translation_client, close_translation_client
from .api.translate import translate_route as translate_router
from .api.languages import router as languages_router

settings = get_settings()
logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    app_env = getattr(get_settings(), 'app_env', 'development')
    if app_env != "test":
        init_translation_client(app)
    try:
        yield
    finally:
        # Shutdown
        await close_translation_client(app)


app = FastAPI(title="SnapTranslate API", lifespan=lifespan)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)


@app.middleware("http")
async def security_headers(request, call_next):
    response = await call_next(request)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(translate_router)
app.include_router(languages_router)
