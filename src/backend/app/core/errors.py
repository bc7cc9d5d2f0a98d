from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

TRANSLATION_FAILED = "Translation failed"


class TranslationErrorKind(str, Enum):
    EMPTY_RESULT = "empty_result"
    PROVIDER = "provider"
    NOT_CONFIGURED = "not_configured"
    INVALID_IMAGE = "invalid_image"


class TranslationError(Exception):
    """A translation attempt that produced no usable text.

    The HTTP surface reports every kind as the same generic failure; ``kind``
    lets code built on top of the handler tell "the model returned nothing"
    apart from "the provider call blew up".
    """

    def __init__(self, kind: TranslationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


def standard_error(message: str) -> dict:
    return {"error": message}


def error_response(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=standard_error(message))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, exc.detail if exc.detail else "HTTP error")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(400, "Invalid request")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(500, "Internal server error")
