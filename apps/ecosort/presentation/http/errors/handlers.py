"""Exception Handlers.

도메인 예외를 HTTP 응답으로 변환합니다.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ecosort.domain.exceptions import (
    ClassificationError,
    ClassificationErrorKind,
    DomainError,
    HistoryUnavailableError,
    InvalidImagePayloadError,
    ScanRecordNotFoundError,
    UnsupportedModelError,
)

logger = logging.getLogger(__name__)

CLASSIFICATION_STATUS: dict[ClassificationErrorKind, int] = {
    ClassificationErrorKind.CONFIGURATION: 503,
    ClassificationErrorKind.UPSTREAM: 502,
    ClassificationErrorKind.FORMAT: 502,
}


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ClassificationError)
    async def classification_error_handler(request: Request, exc: ClassificationError):
        logger.warning(
            "classification_failed",
            extra={
                "kind": exc.kind.value,
                "reason": exc.reason,
                "cause": repr(exc.__cause__) if exc.__cause__ else None,
            },
        )
        return JSONResponse(
            status_code=CLASSIFICATION_STATUS[exc.kind],
            content={
                "detail": exc.message,
                "code": "CLASSIFICATION_FAILED",
                "kind": exc.kind.value,
            },
        )

    @app.exception_handler(InvalidImagePayloadError)
    async def invalid_image_handler(request: Request, exc: InvalidImagePayloadError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_IMAGE"},
        )

    @app.exception_handler(UnsupportedModelError)
    async def unsupported_model_handler(request: Request, exc: UnsupportedModelError):
        return JSONResponse(
            status_code=400,
            content={
                "detail": {
                    "error": "unsupported_model",
                    "message": exc.message,
                    "supported_models": exc.supported_models,
                },
                "code": "UNSUPPORTED_MODEL",
            },
        )

    @app.exception_handler(ScanRecordNotFoundError)
    async def scan_not_found_handler(request: Request, exc: ScanRecordNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "SCAN_NOT_FOUND"},
        )

    @app.exception_handler(HistoryUnavailableError)
    async def history_unavailable_handler(request: Request, exc: HistoryUnavailableError):
        logger.warning(
            "scan_history_unavailable",
            extra={"cause": repr(exc.__cause__) if exc.__cause__ else None},
        )
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "HISTORY_UNAVAILABLE"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )
