"""EcoSort API Main Application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecosort.presentation.http.controllers import (
    health_router,
    history_router,
    scan_router,
    tips_router,
)
from ecosort.presentation.http.errors import register_exception_handlers
from ecosort.setup.config import get_settings
from ecosort.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI 라이프스팬 이벤트."""
    settings = get_settings()
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")
    yield
    logger.info(f"Shutting down {settings.service_name}")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성."""
    settings = get_settings()
    setup_logging()

    app = FastAPI(
        title="EcoSort API",
        description="AI-powered waste classification with scan history",
        version=settings.service_version,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(scan_router, prefix="/api/v1")
    app.include_router(history_router, prefix="/api/v1")
    app.include_router(tips_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("ecosort.main:app", host="0.0.0.0", port=8000)
