# File: src/interviewtrainer/main.py
"""FastAPI application factory."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from interviewtrainer.core.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for startup and shutdown events."""
    start_time = datetime.now()
    logger.info("app.startup", message="Interview Trainer starting up", timestamp=start_time.isoformat())

    from interviewtrainer.api.health import set_app_start_time

    set_app_start_time(start_time)

    yield

    logger.info("app.shutdown", message="Interview Trainer shutting down gracefully")


def _setup_middleware(app: FastAPI) -> None:
    """Configure all middleware in correct order."""
    # Last added = first executed, so RequestIDMiddleware wraps Sentry tagging
    from interviewtrainer.middleware.logging import RequestIDMiddleware
    from interviewtrainer.middleware.sentry import SentryContextMiddleware

    app.add_middleware(SentryContextMiddleware)
    app.add_middleware(RequestIDMiddleware)


def _register_routers(app: FastAPI) -> None:
    """Register all API routers."""
    from interviewtrainer.api.health import router as health_router
    from interviewtrainer.api.interview import router as interview_router

    app.include_router(health_router)
    app.include_router(interview_router)


def create_app() -> FastAPI:
    """Application factory for Interview Trainer."""
    from interviewtrainer.core.sentry import init_sentry

    sentry_enabled = init_sentry()

    app = FastAPI(
        title="Interview Trainer API",
        description="Interview practice session lifecycle",
        version="0.1.0",
        lifespan=lifespan,
    )

    from interviewtrainer.core.exception_handlers import register_exception_handlers

    register_exception_handlers(app)
    _setup_middleware(app)
    _register_routers(app)

    logger.info(
        "app.configured",
        message="FastAPI application created successfully",
        sentry_enabled=sentry_enabled,
    )

    return app


def run() -> None:
    """Development server entrypoint."""
    uvicorn.run(
        "interviewtrainer.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
