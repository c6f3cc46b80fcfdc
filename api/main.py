#!/usr/bin/env python3
"""
paramguard API - demonstration HTTP API for declarative request validation.

This FastAPI application shows the validation layer in place:
- Every fancy resource endpoint declares a named validator
- Invalid parameters are answered with 400 and a structured error body
  before any handler code runs
- Registered validators can be inspected at /api/validators
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paramguard.integration import install
from paramguard.logging_config import configure_logging, get_logger

from .dependencies import get_validator_registry
from .settings import get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()
    logger.info(f"{settings.app_name} starting with validators: {sorted(get_validator_registry())}")

    yield

    logger.info(f"{settings.app_name} shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    # Format: 2026-01-06T14:05:52Z [api] LEVEL message
    configure_logging(source="api", level=settings.log_level)

    app = FastAPI(
        title="paramguard API",
        description="Fancy resources guarded by declarative request validators",
        lifespan=lifespan,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
    )

    # Validators must be installed before any guarded route is hit
    install(app, get_validator_registry(), status_code=settings.reject_status_code)

    # Register routers
    from .routers import fancy, validators

    app.include_router(fancy.router)
    app.include_router(validators.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": settings.app_name}

    return app


# Create app instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="127.0.0.1", port=8000, log_config=None)
