"""
Gatehouse API - FastAPI application entry point.

This module initializes the FastAPI application and configures
middleware, routers, and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gatehouse_core import get_logger, init_logging
from gatehouse_core.store import JSONFileCredentialStore

from .config import settings
from .routers import auth

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Loads the credential store once at startup and attaches it to app state.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    init_logging(settings.log_level, json_output=settings.log_json)
    logger.info("Starting Gatehouse API", extra={"version": settings.version})

    app.state.credential_store = JSONFileCredentialStore.load(settings.credentials_path)

    yield

    logger.info("Shutting down Gatehouse API")


def create_app() -> FastAPI:
    """
    Build a FastAPI application instance.

    Returns:
        Configured application.
    """
    app = FastAPI(
        title="Gatehouse API",
        description="Gatehouse - administrator authentication API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Refresh cookie is cross-site, so credentials must be allowed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])

    @app.get("/api/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status and version.
        """
        return {"status": "healthy", "version": settings.version}

    return app


app = create_app()
