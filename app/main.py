"""
FastAPI application setup.
Wires configuration, logging, middleware, error handlers and routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from app.config.settings import get_settings
from app.core.logging import configure_logging
from app.core.error_handlers import setup_error_handlers
from app.middleware import RequestContextMiddleware

# Get application settings
settings = get_settings()

configure_logging(
    settings.log_level.value,
    json_output=settings.log_json,
    fmt=settings.log_format,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.
    Optionally creates the schema on startup and disposes the engine on shutdown.
    """
    from app.core.db import engine, init_db

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        if settings.auto_create_tables:
            init_db()
        logger.info("Application startup complete")
    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    yield

    logger.info("Shutting down application")
    engine.dispose()
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    # Add CORS middleware with configuration
    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    # Request id and access logging
    app.add_middleware(RequestContextMiddleware)

    # Set up error handlers
    setup_error_handlers(app)

    # Include API routers
    from app.api import categories_router, phrases_router, health_router

    app.include_router(categories_router)
    app.include_router(phrases_router)
    app.include_router(health_router)

    return app


# Create application instance
app = create_app()


@app.get("/")
async def root():
    """Root endpoint for basic liveness check."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "status": "running"
    }
