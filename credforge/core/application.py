"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a FastAPI application with
logging configured, exception handlers registered and the v1 routers mounted.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from credforge.adapters.api.v1 import api_router
from credforge.core.config.settings import settings
from credforge.core.handlers import register_exception_handlers
from credforge.core.logging import configure_logging, logger


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Credential validation and secure token issuance.",
        default_response_class=JSONResponse,
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    logger.info("application_created", env=settings.APP_ENV, version=settings.VERSION)
    return app
