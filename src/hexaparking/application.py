"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from hexaparking import __version__
from hexaparking.config import get_settings
from hexaparking.core.logging import logger
from hexaparking.domain.exceptions import ParkingDomainError
from hexaparking.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    parking_domain_exception_handler,
    validation_exception_handler,
)
from hexaparking.lifespan import lifespan
from hexaparking.middleware import TraceIDMiddleware
from hexaparking.openapi import configure_openapi
from hexaparking.routes import register_routes


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Docs URLs must be known before the FastAPI instance is created
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )

    # Exception handlers (RFC 7807 Problem Details)
    app.add_exception_handler(ParkingDomainError, parking_domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(TraceIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=settings.get_cors_allowed_methods(),
        allow_headers=settings.get_cors_allowed_headers(),
    )

    register_routes(app)

    configure_openapi(app)

    logger.info(f"FastAPI application created (v{__version__})")
    logger.info(f"CORS origins: {settings.get_allowed_origins()}")

    return app
