"""
Application lifecycle management.

Builds the storage adapters at startup so configuration errors surface
before the first request.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from hexaparking.di import get_car_service, get_infrastructure_factory, get_parking_lot_service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Args:
        app: FastAPI application instance
    """
    # Startup
    logger.info("Starting hexa parking service...")
    logger.info(f"Application version: {app.version}")

    factory = get_infrastructure_factory()
    get_parking_lot_service()
    get_car_service()
    logger.info(f"Storage provider ready: {factory.provider}")

    yield

    # Shutdown
    logger.info("Shutting down hexa parking service...")
    await logger.complete()
