"""
Routes registration for the FastAPI application.
"""

from fastapi import FastAPI

from hexaparking.api.v1.car.router import router as car_router
from hexaparking.api.v1.health.router import router as health_router
from hexaparking.api.v1.integrated.router import router as integrated_router
from hexaparking.api.v1.parking_lot.router import router as parking_lot_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # Health check (no prefix)
    app.include_router(health_router)

    # Parking lots and parking records
    app.include_router(parking_lot_router)

    # Car registration
    app.include_router(car_router)

    # Registration and parking in one call
    app.include_router(integrated_router)
