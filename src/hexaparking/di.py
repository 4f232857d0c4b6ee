"""
Dependency injection container (composition root).

Wires the storage adapters into the application services and exposes them
to FastAPI endpoints through typing.Annotated aliases. The factory and the
services are process-wide singletons: the memory stores and the service
locks must be shared by every request.

To rebuild everything (tests, settings changes):
    reset_dependencies()
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from hexaparking.config import get_settings
from hexaparking.domain.use_cases import (
    CarCommandUseCase,
    CarQueryUseCase,
    ParkingLotCommandUseCase,
    ParkingLotQueryUseCase,
)
from hexaparking.infrastructure import InfrastructureFactory
from hexaparking.services import (
    CarService,
    IntegratedParkingService,
    ParkingLotService,
)

# ============================================================================
# Infrastructure Dependencies
# ============================================================================


@lru_cache
def get_infrastructure_factory() -> InfrastructureFactory:
    """
    Get the infrastructure factory built from settings.

    Returns:
        Configured infrastructure factory (singleton)
    """
    return InfrastructureFactory.from_settings(get_settings())


InfrastructureFactoryDep = Annotated[
    InfrastructureFactory, Depends(get_infrastructure_factory)
]
"""Injected InfrastructureFactory instance."""


# ============================================================================
# Parking Lot Dependencies
# ============================================================================


@lru_cache
def get_parking_lot_service() -> ParkingLotService:
    """
    Get the parking lot service.

    The same repository object serves as load and save port.

    Returns:
        ParkingLotService (singleton)
    """
    repository = get_infrastructure_factory().get_parking_lot_repository()
    return ParkingLotService(load_port=repository, save_port=repository)


ParkingLotCommandDep = Annotated[
    ParkingLotCommandUseCase, Depends(get_parking_lot_service)
]
"""Injected parking lot command use case."""

ParkingLotQueryDep = Annotated[ParkingLotQueryUseCase, Depends(get_parking_lot_service)]
"""Injected parking lot query use case."""


# ============================================================================
# Car Dependencies
# ============================================================================


@lru_cache
def get_car_service() -> CarService:
    """
    Get the car service.

    Returns:
        CarService (singleton)
    """
    repository = get_infrastructure_factory().get_car_repository()
    return CarService(load_port=repository, save_port=repository)


CarCommandDep = Annotated[CarCommandUseCase, Depends(get_car_service)]
"""Injected car command use case."""

CarQueryDep = Annotated[CarQueryUseCase, Depends(get_car_service)]
"""Injected car query use case."""


# ============================================================================
# Integrated Parking Dependencies
# ============================================================================


def get_integrated_parking_service() -> IntegratedParkingService:
    """
    Get the integrated parking service.

    Returns:
        IntegratedParkingService composed from the car and parking lot services
    """
    car_service = get_car_service()
    parking_lot_service = get_parking_lot_service()
    return IntegratedParkingService(
        car_command=car_service,
        car_query=car_service,
        parking_lot_command=parking_lot_service,
        parking_lot_query=parking_lot_service,
    )


IntegratedParkingServiceDep = Annotated[
    IntegratedParkingService, Depends(get_integrated_parking_service)
]
"""Injected IntegratedParkingService."""


def reset_dependencies() -> None:
    """Drop cached settings, factory and services."""
    get_settings.cache_clear()
    get_infrastructure_factory.cache_clear()
    get_parking_lot_service.cache_clear()
    get_car_service.cache_clear()
