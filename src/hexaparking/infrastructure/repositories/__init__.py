"""Abstract repository interfaces (outbound ports)."""

from hexaparking.infrastructure.repositories.car_repository import (
    CarLoadPort,
    CarRepository,
    CarSavePort,
)
from hexaparking.infrastructure.repositories.parking_lot_repository import (
    ParkingLotLoadPort,
    ParkingLotRepository,
    ParkingLotSavePort,
)

__all__ = [
    "CarLoadPort",
    "CarRepository",
    "CarSavePort",
    "ParkingLotLoadPort",
    "ParkingLotRepository",
    "ParkingLotSavePort",
]
