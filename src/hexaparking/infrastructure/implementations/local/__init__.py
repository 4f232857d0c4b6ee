"""Local file-based infrastructure implementations for development."""

from hexaparking.infrastructure.implementations.local.car_repository import (
    LocalCarRepository,
)
from hexaparking.infrastructure.implementations.local.parking_lot_repository import (
    LocalParkingLotRepository,
)

__all__ = [
    "LocalCarRepository",
    "LocalParkingLotRepository",
]
