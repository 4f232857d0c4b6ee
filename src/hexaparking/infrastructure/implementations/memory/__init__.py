"""Process-local in-memory implementations."""

from hexaparking.infrastructure.implementations.memory.car_repository import (
    MemoryCarRepository,
)
from hexaparking.infrastructure.implementations.memory.parking_lot_repository import (
    MemoryParkingLotRepository,
)

__all__ = [
    "MemoryCarRepository",
    "MemoryParkingLotRepository",
]
