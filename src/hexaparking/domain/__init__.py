"""Domain layer: value objects, entities, aggregates and inbound ports."""

from hexaparking.domain.car import Car, CarData, LicensePlateNumber
from hexaparking.domain.parking_lot import (
    ParkingLot,
    ParkingLotName,
    ParkingLotStatus,
    ParkingRecord,
    ParkingSpaceCount,
)

__all__ = [
    "Car",
    "CarData",
    "LicensePlateNumber",
    "ParkingLot",
    "ParkingLotName",
    "ParkingLotStatus",
    "ParkingRecord",
    "ParkingSpaceCount",
]
