"""Application services implementing the inbound ports."""

from hexaparking.services.car import CarService
from hexaparking.services.integrated_parking import IntegratedParkingService
from hexaparking.services.parking_lot import ParkingLotService

__all__ = [
    "CarService",
    "IntegratedParkingService",
    "ParkingLotService",
]
