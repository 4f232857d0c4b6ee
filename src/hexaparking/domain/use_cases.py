"""
Inbound ports (use cases) exposed by the application services.

REST adapters depend on these interfaces only; the concrete services in
hexaparking.services implement them.
"""

from abc import ABC, abstractmethod
from collections.abc import Collection

from hexaparking.domain.car import Car, CarData, LicensePlateNumber
from hexaparking.domain.parking_lot import (
    ParkingLot,
    ParkingLotName,
    ParkingLotStatus,
    ParkingRecord,
    ParkingSpaceCount,
)


class ParkingLotCommandUseCase(ABC):
    """State-changing parking lot operations."""

    @abstractmethod
    async def create_parking_lot(
        self, name: ParkingLotName, total_spaces: ParkingSpaceCount
    ) -> ParkingLot:
        """
        Register a new parking lot.

        Raises:
            ParkingLotAlreadyExistsError: If the name is taken
        """

    @abstractmethod
    async def park_car(
        self, parking_lot_name: ParkingLotName, license_plate_number: LicensePlateNumber
    ) -> ParkingRecord:
        """
        Park a car in a lot.

        Raises:
            ParkingLotNotFoundError: If the lot does not exist
            CarAlreadyParkedError: If the plate has an active record
            ParkingLotFullError: If the lot has no free space
        """

    @abstractmethod
    async def leave_car(self, license_plate_number: LicensePlateNumber) -> ParkingRecord:
        """
        Close the active record of a plate.

        Raises:
            CarNotParkedError: If the plate has no active record
        """

    @abstractmethod
    async def delete_parking_lot(self, name: ParkingLotName) -> bool:
        """Remove an empty parking lot. Returns False if it did not exist."""


class ParkingLotQueryUseCase(ABC):
    """Read-only parking lot operations."""

    @abstractmethod
    async def get_parking_lot_status(self, name: ParkingLotName) -> ParkingLotStatus:
        """
        Compute the current occupancy of a lot.

        Raises:
            ParkingLotNotFoundError: If the lot does not exist
        """

    @abstractmethod
    async def get_parked_cars(self, name: ParkingLotName) -> list[ParkingRecord]:
        """Active records of a lot."""

    @abstractmethod
    async def find_parking_record(
        self, license_plate_number: LicensePlateNumber
    ) -> ParkingRecord | None:
        """Active record of a plate, or None."""


class CarCommandUseCase(ABC):
    """Car registration operations."""

    @abstractmethod
    async def bulk_create_car(self, cars: Collection[CarData]) -> list[Car]:
        """
        Register several cars at once.

        Raises:
            CarAlreadyRegisteredError: If any plate is already registered
        """


class CarQueryUseCase(ABC):
    """Car lookup operations."""

    @abstractmethod
    async def get_by_license_plate_number(
        self, license_plate_number: LicensePlateNumber
    ) -> Car:
        """
        Look up a registered car.

        Raises:
            CarNotFoundError: If no car has this plate
        """
