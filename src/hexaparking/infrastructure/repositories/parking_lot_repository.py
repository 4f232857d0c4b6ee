"""
Abstract interfaces for parking lot and parking record storage.

The parking lot aggregate is split across two logical stores:
- Lot store: name and total capacity
- Record store: parking records, queried by plate or by lot name

Storage contract:
- load_parking_record and load_parked_cars return active records only
  (left_at is None)
- save_parking_record rejects a second active record for the same plate
- closed records are retained, never deleted
"""

from abc import ABC, abstractmethod

from hexaparking.domain.car import LicensePlateNumber
from hexaparking.domain.parking_lot import (
    ParkingLot,
    ParkingLotName,
    ParkingRecord,
)


class ParkingLotLoadPort(ABC):
    """Read operations on the lot and record stores."""

    @abstractmethod
    async def load_parking_lot(self, name: ParkingLotName) -> ParkingLot | None:
        """
        Retrieve a parking lot by name.

        Args:
            name: Parking lot name

        Returns:
            ParkingLot with name and capacity if found, None otherwise
        """
        pass

    @abstractmethod
    async def load_parking_record(
        self, license_plate_number: LicensePlateNumber
    ) -> ParkingRecord | None:
        """
        Retrieve the active record of a plate.

        Args:
            license_plate_number: Plate to look up

        Returns:
            Active record if the car is parked anywhere, None otherwise
        """
        pass

    @abstractmethod
    async def load_parked_cars(
        self, parking_lot_name: ParkingLotName
    ) -> list[ParkingRecord]:
        """
        List active records of a parking lot.

        Args:
            parking_lot_name: Parking lot name

        Returns:
            Active records, in no guaranteed order
        """
        pass

    @abstractmethod
    async def exists_parking_lot(self, name: ParkingLotName) -> bool:
        """
        Check whether a parking lot is stored under this name.

        Args:
            name: Parking lot name

        Returns:
            True if the lot exists
        """
        pass


class ParkingLotSavePort(ABC):
    """Write operations on the lot and record stores."""

    @abstractmethod
    async def save_parking_lot(self, parking_lot: ParkingLot) -> ParkingLot:
        """
        Store a parking lot (name and capacity).

        Args:
            parking_lot: Lot to store

        Returns:
            The stored lot
        """
        pass

    @abstractmethod
    async def save_parking_record(self, parking_record: ParkingRecord) -> ParkingRecord:
        """
        Store a new active parking record.

        Args:
            parking_record: Record with left_at unset

        Returns:
            The stored record

        Raises:
            CarAlreadyParkedError: If the plate already has an active record
        """
        pass

    @abstractmethod
    async def update_parking_record(
        self, parking_record: ParkingRecord
    ) -> ParkingRecord:
        """
        Replace the active record of the plate with a closed record.

        Args:
            parking_record: Record with left_at set

        Returns:
            The stored record

        Raises:
            CarNotParkedError: If the plate has no active record to update
        """
        pass

    @abstractmethod
    async def delete_parking_lot(self, name: ParkingLotName) -> bool:
        """
        Remove a parking lot.

        Args:
            name: Parking lot name

        Returns:
            True if the lot was removed, False if it did not exist
        """
        pass


class ParkingLotRepository(ParkingLotLoadPort, ParkingLotSavePort, ABC):
    """Single adapter implementing both parking lot ports."""
