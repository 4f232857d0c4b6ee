"""
In-memory parking lot repository.

Keeps lots and records in process-local dictionaries. State is lost on
restart; intended for tests and single-process development.
"""

from loguru import logger

from hexaparking.domain.car import LicensePlateNumber
from hexaparking.domain.exceptions import CarAlreadyParkedError, CarNotParkedError
from hexaparking.domain.parking_lot import (
    ParkingLot,
    ParkingLotName,
    ParkingRecord,
    ParkingSpaceCount,
)
from hexaparking.infrastructure.repositories.parking_lot_repository import (
    ParkingLotRepository,
)


class MemoryParkingLotRepository(ParkingLotRepository):
    """Dictionary-backed lot and record stores."""

    def __init__(self) -> None:
        self._lots: dict[ParkingLotName, ParkingSpaceCount] = {}
        # Active records indexed by plate (at most one per plate)
        self._active_records: dict[LicensePlateNumber, ParkingRecord] = {}
        self._closed_records: list[ParkingRecord] = []

    async def load_parking_lot(self, name: ParkingLotName) -> ParkingLot | None:
        total_spaces = self._lots.get(name)
        if total_spaces is None:
            return None
        return ParkingLot(name=name, total_spaces=total_spaces)

    async def load_parking_record(
        self, license_plate_number: LicensePlateNumber
    ) -> ParkingRecord | None:
        return self._active_records.get(license_plate_number)

    async def load_parked_cars(
        self, parking_lot_name: ParkingLotName
    ) -> list[ParkingRecord]:
        return [
            record
            for record in self._active_records.values()
            if record.parking_lot_name == parking_lot_name
        ]

    async def exists_parking_lot(self, name: ParkingLotName) -> bool:
        return name in self._lots

    async def save_parking_lot(self, parking_lot: ParkingLot) -> ParkingLot:
        self._lots[parking_lot.name] = parking_lot.total_spaces
        logger.debug(f"Stored parking lot {parking_lot.name} in memory")
        return ParkingLot(name=parking_lot.name, total_spaces=parking_lot.total_spaces)

    async def save_parking_record(self, parking_record: ParkingRecord) -> ParkingRecord:
        plate = parking_record.license_plate_number
        if plate in self._active_records:
            raise CarAlreadyParkedError(f"Car {plate} already has an active record")
        self._active_records[plate] = parking_record
        return parking_record

    async def update_parking_record(
        self, parking_record: ParkingRecord
    ) -> ParkingRecord:
        plate = parking_record.license_plate_number
        if plate not in self._active_records:
            raise CarNotParkedError(f"Car {plate} has no active record to update")

        if parking_record.is_parked:
            self._active_records[plate] = parking_record
        else:
            del self._active_records[plate]
            self._closed_records.append(parking_record)
        return parking_record

    async def delete_parking_lot(self, name: ParkingLotName) -> bool:
        if name not in self._lots:
            return False
        del self._lots[name]
        logger.debug(f"Deleted parking lot {name} from memory")
        return True
