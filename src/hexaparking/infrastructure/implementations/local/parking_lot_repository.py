"""
Local file-based parking lot repository implementation.

Stores lots and records as JSON files in a local directory structure:
    {base_dir}/
        parking_lots/
            {lot_key}.json        {"name": ..., "total_spaces": ...}
        parking_records/
            {plate_key}.json      list of records for one plate, oldest first

Keys are the percent-encoded lot name or plate. At most the last record
of a plate file is active.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any
from urllib.parse import quote

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


def file_key(value: str) -> str:
    """Filesystem-safe file stem for a lot name or plate."""
    return quote(value, safe="")


class LocalParkingLotRepository(ParkingLotRepository):
    """
    File-based lot and record storage for local development.

    Single-process only; concurrent access from several processes is not
    coordinated.
    """

    def __init__(self, base_dir: str = "./.parking_data"):
        """
        Initialize local parking lot repository.

        Args:
            base_dir: Base directory for lot and record files
        """
        self.base_dir = Path(base_dir)
        self.lots_dir = self.base_dir / "parking_lots"
        self.records_dir = self.base_dir / "parking_records"

        self.lots_dir.mkdir(parents=True, exist_ok=True)
        self.records_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Initialized LocalParkingLotRepository at {self.base_dir}")

    def _lot_path(self, name: ParkingLotName) -> Path:
        """Get path to parking lot file."""
        return self.lots_dir / f"{file_key(name.value)}.json"

    def _records_path(self, license_plate_number: LicensePlateNumber) -> Path:
        """Get path to the record history file of a plate."""
        return self.records_dir / f"{file_key(license_plate_number.value)}.json"

    def _record_to_dict(self, record: ParkingRecord) -> dict[str, Any]:
        """Convert ParkingRecord to JSON-serializable dict."""
        return {
            "license_plate_number": record.license_plate_number.value,
            "parking_lot_name": record.parking_lot_name.value,
            "parked_at": record.parked_at.isoformat(),
            "left_at": record.left_at.isoformat() if record.left_at else None,
        }

    def _dict_to_record(self, data: dict[str, Any]) -> ParkingRecord:
        """Convert dict to ParkingRecord."""
        return ParkingRecord(
            license_plate_number=LicensePlateNumber(data["license_plate_number"]),
            parking_lot_name=ParkingLotName(data["parking_lot_name"]),
            parked_at=datetime.fromisoformat(data["parked_at"]),
            left_at=(
                datetime.fromisoformat(data["left_at"]) if data.get("left_at") else None
            ),
        )

    def _read_records(self, path: Path) -> list[ParkingRecord]:
        if not path.exists():
            return []
        data = json.loads(path.read_text(encoding="utf-8"))
        return [self._dict_to_record(item) for item in data]

    def _write_records(self, path: Path, records: list[ParkingRecord]) -> None:
        path.write_text(
            json.dumps(
                [self._record_to_dict(record) for record in records],
                indent=2,
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )

    async def load_parking_lot(self, name: ParkingLotName) -> ParkingLot | None:
        """Retrieve parking lot by name."""
        lot_path = self._lot_path(name)

        if not lot_path.exists():
            return None

        data = json.loads(lot_path.read_text(encoding="utf-8"))
        return ParkingLot(
            name=ParkingLotName(data["name"]),
            total_spaces=ParkingSpaceCount(data["total_spaces"]),
        )

    async def load_parking_record(
        self, license_plate_number: LicensePlateNumber
    ) -> ParkingRecord | None:
        """Retrieve the active record of a plate."""
        records = self._read_records(self._records_path(license_plate_number))
        if records and records[-1].is_parked:
            return records[-1]
        return None

    async def load_parked_cars(
        self, parking_lot_name: ParkingLotName
    ) -> list[ParkingRecord]:
        """List active records of a lot by scanning plate files."""
        parked = []

        for records_file in self.records_dir.glob("*.json"):
            records = self._read_records(records_file)
            if (
                records
                and records[-1].is_parked
                and records[-1].parking_lot_name == parking_lot_name
            ):
                parked.append(records[-1])

        return parked

    async def exists_parking_lot(self, name: ParkingLotName) -> bool:
        """Check if a lot file exists."""
        return self._lot_path(name).exists()

    async def save_parking_lot(self, parking_lot: ParkingLot) -> ParkingLot:
        """Store parking lot to file."""
        self._lot_path(parking_lot.name).write_text(
            json.dumps(
                {
                    "name": parking_lot.name.value,
                    "total_spaces": parking_lot.total_spaces.value,
                },
                indent=2,
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )

        logger.info(f"Saved parking lot {parking_lot.name}")
        return ParkingLot(name=parking_lot.name, total_spaces=parking_lot.total_spaces)

    async def save_parking_record(self, parking_record: ParkingRecord) -> ParkingRecord:
        """Append a new active record to the plate history."""
        path = self._records_path(parking_record.license_plate_number)
        records = self._read_records(path)

        if records and records[-1].is_parked:
            raise CarAlreadyParkedError(
                f"Car {parking_record.license_plate_number} already has an active record"
            )

        records.append(parking_record)
        self._write_records(path, records)
        return parking_record

    async def update_parking_record(
        self, parking_record: ParkingRecord
    ) -> ParkingRecord:
        """Replace the active record of the plate."""
        path = self._records_path(parking_record.license_plate_number)
        records = self._read_records(path)

        if not records or not records[-1].is_parked:
            raise CarNotParkedError(
                f"Car {parking_record.license_plate_number} has no active record to update"
            )

        records[-1] = parking_record
        self._write_records(path, records)
        return parking_record

    async def delete_parking_lot(self, name: ParkingLotName) -> bool:
        """Remove the lot file."""
        lot_path = self._lot_path(name)

        if not lot_path.exists():
            return False

        lot_path.unlink()
        logger.info(f"Deleted parking lot {name}")
        return True
