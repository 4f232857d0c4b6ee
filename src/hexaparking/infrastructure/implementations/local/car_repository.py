"""
Local file-based car repository implementation.

Stores one JSON file per registered car:
    {base_dir}/
        cars/
            {plate_key}.json
"""

import json
from collections.abc import Collection
from datetime import datetime
from pathlib import Path
from typing import Any
from uuid import UUID

from loguru import logger

from hexaparking.domain.car import Car, CarData, LicensePlateNumber
from hexaparking.domain.exceptions import CarAlreadyRegisteredError
from hexaparking.infrastructure.implementations.local.parking_lot_repository import (
    file_key,
)
from hexaparking.infrastructure.repositories.car_repository import (
    CarRepository,
    find_duplicate_plates,
)


class LocalCarRepository(CarRepository):
    """File-based car storage for local development."""

    def __init__(self, base_dir: str = "./.parking_data"):
        """
        Initialize local car repository.

        Args:
            base_dir: Base directory for car files
        """
        self.base_dir = Path(base_dir)
        self.cars_dir = self.base_dir / "cars"
        self.cars_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Initialized LocalCarRepository at {self.base_dir}")

    def _car_path(self, license_plate_number: LicensePlateNumber) -> Path:
        """Get path to car file."""
        return self.cars_dir / f"{file_key(license_plate_number.value)}.json"

    def _car_to_dict(self, car: Car) -> dict[str, Any]:
        """Convert Car to JSON-serializable dict."""
        return {
            "id": str(car.id),
            "license_plate_number": car.license_plate_number.value,
            "created_at": car.created_at.isoformat(),
            "updated_at": car.updated_at.isoformat(),
        }

    def _dict_to_car(self, data: dict[str, Any]) -> Car:
        """Convert dict to Car."""
        return Car(
            license_plate_number=LicensePlateNumber(data["license_plate_number"]),
            id=UUID(data["id"]),
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )

    async def find_by_license_plate_number(
        self, license_plate_number: LicensePlateNumber
    ) -> Car | None:
        """Retrieve car by plate."""
        car_path = self._car_path(license_plate_number)

        if not car_path.exists():
            return None

        return self._dict_to_car(json.loads(car_path.read_text(encoding="utf-8")))

    async def save_all(self, cars: Collection[CarData]) -> list[Car]:
        """Store all cars, or none if any plate is taken."""
        registered = {
            car.license_plate_number
            for car in cars
            if self._car_path(car.license_plate_number).exists()
        }
        duplicates = find_duplicate_plates(cars, registered)
        if duplicates:
            raise CarAlreadyRegisteredError(
                f"Cars already registered: {', '.join(duplicates)}"
            )

        saved = [Car.register(data) for data in cars]
        for car in saved:
            self._car_path(car.license_plate_number).write_text(
                json.dumps(self._car_to_dict(car), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )

        logger.info(f"Saved {len(saved)} cars")
        return saved
