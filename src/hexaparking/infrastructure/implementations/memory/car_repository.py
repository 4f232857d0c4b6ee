"""In-memory registered car repository."""

from collections.abc import Collection

from hexaparking.domain.car import Car, CarData, LicensePlateNumber
from hexaparking.domain.exceptions import CarAlreadyRegisteredError
from hexaparking.infrastructure.repositories.car_repository import (
    CarRepository,
    find_duplicate_plates,
)


class MemoryCarRepository(CarRepository):
    """Dictionary-backed car store keyed by plate."""

    def __init__(self) -> None:
        self._cars: dict[LicensePlateNumber, Car] = {}

    async def find_by_license_plate_number(
        self, license_plate_number: LicensePlateNumber
    ) -> Car | None:
        return self._cars.get(license_plate_number)

    async def save_all(self, cars: Collection[CarData]) -> list[Car]:
        duplicates = find_duplicate_plates(cars, self._cars.keys())
        if duplicates:
            raise CarAlreadyRegisteredError(
                f"Cars already registered: {', '.join(duplicates)}"
            )

        saved = [Car.register(data) for data in cars]
        for car in saved:
            self._cars[car.license_plate_number] = car
        return saved
