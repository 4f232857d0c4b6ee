"""Car registration application service."""

from collections.abc import Collection

from hexaparking.core.logging import logger
from hexaparking.domain.car import Car, CarData, LicensePlateNumber
from hexaparking.domain.exceptions import CarNotFoundError
from hexaparking.domain.use_cases import CarCommandUseCase, CarQueryUseCase
from hexaparking.infrastructure.repositories import CarLoadPort, CarSavePort


class CarService(CarCommandUseCase, CarQueryUseCase):
    """Car use cases backed by the car store."""

    def __init__(self, load_port: CarLoadPort, save_port: CarSavePort):
        self.load_port = load_port
        self.save_port = save_port

    async def bulk_create_car(self, cars: Collection[CarData]) -> list[Car]:
        saved = await self.save_port.save_all(cars)
        logger.info(f"Registered {len(saved)} cars")
        return saved

    async def get_by_license_plate_number(
        self, license_plate_number: LicensePlateNumber
    ) -> Car:
        car = await self.load_port.find_by_license_plate_number(license_plate_number)
        if car is None:
            raise CarNotFoundError(f"Car is not registered: {license_plate_number}")
        return car
