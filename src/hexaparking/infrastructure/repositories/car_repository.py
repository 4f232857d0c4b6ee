"""Abstract interfaces for registered car storage."""

from abc import ABC, abstractmethod
from collections.abc import Collection

from hexaparking.domain.car import Car, CarData, LicensePlateNumber


class CarLoadPort(ABC):
    """Read operations on the car store."""

    @abstractmethod
    async def find_by_license_plate_number(
        self, license_plate_number: LicensePlateNumber
    ) -> Car | None:
        """
        Retrieve a registered car by plate.

        Args:
            license_plate_number: Plate to look up

        Returns:
            Car if registered, None otherwise
        """
        pass


class CarSavePort(ABC):
    """Write operations on the car store."""

    @abstractmethod
    async def save_all(self, cars: Collection[CarData]) -> list[Car]:
        """
        Register several cars, assigning ids and timestamps.

        Args:
            cars: Registration data

        Returns:
            Registered cars, in input order

        Raises:
            CarAlreadyRegisteredError: If any plate is already registered;
                nothing is stored in that case
        """
        pass


class CarRepository(CarLoadPort, CarSavePort, ABC):
    """Single adapter implementing both car ports."""


def find_duplicate_plates(
    cars: Collection[CarData], registered: Collection[LicensePlateNumber]
) -> list[str]:
    """
    Plates in a registration batch that are already taken.

    A plate counts as taken if it is registered, or if it appears
    more than once in the batch.

    Returns:
        Sorted plate strings, empty if the batch can be stored
    """
    seen: set[LicensePlateNumber] = set()
    duplicates: set[str] = set()
    for car in cars:
        plate = car.license_plate_number
        if plate in registered or plate in seen:
            duplicates.add(plate.value)
        seen.add(plate)
    return sorted(duplicates)
