"""
Integrated parking service.

Combines the car and parking lot use cases into single-call flows:
register-and-park, leave-and-look-up, and listing registered cars parked
in a lot.
"""

from dataclasses import dataclass

from hexaparking.core.logging import logger
from hexaparking.domain.car import Car, CarData, LicensePlateNumber
from hexaparking.domain.exceptions import (
    CarAlreadyParkedError,
    CarNotFoundError,
    ParkingDomainError,
    ParkingLotAlreadyExistsError,
    ParkingLotFullError,
    ParkingLotNotEmptyError,
    ParkingLotNotFoundError,
)
from hexaparking.domain.parking_lot import (
    ParkingLot,
    ParkingLotName,
    ParkingRecord,
    ParkingSpaceCount,
)
from hexaparking.domain.use_cases import (
    CarCommandUseCase,
    CarQueryUseCase,
    ParkingLotCommandUseCase,
    ParkingLotQueryUseCase,
)


@dataclass(frozen=True)
class IntegratedParkingResult:
    """
    Outcome of register-and-park.

    Attributes:
        car: Registered car (new or existing registration)
        parking_record: Active record created by parking
        parking_lot: Lot created by this call, None if it already existed
    """

    car: Car
    parking_record: ParkingRecord
    parking_lot: ParkingLot | None = None


@dataclass(frozen=True)
class IntegratedLeavingResult:
    """Outcome of leave-and-unregister."""

    car: Car
    parking_record: ParkingRecord


@dataclass(frozen=True)
class RegisteredCarInParkingLot:
    """Registered car paired with its active record."""

    car: Car
    parking_record: ParkingRecord


class IntegratedParkingService:
    """Orchestrates car registration and parking in one place."""

    def __init__(
        self,
        car_command: CarCommandUseCase,
        car_query: CarQueryUseCase,
        parking_lot_command: ParkingLotCommandUseCase,
        parking_lot_query: ParkingLotQueryUseCase,
    ):
        self.car_command = car_command
        self.car_query = car_query
        self.parking_lot_command = parking_lot_command
        self.parking_lot_query = parking_lot_query

    async def _get_or_register_car(self, license_plate_number: LicensePlateNumber) -> Car:
        try:
            return await self.car_query.get_by_license_plate_number(license_plate_number)
        except CarNotFoundError:
            cars = await self.car_command.bulk_create_car(
                [CarData(license_plate_number=license_plate_number)]
            )
            return cars[0]

    async def register_car_and_park(
        self,
        license_plate_number: LicensePlateNumber,
        parking_lot_name: ParkingLotName,
        total_spaces: ParkingSpaceCount,
    ) -> IntegratedParkingResult:
        """
        Register a car if needed, create the lot if missing, then park.

        The duplicate and capacity checks run before anything is written.
        If parking still fails, a lot created by this call is removed again.

        Args:
            license_plate_number: Car to park
            parking_lot_name: Target lot
            total_spaces: Capacity used only when the lot has to be created

        Returns:
            Car, active record and the lot if it was created by this call

        Raises:
            CarAlreadyParkedError: If the car is parked somewhere
            ParkingLotFullError: If the lot has no free space
        """
        existing_record = await self.parking_lot_query.find_parking_record(
            license_plate_number
        )
        if existing_record is not None and existing_record.is_parked:
            raise CarAlreadyParkedError(
                f"Car {license_plate_number} is already parked "
                f"in {existing_record.parking_lot_name}"
            )

        parking_lot = None
        try:
            status = await self.parking_lot_query.get_parking_lot_status(parking_lot_name)
        except ParkingLotNotFoundError:
            try:
                parking_lot = await self.parking_lot_command.create_parking_lot(
                    parking_lot_name, total_spaces
                )
            except ParkingLotAlreadyExistsError:
                # Created concurrently by another request
                parking_lot = None
        else:
            if status.is_full:
                raise ParkingLotFullError(f"Parking lot {parking_lot_name} is full")

        try:
            car = await self._get_or_register_car(license_plate_number)
            parking_record = await self.parking_lot_command.park_car(
                parking_lot_name, license_plate_number
            )
        except ParkingDomainError:
            if parking_lot is not None:
                await self._discard_created_lot(parking_lot_name)
            raise

        logger.info(
            f"Registered-and-parked {license_plate_number} in {parking_lot_name} "
            f"(lot created: {parking_lot is not None})"
        )
        return IntegratedParkingResult(
            car=car, parking_record=parking_record, parking_lot=parking_lot
        )

    async def _discard_created_lot(self, parking_lot_name: ParkingLotName) -> None:
        try:
            await self.parking_lot_command.delete_parking_lot(parking_lot_name)
        except ParkingLotNotEmptyError:
            # Another request parked there meanwhile; the lot is in use
            return
        logger.info(f"Removed parking lot {parking_lot_name} after failed parking")

    async def leave_and_unregister_car(
        self, license_plate_number: LicensePlateNumber
    ) -> IntegratedLeavingResult:
        """
        Leave the lot and return the registered car.

        Car registrations are kept; there is no car removal operation.

        Raises:
            CarNotParkedError: If the car is not parked
            CarNotFoundError: If the car was parked without registration
        """
        parking_record = await self.parking_lot_command.leave_car(license_plate_number)
        car = await self.car_query.get_by_license_plate_number(license_plate_number)
        return IntegratedLeavingResult(car=car, parking_record=parking_record)

    async def get_registered_cars_in_parking_lot(
        self, parking_lot_name: ParkingLotName
    ) -> list[RegisteredCarInParkingLot]:
        """Active records of a lot joined with car registrations; unregistered plates are skipped."""
        registered = []
        for parking_record in await self.parking_lot_query.get_parked_cars(
            parking_lot_name
        ):
            try:
                car = await self.car_query.get_by_license_plate_number(
                    parking_record.license_plate_number
                )
            except CarNotFoundError:
                continue
            registered.append(
                RegisteredCarInParkingLot(car=car, parking_record=parking_record)
            )
        return registered
