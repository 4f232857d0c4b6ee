"""
Parking lot application service.

Implements the parking lot use cases against the load and save ports.
The lot store and the record store together hold one aggregate, so every
command runs its reads, checks and single write while holding the lock of
the lot involved (and of the plate, when a plate is involved). Locks are
always taken lot first, then plate.

Precondition checks run before any save call, in a fixed order:
lot existence, then duplicate plate, then capacity.
"""

from hexaparking.core.logging import logger
from hexaparking.domain.car import LicensePlateNumber
from hexaparking.domain.exceptions import (
    CarAlreadyParkedError,
    CarNotParkedError,
    ParkingLotAlreadyExistsError,
    ParkingLotFullError,
    ParkingLotNotEmptyError,
    ParkingLotNotFoundError,
)
from hexaparking.domain.parking_lot import (
    ParkingLot,
    ParkingLotName,
    ParkingLotStatus,
    ParkingRecord,
    ParkingSpaceCount,
    utc_now,
)
from hexaparking.domain.use_cases import (
    ParkingLotCommandUseCase,
    ParkingLotQueryUseCase,
)
from hexaparking.infrastructure.repositories import (
    ParkingLotLoadPort,
    ParkingLotSavePort,
)
from hexaparking.services.locks import KeyedLock


class ParkingLotService(ParkingLotCommandUseCase, ParkingLotQueryUseCase):
    """
    Parking lot use cases backed by the lot and record stores.

    One instance must be shared by all callers of the same stores, since
    the locks it holds are what makes check-then-write atomic.
    """

    def __init__(
        self,
        load_port: ParkingLotLoadPort,
        save_port: ParkingLotSavePort,
    ):
        """
        Initialize parking lot service.

        Args:
            load_port: Read access to lots and active records
            save_port: Write access to lots and records
        """
        self.load_port = load_port
        self.save_port = save_port
        self._lot_locks = KeyedLock()
        self._plate_locks = KeyedLock()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create_parking_lot(
        self, name: ParkingLotName, total_spaces: ParkingSpaceCount
    ) -> ParkingLot:
        async with self._lot_locks.hold(name):
            if await self.load_port.exists_parking_lot(name):
                raise ParkingLotAlreadyExistsError(
                    f"Parking lot already exists: {name}"
                )

            parking_lot = await self.save_port.save_parking_lot(
                ParkingLot(name=name, total_spaces=total_spaces)
            )

        logger.info(f"Created parking lot {name} with {total_spaces} spaces")
        return parking_lot

    async def park_car(
        self, parking_lot_name: ParkingLotName, license_plate_number: LicensePlateNumber
    ) -> ParkingRecord:
        async with (
            self._lot_locks.hold(parking_lot_name),
            self._plate_locks.hold(license_plate_number),
        ):
            parking_lot = await self.load_port.load_parking_lot(parking_lot_name)
            if parking_lot is None:
                raise ParkingLotNotFoundError(
                    f"Parking lot not found: {parking_lot_name}"
                )

            existing_record = await self.load_port.load_parking_record(
                license_plate_number
            )
            if existing_record is not None and existing_record.is_parked:
                raise CarAlreadyParkedError(
                    f"Car {license_plate_number} is already parked "
                    f"in {existing_record.parking_lot_name}"
                )

            parked_cars = await self.load_port.load_parked_cars(parking_lot_name)
            if len(parked_cars) >= parking_lot.total_spaces.value:
                raise ParkingLotFullError(f"Parking lot {parking_lot_name} is full")

            parking_record = await self.save_port.save_parking_record(
                ParkingRecord(
                    license_plate_number=license_plate_number,
                    parking_lot_name=parking_lot_name,
                    parked_at=utc_now(),
                )
            )

        logger.info(f"Car {license_plate_number} parked in {parking_lot_name}")
        return parking_record

    async def leave_car(self, license_plate_number: LicensePlateNumber) -> ParkingRecord:
        while True:
            # Find the lot first so its lock can be taken before the plate lock
            current = await self.load_port.load_parking_record(license_plate_number)
            if current is None:
                raise CarNotParkedError(f"Car {license_plate_number} is not parked")

            async with (
                self._lot_locks.hold(current.parking_lot_name),
                self._plate_locks.hold(license_plate_number),
            ):
                parking_record = await self.load_port.load_parking_record(
                    license_plate_number
                )
                if parking_record is None or not parking_record.is_parked:
                    raise CarNotParkedError(
                        f"Car {license_plate_number} is not parked"
                    )
                if parking_record.parking_lot_name != current.parking_lot_name:
                    # Left and parked elsewhere meanwhile; lock the new lot
                    continue

                left_record = await self.save_port.update_parking_record(
                    parking_record.leave()
                )

            logger.info(
                f"Car {license_plate_number} left {left_record.parking_lot_name} "
                f"after {left_record.parking_duration()}"
            )
            return left_record

    async def delete_parking_lot(self, name: ParkingLotName) -> bool:
        async with self._lot_locks.hold(name):
            if await self.load_port.load_parked_cars(name):
                raise ParkingLotNotEmptyError(
                    f"Parking lot {name} still has parked cars"
                )

            deleted = await self.save_port.delete_parking_lot(name)

        if deleted:
            logger.info(f"Deleted parking lot {name}")
        return deleted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_parking_lot_status(self, name: ParkingLotName) -> ParkingLotStatus:
        parking_lot = await self.load_port.load_parking_lot(name)
        if parking_lot is None:
            raise ParkingLotNotFoundError(f"Parking lot not found: {name}")

        parked_cars = await self.load_port.load_parked_cars(name)
        return ParkingLotStatus.compute(name, parking_lot.total_spaces, len(parked_cars))

    async def get_parked_cars(self, name: ParkingLotName) -> list[ParkingRecord]:
        return await self.load_port.load_parked_cars(name)

    async def find_parking_record(
        self, license_plate_number: LicensePlateNumber
    ) -> ParkingRecord | None:
        return await self.load_port.load_parking_record(license_plate_number)
