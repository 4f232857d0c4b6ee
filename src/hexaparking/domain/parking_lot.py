"""
Parking lot domain model.

Contains the value objects (ParkingLotName, ParkingSpaceCount), the
ParkingRecord entity, the computed ParkingLotStatus read model and the
in-memory ParkingLot aggregate.

The ParkingLot aggregate keeps its own map of active records. The
store-backed ParkingLotService enforces the same rules against the
repositories; both rely on ParkingLotStatus.compute for the occupancy
arithmetic.
"""

from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta

from hexaparking.domain.car import LicensePlateNumber
from hexaparking.domain.exceptions import (
    CarAlreadyParkedError,
    CarNotParkedError,
    EmptyParkingLotNameError,
    InvalidParkingLotStatusError,
    NegativeSpaceCountError,
    ParkingLotFullError,
    RecordAlreadyLeftError,
)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class ParkingLotName:
    """Non-blank parking lot name."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise EmptyParkingLotNameError("Parking lot name must not be blank")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class ParkingSpaceCount:
    """
    Non-negative number of parking spaces.

    Supports addition, subtraction and ordering. A subtraction that would
    go below zero fails like a direct negative construction.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeSpaceCountError(
                f"Parking space count must be zero or greater, got {self.value}"
            )

    def __add__(self, other: "ParkingSpaceCount") -> "ParkingSpaceCount":
        return ParkingSpaceCount(self.value + other.value)

    def __sub__(self, other: "ParkingSpaceCount") -> "ParkingSpaceCount":
        return ParkingSpaceCount(self.value - other.value)

    def is_greater_than(self, other: "ParkingSpaceCount") -> bool:
        return self.value > other.value

    def is_less_than(self, other: "ParkingSpaceCount") -> bool:
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ParkingRecord:
    """
    One park/leave event for one plate at one lot.

    Records are immutable: leave() returns a closed copy.

    Attributes:
        license_plate_number: Parked car
        parking_lot_name: Lot the car is parked in
        parked_at: Time the car entered
        left_at: Time the car left, None while still parked
    """

    license_plate_number: LicensePlateNumber
    parking_lot_name: ParkingLotName
    parked_at: datetime
    left_at: datetime | None = None

    @property
    def is_parked(self) -> bool:
        return self.left_at is None

    def leave(self, now: datetime | None = None) -> "ParkingRecord":
        """
        Close the record.

        Args:
            now: Leave timestamp, defaults to the current UTC time

        Returns:
            A new record with left_at set

        Raises:
            RecordAlreadyLeftError: If the record is already closed
        """
        if not self.is_parked:
            raise RecordAlreadyLeftError(
                f"Car {self.license_plate_number} already left {self.parking_lot_name}"
            )
        return replace(self, left_at=now or utc_now())

    def parking_duration(self, now: datetime | None = None) -> timedelta:
        """Time between parked_at and left_at (or now while still parked)."""
        end = self.left_at or now or utc_now()
        return end - self.parked_at


@dataclass(frozen=True)
class ParkingLotStatus:
    """
    Occupancy snapshot of a parking lot.

    Raises:
        InvalidParkingLotStatusError: If the rate is outside [0, 1] or the
            space counts do not add up.
    """

    name: ParkingLotName
    total_spaces: ParkingSpaceCount
    available_spaces: ParkingSpaceCount
    occupied_spaces: ParkingSpaceCount
    occupancy_rate: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.occupancy_rate <= 1.0:
            raise InvalidParkingLotStatusError(
                f"Occupancy rate must be between 0.0 and 1.0, got {self.occupancy_rate}"
            )
        if self.total_spaces.value != (
            self.available_spaces.value + self.occupied_spaces.value
        ):
            raise InvalidParkingLotStatusError(
                "Total spaces must equal available plus occupied spaces "
                f"({self.total_spaces} != {self.available_spaces} + {self.occupied_spaces})"
            )

    @classmethod
    def compute(
        cls, name: ParkingLotName, total_spaces: ParkingSpaceCount, occupied: int
    ) -> "ParkingLotStatus":
        """
        Build a status from the lot capacity and the number of active records.

        More active records than spaces means the stores are out of sync;
        this is reported as InvalidParkingLotStatusError instead of clamping.
        """
        occupied_spaces = ParkingSpaceCount(occupied)
        if occupied_spaces > total_spaces:
            raise InvalidParkingLotStatusError(
                f"Parking lot {name} has {occupied} active records "
                f"for {total_spaces} spaces"
            )
        occupancy_rate = (
            occupied_spaces.value / total_spaces.value if total_spaces.value > 0 else 0.0
        )
        return cls(
            name=name,
            total_spaces=total_spaces,
            available_spaces=total_spaces - occupied_spaces,
            occupied_spaces=occupied_spaces,
            occupancy_rate=occupancy_rate,
        )

    @property
    def is_full(self) -> bool:
        return self.available_spaces.value == 0

    @property
    def is_empty(self) -> bool:
        return self.occupied_spaces.value == 0

    @property
    def occupancy_percentage(self) -> int:
        return int(self.occupancy_rate * 100)


class ParkingLot:
    """
    Parking lot aggregate root.

    Owns the total capacity and, when used in memory, the map of currently
    parked plates to their active records. Persistent adapters store only
    name and capacity; active records live in the record store.
    """

    def __init__(
        self,
        name: ParkingLotName,
        total_spaces: ParkingSpaceCount,
        parked_cars: dict[LicensePlateNumber, ParkingRecord] | None = None,
    ):
        self.name = name
        self.total_spaces = total_spaces
        self._parked_cars: dict[LicensePlateNumber, ParkingRecord] = dict(
            parked_cars or {}
        )

    def __repr__(self) -> str:
        return (
            f"ParkingLot(name={self.name.value!r}, total_spaces={self.total_spaces.value}, "
            f"occupied={len(self._parked_cars)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParkingLot):
            return NotImplemented
        return (
            self.name == other.name
            and self.total_spaces == other.total_spaces
            and self._parked_cars == other._parked_cars
        )

    @property
    def occupied_spaces(self) -> ParkingSpaceCount:
        return ParkingSpaceCount(len(self._parked_cars))

    @property
    def available_spaces(self) -> ParkingSpaceCount:
        return self.total_spaces - self.occupied_spaces

    def park_car(
        self, license_plate_number: LicensePlateNumber, now: datetime | None = None
    ) -> ParkingRecord:
        """
        Park a car in this lot.

        Checks run in the same order as ParkingLotService.park_car:
        duplicate plate first, then capacity.

        Raises:
            CarAlreadyParkedError: If the plate is already parked here
            ParkingLotFullError: If no space is available
        """
        if license_plate_number in self._parked_cars:
            raise CarAlreadyParkedError(
                f"Car {license_plate_number} is already parked"
            )
        if self.available_spaces.value == 0:
            raise ParkingLotFullError(f"Parking lot {self.name} is full")

        record = ParkingRecord(
            license_plate_number=license_plate_number,
            parking_lot_name=self.name,
            parked_at=now or utc_now(),
        )
        self._parked_cars[license_plate_number] = record
        return record

    def leave_car(
        self, license_plate_number: LicensePlateNumber, now: datetime | None = None
    ) -> ParkingRecord:
        """
        Remove a parked car and return its closed record.

        Raises:
            CarNotParkedError: If the plate is not parked here
        """
        record = self._parked_cars.get(license_plate_number)
        if record is None:
            raise CarNotParkedError(f"Car {license_plate_number} is not parked")

        left_record = record.leave(now)
        del self._parked_cars[license_plate_number]
        return left_record

    def get_status(self) -> ParkingLotStatus:
        return ParkingLotStatus.compute(
            self.name, self.total_spaces, len(self._parked_cars)
        )

    def get_parked_cars(self) -> list[ParkingRecord]:
        return list(self._parked_cars.values())
