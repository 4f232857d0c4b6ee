"""Car domain model and the license plate value object."""

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from hexaparking.domain.exceptions import InvalidLicensePlateError

# Korean plate: [region (0-2 Hangul)] [1-3 digits] [1 Hangul] [4 digits],
# each part optionally separated by one ASCII whitespace.
# e.g. "서울 123 가 1234", "123 가 1234", "12가1234"
LICENSE_PLATE_PATTERN = re.compile(
    r"[가-힣]{0,2}\s?[0-9]{1,3}\s?[가-힣]\s?[0-9]{4}", re.ASCII
)


@dataclass(frozen=True)
class LicensePlateNumber:
    """
    Validated license plate number.

    Raises:
        InvalidLicensePlateError: If the value does not match the plate grammar.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not LICENSE_PLATE_PATTERN.fullmatch(
            self.value
        ):
            raise InvalidLicensePlateError(
                f"Invalid license plate number format: {self.value!r}"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CarData:
    """Properties needed to register a car."""

    license_plate_number: LicensePlateNumber


@dataclass(frozen=True)
class Car:
    """
    Registered car.

    Attributes:
        license_plate_number: Plate, unique among registered cars
        id: Identifier assigned on registration
        created_at: Registration timestamp
        updated_at: Last modification timestamp
    """

    license_plate_number: LicensePlateNumber
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def register(cls, data: CarData) -> "Car":
        """Create a new car from registration data."""
        now = datetime.now(UTC)
        return cls(
            license_plate_number=data.license_plate_number,
            created_at=now,
            updated_at=now,
        )
