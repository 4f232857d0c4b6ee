"""Car Response Models."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from hexaparking.api.v1.common.models import CamelModel
from hexaparking.domain.car import Car


class CarResponse(CamelModel):
    """Registered car."""

    id: UUID = Field(..., description="Car identifier")
    license_plate_number: str = Field(..., description="License plate number")
    created_at: datetime = Field(..., description="Registration time")
    updated_at: datetime = Field(..., description="Last modification time")

    @classmethod
    def from_car(cls, car: Car) -> "CarResponse":
        return cls(
            id=car.id,
            license_plate_number=car.license_plate_number.value,
            created_at=car.created_at,
            updated_at=car.updated_at,
        )
