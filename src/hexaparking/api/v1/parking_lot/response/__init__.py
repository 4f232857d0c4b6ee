"""Parking Lot Response Models."""

from datetime import datetime

from pydantic import Field

from hexaparking.api.v1.common.models import CamelModel
from hexaparking.domain.parking_lot import ParkingLotStatus, ParkingRecord


class ParkingLotResponse(CamelModel):
    """Parking lot occupancy."""

    name: str = Field(..., description="Parking lot name")
    total_spaces: int = Field(..., description="Total number of spaces")
    available_spaces: int = Field(..., description="Free spaces")
    occupied_spaces: int = Field(..., description="Spaces in use")
    occupancy_rate: float = Field(..., description="Occupied / total, in [0, 1]")
    is_full: bool = Field(..., description="No free space left")
    is_empty: bool = Field(..., description="No car parked")
    occupancy_percentage: int = Field(..., description="Occupancy rate as whole percent")

    @classmethod
    def from_status(cls, status: ParkingLotStatus) -> "ParkingLotResponse":
        return cls(
            name=status.name.value,
            total_spaces=status.total_spaces.value,
            available_spaces=status.available_spaces.value,
            occupied_spaces=status.occupied_spaces.value,
            occupancy_rate=status.occupancy_rate,
            is_full=status.is_full,
            is_empty=status.is_empty,
            occupancy_percentage=status.occupancy_percentage,
        )


class ParkingRecordResponse(CamelModel):
    """Parking record of one car."""

    license_plate_number: str = Field(..., description="License plate number")
    parking_lot_name: str = Field(..., description="Parking lot name")
    parked_at: datetime = Field(..., description="Time the car entered")
    left_at: datetime | None = Field(None, description="Time the car left")
    is_parked: bool = Field(..., description="Whether the car is still parked")

    @classmethod
    def from_record(cls, record: ParkingRecord) -> "ParkingRecordResponse":
        return cls(
            license_plate_number=record.license_plate_number.value,
            parking_lot_name=record.parking_lot_name.value,
            parked_at=record.parked_at,
            left_at=record.left_at,
            is_parked=record.is_parked,
        )
