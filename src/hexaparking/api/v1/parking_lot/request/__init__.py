"""Parking Lot Request Models."""

from pydantic import Field

from hexaparking.api.v1.common.models import CamelModel
from hexaparking.domain.car import LicensePlateNumber
from hexaparking.domain.parking_lot import ParkingLotName, ParkingSpaceCount


class CreateParkingLotRequest(CamelModel):
    """
    Request to create a parking lot.

    Attributes:
        name: Parking lot name (must not be blank)
        total_spaces: Capacity, at least 1
    """

    name: str = Field(..., description="Parking lot name", min_length=1)
    total_spaces: int = Field(..., description="Total number of spaces", ge=1)

    def to_parking_lot_name(self) -> ParkingLotName:
        return ParkingLotName(self.name)

    def to_total_spaces(self) -> ParkingSpaceCount:
        return ParkingSpaceCount(self.total_spaces)


class LicensePlateRequest(CamelModel):
    """
    Request carrying a license plate.

    Plate format is validated by the domain (400 with kind InvalidFormat).
    """

    license_plate_number: str = Field(
        ...,
        description="License plate number",
        min_length=1,
        json_schema_extra={"example": "12가3456"},
    )

    def to_license_plate_number(self) -> LicensePlateNumber:
        return LicensePlateNumber(self.license_plate_number)


class ParkCarRequest(LicensePlateRequest):
    """Request to park a car in the lot named in the path."""


class LeaveCarRequest(LicensePlateRequest):
    """Request to take a car out of whichever lot it is parked in."""
