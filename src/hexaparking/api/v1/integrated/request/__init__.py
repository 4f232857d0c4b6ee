"""Integrated Parking Request Models."""

from pydantic import Field

from hexaparking.api.v1.common.models import CamelModel
from hexaparking.domain.car import LicensePlateNumber
from hexaparking.domain.parking_lot import ParkingLotName, ParkingSpaceCount


class RegisterAndParkRequest(CamelModel):
    """
    Request to register a car and park it in one call.

    Attributes:
        license_plate_number: Car to park
        parking_lot_name: Target parking lot
        total_spaces: Capacity used if the lot does not exist yet
    """

    license_plate_number: str = Field(
        ..., description="License plate number", min_length=1,
        json_schema_extra={"example": "서울 123 가 1234"},
    )
    parking_lot_name: str = Field(
        ..., description="Parking lot name", min_length=1,
        json_schema_extra={"example": "강남주차장"},
    )
    total_spaces: int = Field(
        ..., description="Capacity of the lot if it has to be created", ge=1,
        json_schema_extra={"example": 100},
    )

    def to_license_plate_number(self) -> LicensePlateNumber:
        return LicensePlateNumber(self.license_plate_number)

    def to_parking_lot_name(self) -> ParkingLotName:
        return ParkingLotName(self.parking_lot_name)

    def to_total_spaces(self) -> ParkingSpaceCount:
        return ParkingSpaceCount(self.total_spaces)


class LeaveAndUnregisterRequest(CamelModel):
    """Request to take a registered car out of its parking lot."""

    license_plate_number: str = Field(
        ..., description="License plate number", min_length=1,
        json_schema_extra={"example": "서울 123 가 1234"},
    )

    def to_license_plate_number(self) -> LicensePlateNumber:
        return LicensePlateNumber(self.license_plate_number)
