"""Integrated Parking Response Models."""

from datetime import datetime

from pydantic import Field

from hexaparking.api.v1.common.models import CamelModel
from hexaparking.services.integrated_parking import (
    IntegratedLeavingResult,
    IntegratedParkingResult,
    RegisteredCarInParkingLot,
)


class IntegratedParkingResponse(CamelModel):
    """Result of register-and-park."""

    license_plate_number: str = Field(..., description="License plate number")
    parking_lot_name: str = Field(..., description="Parking lot name")
    parked_at: datetime = Field(..., description="Time the car entered")
    is_parked: bool = Field(..., description="Whether the car is parked")
    parking_lot_created: bool = Field(
        ..., description="Whether the parking lot was created by this request"
    )

    @classmethod
    def from_result(cls, result: IntegratedParkingResult) -> "IntegratedParkingResponse":
        return cls(
            license_plate_number=result.car.license_plate_number.value,
            parking_lot_name=result.parking_record.parking_lot_name.value,
            parked_at=result.parking_record.parked_at,
            is_parked=result.parking_record.is_parked,
            parking_lot_created=result.parking_lot is not None,
        )


class IntegratedLeavingResponse(CamelModel):
    """Result of leave-and-unregister."""

    license_plate_number: str = Field(..., description="License plate number")
    left_at: datetime | None = Field(None, description="Time the car left")
    is_parked: bool = Field(..., description="Whether the car is parked")

    @classmethod
    def from_result(cls, result: IntegratedLeavingResult) -> "IntegratedLeavingResponse":
        return cls(
            license_plate_number=result.car.license_plate_number.value,
            left_at=result.parking_record.left_at,
            is_parked=result.parking_record.is_parked,
        )


class RegisteredCarResponse(CamelModel):
    """Registered car currently parked in a lot."""

    license_plate_number: str = Field(..., description="License plate number")
    parking_lot_name: str = Field(..., description="Parking lot name")
    parked_at: datetime = Field(..., description="Time the car entered")
    car_created_at: datetime = Field(..., description="Car registration time")

    @classmethod
    def from_registered_car(
        cls, registered_car: RegisteredCarInParkingLot
    ) -> "RegisteredCarResponse":
        return cls(
            license_plate_number=registered_car.car.license_plate_number.value,
            parking_lot_name=registered_car.parking_record.parking_lot_name.value,
            parked_at=registered_car.parking_record.parked_at,
            car_created_at=registered_car.car.created_at,
        )
