"""
Integrated parking API endpoints.

Single-call flows that combine car registration with parking.
"""

from fastapi import APIRouter, status

from hexaparking.api.v1.integrated.request import (
    LeaveAndUnregisterRequest,
    RegisterAndParkRequest,
)
from hexaparking.api.v1.integrated.response import (
    IntegratedLeavingResponse,
    IntegratedParkingResponse,
    RegisteredCarResponse,
)
from hexaparking.di import IntegratedParkingServiceDep
from hexaparking.domain.parking_lot import ParkingLotName

router = APIRouter()


@router.post(
    "/register-and-park",
    response_model=IntegratedParkingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a car and park it",
    description="""
    Registers the car (an existing registration is reused), creates the
    parking lot with the given capacity if it does not exist, then parks
    the car.
    """,
)
async def register_and_park(
    request: RegisterAndParkRequest,
    service: IntegratedParkingServiceDep,
) -> IntegratedParkingResponse:
    """
    Register a car and park it.

    Args:
        request: Plate, lot name and capacity for a new lot
        service: Integrated parking service (injected)

    Returns:
        Parking result, including whether the lot was created
    """
    result = await service.register_car_and_park(
        license_plate_number=request.to_license_plate_number(),
        parking_lot_name=request.to_parking_lot_name(),
        total_spaces=request.to_total_spaces(),
    )
    return IntegratedParkingResponse.from_result(result)


@router.post(
    "/leave-and-unregister",
    response_model=IntegratedLeavingResponse,
    summary="Take a registered car out of its parking lot",
    responses={404: {"description": "Car is not parked or not registered"}},
)
async def leave_and_unregister(
    request: LeaveAndUnregisterRequest,
    service: IntegratedParkingServiceDep,
) -> IntegratedLeavingResponse:
    """
    Leave the parking lot.

    Args:
        request: Plate of the leaving car
        service: Integrated parking service (injected)

    Returns:
        Leave time and parking state
    """
    result = await service.leave_and_unregister_car(request.to_license_plate_number())
    return IntegratedLeavingResponse.from_result(result)


@router.get(
    "/parking-lots/{parking_lot_name}/registered-cars",
    response_model=list[RegisteredCarResponse],
    summary="List registered cars parked in a lot",
)
async def get_registered_cars_in_parking_lot(
    parking_lot_name: str,
    service: IntegratedParkingServiceDep,
) -> list[RegisteredCarResponse]:
    """
    List registered cars currently parked in a lot.

    Args:
        parking_lot_name: Parking lot name
        service: Integrated parking service (injected)

    Returns:
        Registered cars with their parking time
    """
    registered_cars = await service.get_registered_cars_in_parking_lot(
        ParkingLotName(parking_lot_name)
    )
    return [RegisteredCarResponse.from_registered_car(car) for car in registered_cars]
