"""
Parking lot API endpoints.

Thin adapter over the parking lot use cases: converts request bodies and
path parameters into domain values and domain results into responses.
Domain errors are mapped to HTTP responses by the global exception handlers.
"""

from fastapi import APIRouter, Response, status

from hexaparking.api.v1 import PARKING_LOTS_PREFIX, PARKING_RECORDS_PREFIX
from hexaparking.api.v1.parking_lot.request import (
    CreateParkingLotRequest,
    LeaveCarRequest,
    ParkCarRequest,
)
from hexaparking.api.v1.parking_lot.response import (
    ParkingLotResponse,
    ParkingRecordResponse,
)
from hexaparking.di import ParkingLotCommandDep, ParkingLotQueryDep
from hexaparking.domain.car import LicensePlateNumber
from hexaparking.domain.exceptions import CarNotParkedError, ParkingLotNotFoundError
from hexaparking.domain.parking_lot import ParkingLotName

router = APIRouter()


@router.post(
    PARKING_LOTS_PREFIX,
    response_model=ParkingLotResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a parking lot",
    responses={409: {"description": "Parking lot already exists"}},
)
async def create_parking_lot(
    request: CreateParkingLotRequest,
    command: ParkingLotCommandDep,
) -> ParkingLotResponse:
    """
    Create a parking lot.

    Args:
        request: Lot name and capacity
        command: Parking lot command use case (injected)

    Returns:
        Occupancy of the new (empty) lot
    """
    parking_lot = await command.create_parking_lot(
        name=request.to_parking_lot_name(),
        total_spaces=request.to_total_spaces(),
    )
    return ParkingLotResponse.from_status(parking_lot.get_status())


@router.post(
    f"{PARKING_LOTS_PREFIX}/leave",
    response_model=ParkingRecordResponse,
    summary="Take a car out of its parking lot",
    responses={404: {"description": "Car is not parked"}},
)
async def leave_car(
    request: LeaveCarRequest,
    command: ParkingLotCommandDep,
) -> ParkingRecordResponse:
    """
    Close the active parking record of a car.

    Args:
        request: Plate of the leaving car
        command: Parking lot command use case (injected)

    Returns:
        Closed parking record
    """
    record = await command.leave_car(request.to_license_plate_number())
    return ParkingRecordResponse.from_record(record)


@router.get(
    f"{PARKING_LOTS_PREFIX}/{{name}}",
    response_model=ParkingLotResponse,
    summary="Get parking lot occupancy",
    responses={404: {"description": "Parking lot not found"}},
)
async def get_parking_lot_status(
    name: str,
    query: ParkingLotQueryDep,
) -> ParkingLotResponse:
    """
    Get current occupancy of a parking lot.

    Args:
        name: Parking lot name
        query: Parking lot query use case (injected)

    Returns:
        Capacity, free and occupied spaces, occupancy rate
    """
    parking_lot_status = await query.get_parking_lot_status(ParkingLotName(name))
    return ParkingLotResponse.from_status(parking_lot_status)


@router.get(
    f"{PARKING_LOTS_PREFIX}/{{name}}/cars",
    response_model=list[ParkingRecordResponse],
    summary="List cars parked in a parking lot",
)
async def get_parked_cars(
    name: str,
    query: ParkingLotQueryDep,
) -> list[ParkingRecordResponse]:
    """
    List active parking records of a lot.

    Args:
        name: Parking lot name
        query: Parking lot query use case (injected)

    Returns:
        Active records, empty for unknown lots
    """
    records = await query.get_parked_cars(ParkingLotName(name))
    return [ParkingRecordResponse.from_record(record) for record in records]


@router.post(
    f"{PARKING_LOTS_PREFIX}/{{name}}/park",
    response_model=ParkingRecordResponse,
    summary="Park a car",
    responses={
        404: {"description": "Parking lot not found"},
        409: {"description": "Car already parked or parking lot full"},
    },
)
async def park_car(
    name: str,
    request: ParkCarRequest,
    command: ParkingLotCommandDep,
) -> ParkingRecordResponse:
    """
    Park a car in a lot.

    Args:
        name: Parking lot name
        request: Plate of the car
        command: Parking lot command use case (injected)

    Returns:
        New active parking record
    """
    record = await command.park_car(
        ParkingLotName(name), request.to_license_plate_number()
    )
    return ParkingRecordResponse.from_record(record)


@router.delete(
    f"{PARKING_LOTS_PREFIX}/{{name}}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an empty parking lot",
    responses={
        404: {"description": "Parking lot not found"},
        409: {"description": "Cars are still parked"},
    },
)
async def delete_parking_lot(
    name: str,
    command: ParkingLotCommandDep,
) -> Response:
    """
    Delete a parking lot that has no parked cars.

    Args:
        name: Parking lot name
        command: Parking lot command use case (injected)
    """
    parking_lot_name = ParkingLotName(name)
    if not await command.delete_parking_lot(parking_lot_name):
        raise ParkingLotNotFoundError(f"Parking lot not found: {parking_lot_name}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    f"{PARKING_RECORDS_PREFIX}/{{license_plate_number}}",
    response_model=ParkingRecordResponse,
    summary="Get the active parking record of a car",
    responses={404: {"description": "Car is not parked"}},
)
async def get_parking_record(
    license_plate_number: str,
    query: ParkingLotQueryDep,
) -> ParkingRecordResponse:
    """
    Get where and since when a car is parked.

    Args:
        license_plate_number: Plate of the car
        query: Parking lot query use case (injected)

    Returns:
        Active parking record
    """
    plate = LicensePlateNumber(license_plate_number)
    record = await query.find_parking_record(plate)
    if record is None:
        raise CarNotParkedError(f"Car {plate} is not parked")
    return ParkingRecordResponse.from_record(record)
