"""Car registration API endpoints."""

from fastapi import APIRouter, status

from hexaparking.api.v1.car.request import CarRequest
from hexaparking.api.v1.car.response import CarResponse
from hexaparking.di import CarCommandDep, CarQueryDep
from hexaparking.domain.car import LicensePlateNumber

router = APIRouter()


@router.post(
    "/bulk",
    response_model=list[CarResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register several cars",
    responses={409: {"description": "A plate is already registered"}},
)
async def bulk_create_cars(
    requests: list[CarRequest],
    command: CarCommandDep,
) -> list[CarResponse]:
    """
    Register cars in one batch; nothing is stored if any plate is taken.

    Args:
        requests: Cars to register
        command: Car command use case (injected)

    Returns:
        Registered cars with ids and timestamps
    """
    cars = await command.bulk_create_car([request.to_car_data() for request in requests])
    return [CarResponse.from_car(car) for car in cars]


@router.get(
    "/{license_plate_number}",
    response_model=CarResponse,
    summary="Get a registered car",
    responses={404: {"description": "Car is not registered"}},
)
async def get_car_by_license_plate_number(
    license_plate_number: str,
    query: CarQueryDep,
) -> CarResponse:
    """
    Look up a registered car by plate.

    Args:
        license_plate_number: Plate of the car
        query: Car query use case (injected)

    Returns:
        Registered car
    """
    car = await query.get_by_license_plate_number(LicensePlateNumber(license_plate_number))
    return CarResponse.from_car(car)
