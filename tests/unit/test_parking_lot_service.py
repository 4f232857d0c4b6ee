"""
Unit tests for ParkingLotService.

Runs the parking scenarios against the in-memory store, checks the order
of precondition checks, verifies nothing is saved when a check fails and
exercises concurrent parking through a store that yields on every read.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from hexaparking.domain.car import LicensePlateNumber
from hexaparking.domain.exceptions import (
    CarAlreadyParkedError,
    CarNotParkedError,
    ParkingDomainError,
    ParkingLotAlreadyExistsError,
    ParkingLotFullError,
    ParkingLotNotEmptyError,
    ParkingLotNotFoundError,
)
from hexaparking.domain.parking_lot import (
    ParkingLot,
    ParkingLotName,
    ParkingRecord,
    ParkingSpaceCount,
    utc_now,
)
from hexaparking.infrastructure.implementations.memory import (
    MemoryParkingLotRepository,
)
from hexaparking.services import ParkingLotService

MAIN = ParkingLotName("Main")
PLATE_A = LicensePlateNumber("12가3456")
PLATE_B = LicensePlateNumber("34나5678")


def plate(index: int) -> LicensePlateNumber:
    return LicensePlateNumber(f"{index}가{1000 + index}")


class YieldingParkingLotRepository(MemoryParkingLotRepository):
    """Memory store that hands control to other tasks on every call."""

    async def load_parking_lot(self, name):
        await asyncio.sleep(0)
        return await super().load_parking_lot(name)

    async def load_parking_record(self, license_plate_number):
        await asyncio.sleep(0)
        return await super().load_parking_record(license_plate_number)

    async def load_parked_cars(self, parking_lot_name):
        await asyncio.sleep(0)
        return await super().load_parked_cars(parking_lot_name)

    async def save_parking_record(self, parking_record):
        await asyncio.sleep(0)
        return await super().save_parking_record(parking_record)

    async def update_parking_record(self, parking_record):
        await asyncio.sleep(0)
        return await super().update_parking_record(parking_record)


@pytest.fixture
def repository():
    """Empty in-memory store."""
    return MemoryParkingLotRepository()


@pytest.fixture
def service(repository):
    """Service reading and writing the same store."""
    return ParkingLotService(load_port=repository, save_port=repository)


@pytest.fixture
def mock_ports():
    """Load and save ports as mocks."""
    load_port = MagicMock()
    load_port.load_parking_lot = AsyncMock(
        return_value=ParkingLot(MAIN, ParkingSpaceCount(1))
    )
    load_port.load_parking_record = AsyncMock(return_value=None)
    load_port.load_parked_cars = AsyncMock(return_value=[])
    load_port.exists_parking_lot = AsyncMock(return_value=False)

    save_port = MagicMock()
    save_port.save_parking_lot = AsyncMock(side_effect=lambda lot: lot)
    save_port.save_parking_record = AsyncMock(side_effect=lambda record: record)
    save_port.update_parking_record = AsyncMock(side_effect=lambda record: record)
    save_port.delete_parking_lot = AsyncMock(return_value=True)
    return load_port, save_port


# ===========================
# Scenarios
# ===========================


@pytest.mark.asyncio
async def test_park_until_full(service):
    """Test a one-space lot accepts one car and rejects the next."""
    # Arrange
    await service.create_parking_lot(MAIN, ParkingSpaceCount(1))

    # Act
    record = await service.park_car(MAIN, PLATE_A)

    # Assert
    assert record.is_parked
    assert record.parking_lot_name == MAIN
    status = await service.get_parking_lot_status(MAIN)
    assert status.available_spaces.value == 0
    assert status.is_full

    with pytest.raises(ParkingLotFullError):
        await service.park_car(MAIN, PLATE_B)


@pytest.mark.asyncio
async def test_park_same_car_twice(service):
    """Test the second park of the same plate fails with AlreadyParked."""
    await service.create_parking_lot(MAIN, ParkingSpaceCount(5))
    await service.park_car(MAIN, PLATE_A)

    with pytest.raises(CarAlreadyParkedError):
        await service.park_car(MAIN, PLATE_A)


@pytest.mark.asyncio
async def test_park_same_car_in_another_lot(service):
    """Test a car parked in one lot cannot be parked in another."""
    other = ParkingLotName("Other")
    await service.create_parking_lot(MAIN, ParkingSpaceCount(5))
    await service.create_parking_lot(other, ParkingSpaceCount(5))
    await service.park_car(MAIN, PLATE_A)

    with pytest.raises(CarAlreadyParkedError):
        await service.park_car(other, PLATE_A)


@pytest.mark.asyncio
async def test_leave_without_active_record(service):
    """Test leaving a car that never parked fails with NotParked."""
    with pytest.raises(CarNotParkedError):
        await service.leave_car(PLATE_A)


@pytest.mark.asyncio
async def test_leave_twice(service):
    """Test leaving twice fails with NotParked the second time."""
    await service.create_parking_lot(MAIN, ParkingSpaceCount(1))
    await service.park_car(MAIN, PLATE_A)

    left = await service.leave_car(PLATE_A)

    assert not left.is_parked
    assert left.left_at is not None
    assert await service.find_parking_record(PLATE_A) is None
    with pytest.raises(CarNotParkedError):
        await service.leave_car(PLATE_A)


@pytest.mark.asyncio
async def test_park_again_after_leaving(service):
    """Test a car can park again once it has left."""
    await service.create_parking_lot(MAIN, ParkingSpaceCount(1))
    await service.park_car(MAIN, PLATE_A)
    await service.leave_car(PLATE_A)

    record = await service.park_car(MAIN, PLATE_A)

    assert record.is_parked


@pytest.mark.asyncio
async def test_create_duplicate_lot(service):
    """Test creating a lot twice fails with AlreadyExists."""
    await service.create_parking_lot(MAIN, ParkingSpaceCount(10))

    with pytest.raises(ParkingLotAlreadyExistsError):
        await service.create_parking_lot(MAIN, ParkingSpaceCount(5))

    status = await service.get_parking_lot_status(MAIN)
    assert status.total_spaces.value == 10


@pytest.mark.asyncio
async def test_status_with_thirty_of_hundred(service):
    """Test status of a lot with 30 of 100 spaces taken."""
    await service.create_parking_lot(MAIN, ParkingSpaceCount(100))
    for index in range(1, 31):
        await service.park_car(MAIN, plate(index))

    status = await service.get_parking_lot_status(MAIN)

    assert status.occupied_spaces.value == 30
    assert status.available_spaces.value == 70
    assert status.occupancy_rate == 0.3
    assert not status.is_full
    assert status.occupancy_percentage == 30


@pytest.mark.asyncio
async def test_unknown_lot(service):
    """Test park and status on a missing lot fail with NotFound."""
    with pytest.raises(ParkingLotNotFoundError):
        await service.park_car(MAIN, PLATE_A)

    with pytest.raises(ParkingLotNotFoundError):
        await service.get_parking_lot_status(MAIN)

    assert await service.get_parked_cars(MAIN) == []


@pytest.mark.asyncio
async def test_get_parked_cars(service):
    """Test listing active records of a lot."""
    await service.create_parking_lot(MAIN, ParkingSpaceCount(3))
    await service.park_car(MAIN, PLATE_A)
    await service.park_car(MAIN, PLATE_B)
    await service.leave_car(PLATE_A)

    parked = await service.get_parked_cars(MAIN)

    assert [record.license_plate_number for record in parked] == [PLATE_B]


@pytest.mark.asyncio
async def test_delete_parking_lot(service):
    """Test deletion of empty, occupied and missing lots."""
    await service.create_parking_lot(MAIN, ParkingSpaceCount(1))
    await service.park_car(MAIN, PLATE_A)

    with pytest.raises(ParkingLotNotEmptyError):
        await service.delete_parking_lot(MAIN)

    await service.leave_car(PLATE_A)
    assert await service.delete_parking_lot(MAIN) is True
    assert await service.delete_parking_lot(MAIN) is False
    with pytest.raises(ParkingLotNotFoundError):
        await service.get_parking_lot_status(MAIN)


@pytest.mark.asyncio
async def test_service_matches_aggregate(service):
    """Test the service and the in-memory aggregate agree on every step."""
    # Arrange
    aggregate = ParkingLot(MAIN, ParkingSpaceCount(2))
    await service.create_parking_lot(MAIN, ParkingSpaceCount(2))
    steps = [
        ("park", PLATE_A),
        ("park", PLATE_A),
        ("park", PLATE_B),
        ("park", plate(7)),
        ("leave", PLATE_A),
        ("leave", PLATE_A),
        ("park", plate(7)),
    ]

    for action, license_plate_number in steps:
        # Act
        outcomes = []
        for run in (
            lambda: _run_aggregate(aggregate, action, license_plate_number),
            lambda: _run_service(service, action, license_plate_number),
        ):
            try:
                await run()
                outcomes.append("ok")
            except ParkingDomainError as error:
                outcomes.append(error.kind)

        # Assert
        assert outcomes[0] == outcomes[1], (action, license_plate_number)
        assert aggregate.get_status() == await service.get_parking_lot_status(MAIN)


async def _run_aggregate(aggregate, action, license_plate_number):
    if action == "park":
        return aggregate.park_car(license_plate_number)
    return aggregate.leave_car(license_plate_number)


async def _run_service(service, action, license_plate_number):
    if action == "park":
        return await service.park_car(MAIN, license_plate_number)
    return await service.leave_car(license_plate_number)


# ===========================
# Check order and side effects
# ===========================


@pytest.mark.asyncio
async def test_missing_lot_reported_before_duplicate(mock_ports):
    """Test NotFound wins over AlreadyParked."""
    load_port, save_port = mock_ports
    load_port.load_parking_lot.return_value = None
    load_port.load_parking_record.return_value = ParkingRecord(
        PLATE_A, MAIN, utc_now()
    )
    service = ParkingLotService(load_port=load_port, save_port=save_port)

    with pytest.raises(ParkingLotNotFoundError):
        await service.park_car(MAIN, PLATE_A)

    save_port.save_parking_record.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_reported_before_full(mock_ports):
    """Test AlreadyParked wins over LotFull."""
    load_port, save_port = mock_ports
    active = ParkingRecord(PLATE_A, MAIN, utc_now())
    load_port.load_parking_record.return_value = active
    load_port.load_parked_cars.return_value = [active]
    service = ParkingLotService(load_port=load_port, save_port=save_port)

    with pytest.raises(CarAlreadyParkedError):
        await service.park_car(MAIN, PLATE_A)

    save_port.save_parking_record.assert_not_called()


@pytest.mark.asyncio
async def test_full_lot_saves_nothing(mock_ports):
    """Test a full lot rejects parking without calling the save port."""
    load_port, save_port = mock_ports
    load_port.load_parked_cars.return_value = [
        ParkingRecord(PLATE_B, MAIN, utc_now())
    ]
    service = ParkingLotService(load_port=load_port, save_port=save_port)

    with pytest.raises(ParkingLotFullError):
        await service.park_car(MAIN, PLATE_A)

    save_port.save_parking_record.assert_not_called()


@pytest.mark.asyncio
async def test_park_saves_new_active_record(mock_ports):
    """Test a successful park saves exactly one active record."""
    load_port, save_port = mock_ports
    service = ParkingLotService(load_port=load_port, save_port=save_port)

    record = await service.park_car(MAIN, PLATE_A)

    save_port.save_parking_record.assert_awaited_once()
    saved = save_port.save_parking_record.await_args.args[0]
    assert saved == record
    assert saved.is_parked
    assert saved.license_plate_number == PLATE_A


@pytest.mark.asyncio
async def test_leave_updates_closed_record(mock_ports):
    """Test leaving stores the closed record through the update call."""
    load_port, save_port = mock_ports
    load_port.load_parking_record.return_value = ParkingRecord(
        PLATE_A, MAIN, utc_now()
    )
    service = ParkingLotService(load_port=load_port, save_port=save_port)

    left = await service.leave_car(PLATE_A)

    save_port.update_parking_record.assert_awaited_once_with(left)
    assert not left.is_parked
    save_port.save_parking_record.assert_not_called()


@pytest.mark.asyncio
async def test_leave_closed_record_from_store_rejected(mock_ports):
    """Test a closed record returned by the store is treated as not parked."""
    load_port, save_port = mock_ports
    load_port.load_parking_record.return_value = ParkingRecord(
        PLATE_A, MAIN, utc_now()
    ).leave()
    service = ParkingLotService(load_port=load_port, save_port=save_port)

    with pytest.raises(CarNotParkedError):
        await service.leave_car(PLATE_A)

    save_port.update_parking_record.assert_not_called()


@pytest.mark.asyncio
async def test_create_existing_lot_saves_nothing(mock_ports):
    """Test AlreadyExists is raised before any save."""
    load_port, save_port = mock_ports
    load_port.exists_parking_lot.return_value = True
    service = ParkingLotService(load_port=load_port, save_port=save_port)

    with pytest.raises(ParkingLotAlreadyExistsError):
        await service.create_parking_lot(MAIN, ParkingSpaceCount(3))

    save_port.save_parking_lot.assert_not_called()


# ===========================
# Concurrency
# ===========================


@pytest.mark.asyncio
@pytest.mark.parametrize("capacity,cars", [(1, 10), (3, 20), (5, 6)])
async def test_concurrent_parks_never_over_admit(capacity, cars):
    """Test N concurrent parks into C spaces give exactly C successes."""
    # Arrange
    repository = YieldingParkingLotRepository()
    service = ParkingLotService(load_port=repository, save_port=repository)
    await service.create_parking_lot(MAIN, ParkingSpaceCount(capacity))

    # Act
    results = await asyncio.gather(
        *(service.park_car(MAIN, plate(index)) for index in range(1, cars + 1)),
        return_exceptions=True,
    )

    # Assert
    successes = [result for result in results if isinstance(result, ParkingRecord)]
    failures = [result for result in results if isinstance(result, Exception)]
    assert len(successes) == capacity
    assert len(failures) == cars - capacity
    assert all(isinstance(failure, ParkingLotFullError) for failure in failures)

    status = await service.get_parking_lot_status(MAIN)
    assert status.occupied_spaces.value == capacity
    assert status.is_full


@pytest.mark.asyncio
async def test_concurrent_parks_of_same_car():
    """Test the same plate parked concurrently in two lots succeeds once."""
    repository = YieldingParkingLotRepository()
    service = ParkingLotService(load_port=repository, save_port=repository)
    lots = [ParkingLotName(f"Lot {index}") for index in range(5)]
    for name in lots:
        await service.create_parking_lot(name, ParkingSpaceCount(1))

    results = await asyncio.gather(
        *(service.park_car(name, PLATE_A) for name in lots),
        return_exceptions=True,
    )

    successes = [result for result in results if isinstance(result, ParkingRecord)]
    assert len(successes) == 1
    assert all(
        isinstance(result, CarAlreadyParkedError)
        for result in results
        if not isinstance(result, ParkingRecord)
    )


@pytest.mark.asyncio
async def test_concurrent_leaves_close_once():
    """Test concurrent leaves of one car close the record once."""
    repository = YieldingParkingLotRepository()
    service = ParkingLotService(load_port=repository, save_port=repository)
    await service.create_parking_lot(MAIN, ParkingSpaceCount(1))
    await service.park_car(MAIN, PLATE_A)

    results = await asyncio.gather(
        *(service.leave_car(PLATE_A) for _ in range(4)),
        return_exceptions=True,
    )

    successes = [result for result in results if isinstance(result, ParkingRecord)]
    assert len(successes) == 1
    assert sum(isinstance(result, CarNotParkedError) for result in results) == 3
    assert (await service.get_parking_lot_status(MAIN)).is_empty


@pytest.mark.asyncio
async def test_concurrent_park_and_leave_keep_counts_consistent():
    """Test interleaved parks and leaves never exceed capacity."""
    repository = YieldingParkingLotRepository()
    service = ParkingLotService(load_port=repository, save_port=repository)
    await service.create_parking_lot(MAIN, ParkingSpaceCount(2))
    await service.park_car(MAIN, plate(1))
    await service.park_car(MAIN, plate(2))

    await asyncio.gather(
        service.leave_car(plate(1)),
        service.leave_car(plate(2)),
        *(service.park_car(MAIN, plate(index)) for index in range(3, 9)),
        return_exceptions=True,
    )

    status = await service.get_parking_lot_status(MAIN)
    assert status.occupied_spaces.value <= 2
    assert len(await service.get_parked_cars(MAIN)) == status.occupied_spaces.value
    assert len(service._lot_locks) == 0
    assert len(service._plate_locks) == 0


@pytest.mark.asyncio
async def test_status_is_stable_without_mutation(service):
    """Test reading the status twice gives equal results."""
    await service.create_parking_lot(MAIN, ParkingSpaceCount(3))
    await service.park_car(MAIN, PLATE_A)

    assert await service.get_parking_lot_status(MAIN) == await service.get_parking_lot_status(
        MAIN
    )
