"""
Domain exceptions for the parking and car modules.

Every exception carries a ``kind`` identifying the violated rule and a
``status_code`` hint used by the REST adapter to build the error response.
The domain itself never logs, retries or suppresses these errors.
"""


class ParkingDomainError(Exception):
    """Base class for all domain rule violations."""

    kind: str = "DomainError"
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ============================================================================
# Value object validation (400)
# ============================================================================


class InvalidLicensePlateError(ParkingDomainError, ValueError):
    """License plate string does not match the plate grammar."""

    kind = "InvalidFormat"


class EmptyParkingLotNameError(ParkingDomainError, ValueError):
    """Parking lot name is blank."""

    kind = "EmptyName"


class NegativeSpaceCountError(ParkingDomainError, ValueError):
    """Parking space count is below zero."""

    kind = "NegativeCount"


# ============================================================================
# Parking state transitions (409)
# ============================================================================


class RecordAlreadyLeftError(ParkingDomainError):
    """leave() was called on a closed parking record."""

    kind = "AlreadyLeft"
    status_code = 409


class ParkingLotAlreadyExistsError(ParkingDomainError):
    """A parking lot with the same name is already registered."""

    kind = "AlreadyExists"
    status_code = 409


class CarAlreadyParkedError(ParkingDomainError):
    """The plate already has an active parking record."""

    kind = "AlreadyParked"
    status_code = 409


class ParkingLotFullError(ParkingDomainError):
    """No space left in the parking lot."""

    kind = "LotFull"
    status_code = 409


class ParkingLotNotEmptyError(ParkingDomainError):
    """The parking lot still has active records and cannot be removed."""

    kind = "NotEmpty"
    status_code = 409


class CarAlreadyRegisteredError(ParkingDomainError):
    """The plate is already registered as a car."""

    kind = "AlreadyRegistered"
    status_code = 409


# ============================================================================
# Lookups (404)
# ============================================================================


class ParkingLotNotFoundError(ParkingDomainError):
    """No parking lot is stored under the given name."""

    kind = "NotFound"
    status_code = 404


class CarNotParkedError(ParkingDomainError):
    """The plate has no active parking record."""

    kind = "NotParked"
    status_code = 404


class CarNotFoundError(ParkingDomainError):
    """No car is registered with the given plate."""

    kind = "CarNotFound"
    status_code = 404


# ============================================================================
# Consistency (500)
# ============================================================================


class InvalidParkingLotStatusError(ParkingDomainError):
    """Computed status breaks the sum or occupancy-rate invariant."""

    kind = "InvalidStatus"
    status_code = 500
