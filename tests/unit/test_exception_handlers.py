"""
Unit tests for exception handlers.

Tests error response formatting and status code mapping.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError

from hexaparking.domain.exceptions import (
    CarAlreadyParkedError,
    InvalidLicensePlateError,
    InvalidParkingLotStatusError,
    ParkingLotFullError,
    ParkingLotNotFoundError,
)
from hexaparking.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    parking_domain_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def request_mock():
    request = MagicMock(spec=Request)
    request.url.path = "/api/parking-lots/Main/park"
    return request


# ===========================
# Domain Error Handler Tests
# ===========================


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "exc,status_code,kind,title",
    [
        (InvalidLicensePlateError("bad plate"), 400, "InvalidFormat", "Bad Request"),
        (ParkingLotNotFoundError("no lot"), 404, "NotFound", "Not Found"),
        (CarAlreadyParkedError("parked"), 409, "AlreadyParked", "Conflict"),
        (ParkingLotFullError("full"), 409, "LotFull", "Conflict"),
        (
            InvalidParkingLotStatusError("out of sync"),
            500,
            "InvalidStatus",
            "Internal Server Error",
        ),
    ],
)
async def test_domain_error_mapping(request_mock, exc, status_code, kind, title):
    """Test each domain error maps to its status and kind."""
    # Act
    response = await parking_domain_exception_handler(request_mock, exc)

    # Assert
    assert response.status_code == status_code
    body = json.loads(response.body)
    assert body["status"] == status_code
    assert body["kind"] == kind
    assert body["title"] == title
    assert body["detail"] == exc.message
    assert body["instance"] == "/api/parking-lots/Main/park"
    assert body["type"].startswith("https://datatracker.ietf.org/")


# ===========================
# HTTP Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_http_exception_handler_404(request_mock):
    """Test HTTP exception handler with 404 status."""
    # Arrange
    exc = HTTPException(status_code=404, detail="Not here")

    # Act
    response = await http_exception_handler(request_mock, exc)

    # Assert
    assert response.status_code == 404
    body = json.loads(response.body)
    assert body["title"] == "Not Found"
    assert body["detail"] == "Not here"
    assert "kind" not in body


@pytest.mark.asyncio
async def test_http_exception_handler_unknown_status(request_mock):
    """Test unusual status codes still get a title."""
    response = await http_exception_handler(
        request_mock, HTTPException(status_code=599, detail="odd")
    )

    assert response.status_code == 599
    assert json.loads(response.body)["title"] == "An error occurred"


# ===========================
# General Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_general_exception_handler_hides_details(request_mock):
    """Test unexpected errors become a generic 500."""
    response = await general_exception_handler(request_mock, RuntimeError("secret"))

    assert response.status_code == 500
    body = json.loads(response.body)
    assert "secret" not in body["detail"]
    assert body["title"] == "Internal Server Error"


# ===========================
# Validation Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_validation_exception_handler(request_mock):
    """Test validation errors are listed field by field."""
    # Arrange
    exc = RequestValidationError(
        [
            {
                "type": "greater_than_equal",
                "loc": ("body", "totalSpaces"),
                "msg": "Input should be greater than or equal to 1",
                "input": 0,
                "ctx": {"ge": 1},
            },
            {
                "type": "missing",
                "loc": ("body", "name"),
                "msg": "Field required",
                "input": {},
            },
        ]
    )

    # Act
    response = await validation_exception_handler(request_mock, exc)

    # Assert
    assert response.status_code == 422
    body = json.loads(response.body)
    assert len(body["errors"]) == 2
    assert body["errors"][0]["loc"] == ["body", "totalSpaces"]
    assert body["errors"][0]["ctx"] == {"ge": "1"}
    assert "ctx" not in body["errors"][1]
