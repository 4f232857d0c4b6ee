"""Global exception handlers for standardized error responses.

Implements RFC 7807 Problem Details for HTTP APIs. Domain errors raised by
the services are mapped here, so endpoints do not translate them one by one.
"""

from http import HTTPStatus

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hexaparking.core.logging import logger
from hexaparking.domain.exceptions import ParkingDomainError
from hexaparking.models.errors import ProblemDetail, ValidationErrorDetail


def _status_title(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "An error occurred"


async def parking_domain_exception_handler(
    request: Request, exc: ParkingDomainError
) -> JSONResponse:  # noqa: ASYNC100
    """Handle domain rule violations with the status hint of the error.

    Args:
        request: The FastAPI request object.
        exc: The domain error raised by a service or value object.

    Returns:
        JSONResponse with ProblemDetail body including the error kind.
    """
    if exc.status_code >= 500:
        logger.error(f"Domain consistency error ({exc.kind}): {exc.message}")
    else:
        logger.warning(f"Domain rule rejected request ({exc.kind}): {exc.message}")

    problem_detail = ProblemDetail(
        title=_status_title(exc.status_code),
        status=exc.status_code,
        detail=exc.message,
        instance=str(request.url.path),
        kind=exc.kind,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem_detail.model_dump(exclude_none=True),
    )


async def http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:  # noqa: ASYNC100
    """Handle HTTPException with RFC 7807 ProblemDetail response.

    Args:
        request: The FastAPI request object.
        exc: The HTTPException that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.error(f"HTTPException: {exc.status_code} - {exc.detail}")

    problem_detail = ProblemDetail(
        title=_status_title(exc.status_code),
        status=exc.status_code,
        detail=str(exc.detail),
        instance=str(request.url.path),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem_detail.model_dump(exclude_none=True),
    )


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:  # noqa: ASYNC100
    """Handle unexpected exceptions with 500 Internal Server Error.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.exception(f"Unexpected error: {type(exc).__name__}")

    problem_detail = ProblemDetail(
        title="Internal Server Error",
        status=500,
        detail="An unexpected error occurred. Please try again later.",
        instance=str(request.url.path),
    )

    return JSONResponse(
        status_code=500,
        content=problem_detail.model_dump(exclude_none=True),
    )


async def validation_exception_handler(  # noqa: ASYNC100
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle validation errors with detailed field-level information.

    Args:
        request: The FastAPI request object.
        exc: The RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with ProblemDetail body including validation errors.
    """
    logger.warning(f"Validation error: {len(exc.errors())} errors")

    errors = [
        ValidationErrorDetail(
            type=error["type"],
            loc=tuple(str(loc) for loc in error["loc"]),
            msg=error["msg"],
            input=error.get("input"),
            ctx=(
                {k: str(v) for k, v in error.get("ctx", {}).items()}
                if error.get("ctx")
                else None
            ),
        )
        for error in exc.errors()
    ]

    problem_detail = ProblemDetail(
        title="Validation Error",
        status=422,
        detail=f"One or more validation errors occurred ({len(errors)} errors).",
        instance=str(request.url.path),
        errors=errors,
    )

    return JSONResponse(
        status_code=422,
        content=problem_detail.model_dump(mode="json", exclude_none=True),
    )
