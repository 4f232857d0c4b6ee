"""
Middleware to add trace_id to each request.

The trace_id allows tracking logs from the same HTTP request throughout
the application.
"""

from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from hexaparking.core.logging import logger
from hexaparking.core.trace_context import bound_trace_id

TRACE_ID_HEADER = "X-Trace-ID"


class TraceIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique trace_id to each request.

    Flow:
    1. Request arrives → reuses an incoming X-Trace-ID or generates a UUID
    2. Stores trace_id in contextvars
    3. All logs automatically include the trace_id
    4. Response includes X-Trace-ID header
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Processes the request by adding trace_id.

        Args:
            request: HTTP request
            call_next: Next middleware/handler

        Returns:
            Response with X-Trace-ID header
        """
        with bound_trace_id(request.headers.get(TRACE_ID_HEADER)) as trace_id:
            logger.info(f"Request started: {request.method} {request.url.path}")

            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    f"Request failed: {request.method} {request.url.path}"
                )
                raise

            response.headers[TRACE_ID_HEADER] = trace_id
            logger.info(
                f"Request completed: {request.method} {request.url.path} - Status: {response.status_code}"  # noqa: E501
            )
            return response


__all__ = ["TraceIDMiddleware", "TRACE_ID_HEADER"]
