"""
Unit tests for TraceIDMiddleware.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import Request, Response

from hexaparking.core.trace_context import trace_id_context
from hexaparking.middleware import TRACE_ID_HEADER, TraceIDMiddleware


@pytest.fixture
def middleware():
    """Create middleware instance."""
    return TraceIDMiddleware(app=AsyncMock())


def make_request(headers=None):
    request = MagicMock(spec=Request)
    request.method = "POST"
    request.url.path = "/api/parking-lots/Main/park"
    request.headers = headers or {}
    return request


@pytest.mark.asyncio
async def test_trace_id_middleware_adds_header(middleware):
    """Test middleware adds X-Trace-ID header."""
    # Arrange
    call_next = AsyncMock(return_value=Response(content="ok", status_code=200))

    # Act
    result = await middleware.dispatch(make_request(), call_next)

    # Assert
    assert len(result.headers[TRACE_ID_HEADER]) > 0


@pytest.mark.asyncio
async def test_trace_id_middleware_reuses_incoming_header(middleware):
    """Test an incoming trace id is propagated."""
    call_next = AsyncMock(return_value=Response())

    result = await middleware.dispatch(
        make_request({TRACE_ID_HEADER: "trace-123"}), call_next
    )

    assert result.headers[TRACE_ID_HEADER] == "trace-123"


@pytest.mark.asyncio
async def test_trace_id_middleware_sets_and_resets_context(middleware):
    """Test trace_id is visible during the request only."""
    seen = []

    async def call_next(request):  # noqa: ASYNC100
        seen.append(trace_id_context.get())
        return Response()

    await middleware.dispatch(make_request({TRACE_ID_HEADER: "trace-456"}), call_next)

    assert seen == ["trace-456"]
    assert trace_id_context.get() is None


@pytest.mark.asyncio
async def test_trace_id_middleware_reraises(middleware):
    """Test errors from the handler propagate and the context is reset."""
    call_next = AsyncMock(side_effect=RuntimeError("boom"))

    with pytest.raises(RuntimeError):
        await middleware.dispatch(make_request(), call_next)

    assert trace_id_context.get() is None
