"""Per-request trace id shared by the middleware and the log filter."""

import contextvars
import uuid
from collections.abc import Iterator
from contextlib import contextmanager

NO_TRACE_ID = "N/A"

trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "trace_id", default=None
)


def current_trace_id() -> str:
    """Trace id of the request being served, or N/A outside one."""
    return trace_id_context.get() or NO_TRACE_ID


@contextmanager
def bound_trace_id(trace_id: str | None = None) -> Iterator[str]:
    """
    Bind a trace id for the duration of the block.

    Args:
        trace_id: Incoming id to reuse; a new UUID when empty

    Yields:
        The bound trace id
    """
    trace_id = trace_id or str(uuid.uuid4())
    token = trace_id_context.set(trace_id)
    try:
        yield trace_id
    finally:
        trace_id_context.reset(token)
