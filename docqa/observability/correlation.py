"""
Correlation ID context manager.

Tags every log line emitted while answering one shell command with the same ID.

Dependencies: contextvars
System role: Request tracing across a single query
"""

from contextlib import contextmanager
from contextvars import ContextVar
from collections.abc import Iterator
import uuid

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """
    Get current correlation ID from context.

    Returns:
        str: Current correlation ID, empty when none is set
    """
    return correlation_id_ctx.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Set a correlation ID for the duration of the block."""
    token = correlation_id_ctx.set(correlation_id or uuid.uuid4().hex[:12])
    try:
        yield correlation_id_ctx.get()
    finally:
        correlation_id_ctx.reset(token)
