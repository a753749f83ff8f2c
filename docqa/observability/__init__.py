"""
Observability module.

Provides logging configuration, correlation ID tracking and safe
structured logging helpers.
"""

from docqa.observability.correlation import correlation_scope, get_correlation_id
from docqa.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
]
