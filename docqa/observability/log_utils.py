"""
Logging utilities for safe structured logging.

Keeps user questions and retrieved passages out of log lines in full:
values are summarised or truncated before they reach a handler.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

DEFAULT_PREVIEW_LENGTH = 80


def safe_log_value(value: Any, max_length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """
    Convert a value to a short string for logging.

    Strings are truncated, collections are summarised by size.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        text = " ".join(value.split())
    elif isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        text = str(value)

    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message followed by key=value pairs.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs
    """
    if context:
        pairs = " ".join(f"{key}={safe_log_value(val)}" for key, val in context.items())
        message = f"{message} | {pairs}"
    logger.log(level, message)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with its traceback and context.

    Must be called from inside an ``except`` block.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    context.update({
        "error_type": type(exc).__name__,
        "error_msg": str(exc),
    })
    pairs = " ".join(f"{key}={safe_log_value(val, 200)}" for key, val in context.items())
    logger.exception(f"{message} | {pairs}")
