"""
Logging helpers that tag every line with the invocation's correlation ID.

Each proxy invocation creates its own ID; nothing is shared between calls.
"""

import logging
import uuid
from typing import Any, Optional


logger = logging.getLogger("command_proxy")


def new_correlation_id() -> str:
    """Create a fresh correlation ID for one command invocation."""
    return uuid.uuid4().hex


def format_message(message: str, correlation_id: Optional[str] = None, **kwargs: Any) -> str:
    """
    Prefix a message with its correlation ID and append key=value context.

    Args:
        message: Log message
        correlation_id: Invocation correlation ID (omitted when empty)
        **kwargs: Additional context to include in log message

    Returns:
        The formatted log line
    """
    formatted_message = f"[{correlation_id}] {message}" if correlation_id else message

    if kwargs:
        context_str = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        formatted_message = f"{formatted_message} ({context_str})"

    return formatted_message


def log_with_correlation(
    level: str,
    message: str,
    correlation_id: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """Log a message at ``level`` ('debug', 'info', 'warning', 'error')."""
    log_func = getattr(logger, level.lower(), logger.info)
    log_func(format_message(message, correlation_id, **kwargs))


def log_info(message: str, correlation_id: Optional[str] = None, **kwargs: Any) -> None:
    """Log info message with correlation ID."""
    log_with_correlation("info", message, correlation_id, **kwargs)


def log_warning(message: str, correlation_id: Optional[str] = None, **kwargs: Any) -> None:
    """Log warning message with correlation ID."""
    log_with_correlation("warning", message, correlation_id, **kwargs)


def log_debug(message: str, correlation_id: Optional[str] = None, **kwargs: Any) -> None:
    """Log debug message with correlation ID."""
    log_with_correlation("debug", message, correlation_id, **kwargs)
