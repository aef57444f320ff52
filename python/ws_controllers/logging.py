"""Structured logging for ws-controllers.

This module provides structured logging functions on top of the
standard library ``logging`` package. Structured fields are attached to
each record as ``record.fields`` so handlers and formatters can emit
them alongside the message.

Example:
    >>> from ws_controllers import log_info, log_warn
    >>>
    >>> log_info("Discovered controllers", {"package": "myapp.controllers"})
    >>>
    >>> log_warn("Case mismatch on controller name", {
    ...     "controller_name": "admin:users",
    ...     "canonical_name": "Admin:Users",
    ... })
"""

from __future__ import annotations

import logging
from typing import Any

from .types import LogContext

LOGGER_NAME = "ws_controllers"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_logger = logging.getLogger(LOGGER_NAME)


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return _logger


def log_error(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an ERROR level message with structured fields.

    Use this for unrecoverable failures that require intervention.

    Args:
        message: The log message.
        fields: Optional structured fields for context. Can be a dict
                or a LogContext instance.

    Example:
        >>> log_error("Failed to import controller package", {
        ...     "package": "myapp.controllers",
        ...     "error_message": "No module named 'myapp'"
        ... })
    """
    _log(logging.ERROR, message, fields)


def log_warn(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a WARN level message with structured fields.

    Use this for recoverable advisories such as corrected controller names.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _log(logging.WARNING, message, fields)


def log_info(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an INFO level message with structured fields.

    Use this for lifecycle events like configuration and discovery.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _log(logging.INFO, message, fields)


def log_debug(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a DEBUG level message with structured fields.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _log(logging.DEBUG, message, fields)


def log_trace(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a TRACE level message with structured fields.

    This level is below DEBUG and typically disabled.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _log(TRACE, message, fields)


def _log(level: int, message: str, fields: dict[str, Any] | LogContext | None) -> None:
    if not _logger.isEnabledFor(level):
        return
    _logger.log(level, message, extra={"fields": _normalize_fields(fields) or {}})


def _normalize_fields(
    fields: dict[str, Any] | LogContext | None,
) -> dict[str, str] | None:
    """Normalize fields to a dict of strings.

    Args:
        fields: Input fields as dict, LogContext, or None.

    Returns:
        Dict with string values, or None if no fields.
    """
    if fields is None:
        return None

    if isinstance(fields, LogContext):
        # Convert LogContext to dict, excluding None values
        return {k: str(v) for k, v in fields.model_dump().items() if v is not None}

    return {k: str(v) for k, v in fields.items()}


__all__ = [
    "LOGGER_NAME",
    "TRACE",
    "get_logger",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
