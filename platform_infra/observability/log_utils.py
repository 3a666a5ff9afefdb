"""
Structured logging helpers.

Context passed to these helpers ends up as attributes on the log record.
Values are rendered to short strings first: Pulumi outputs and resources
are not meaningfully printable, and handle lists can be long.

Dependencies: logging (stdlib), pulumi
System role: Logging helper functions for managers and the orchestrator
"""

import logging
from enum import Enum
from typing import Any

import pulumi

# LogRecord attributes that `extra` must not overwrite
_RESERVED_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a context value for a log record.

    Collections are summarised by size, Pulumi outputs and resources by
    type, enums by value.

    Args:
        value: Value to render
        max_length: Length after which the rendering is truncated

    Returns:
        str: Log-safe string
    """
    if value is None:
        return "None"
    if isinstance(value, Enum):
        rendered = str(value.value)
    elif isinstance(value, pulumi.Output):
        rendered = "<output>"
    elif isinstance(value, pulumi.Resource):
        rendered = f"<{type(value).__name__}>"
    elif isinstance(value, (list, tuple, set, frozenset)):
        rendered = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        rendered = f"dict({len(value)} keys)"
    else:
        try:
            rendered = str(value)
        except Exception as exc:
            return f"<unable to log: {type(exc).__name__}>"

    if len(rendered) > max_length:
        return f"{rendered[:max_length]}... (truncated, {len(rendered)} total)"
    return rendered


def _record_extra(context: dict[str, Any]) -> dict[str, str]:
    return {
        (f"ctx_{key}" if key in _RESERVED_KEYS else key): safe_log_value(value)
        for key, value in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log `message` at `level` with `context` attached to the record."""
    logger.log(level, message, extra=_record_extra(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an error with its traceback and context.

    The exception text is appended to the message and its type recorded as
    `error_type` on the record.
    """
    extra = _record_extra(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(f"{message}: {exc}", exc_info=exc, extra=extra)
