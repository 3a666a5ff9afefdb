"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from platform_infra.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from platform_infra.observability.logger import PulumiLogHandler, configure_logging

__all__ = [
    "PulumiLogHandler",
    "configure_logging",
    "log_exception_with_context",
    "log_with_context",
    "safe_log_value",
]
