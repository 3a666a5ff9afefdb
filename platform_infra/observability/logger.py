"""
Logger configuration.

Provides configured logging with ISO timestamps, optionally forwarding
records to the Pulumi engine so they show up in `pulumi up` output.

Dependencies: logging (stdlib), pulumi
System role: Centralized logging configuration
"""

import logging
import sys

import pulumi


class PulumiLogHandler(logging.Handler):
    """Forward log records to the Pulumi engine log."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if record.levelno >= logging.ERROR:
                pulumi.log.error(message)
            elif record.levelno >= logging.WARNING:
                pulumi.log.warn(message)
            elif record.levelno >= logging.INFO:
                pulumi.log.info(message)
            else:
                pulumi.log.debug(message)
        except Exception:
            self.handleError(record)


def configure_logging(level: str = "INFO", forward_to_pulumi: bool = False) -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root log level name
        forward_to_pulumi: Send records to the Pulumi engine instead of stdout
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if forward_to_pulumi:
        handler: logging.Handler = PulumiLogHandler()
        handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    handler.setLevel(logging.DEBUG)

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    logging.getLogger("grpc").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
