"""
Logging adapter that implements LoggingPort protocol.

This adapter wraps structlog so the application services only depend on
the LoggingPort / BoundLogger protocols.
"""
from typing import Any
from domain.interfaces import BoundLogger
from infrastructure.logging.structlog_logs import logger as structlog_logger


class StructlogBoundLogger:
    """
    Wrapper for structlog bound logger that implements BoundLogger protocol.
    """

    def __init__(self, bound_logger):
        self._logger = bound_logger

    def debug(self, event: str, **kwargs: Any) -> None:
        self._logger.debug(event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, **kwargs)

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.error(event, exc_info=exc_info, **kwargs)


class LoggingAdapter:
    """
    Adapter that implements LoggingPort for structured logging.

    Every bound logger writes JSON lines to stderr with the bound context
    (account id, step) on each message.
    """

    def bind(self, **kwargs: Any) -> BoundLogger:
        """
        Create a bound logger with context.

        Args:
            **kwargs: Context fields to bind to all log messages

        Returns:
            A bound logger with the specified context
        """
        bound_logger = structlog_logger.bind(**kwargs)
        return StructlogBoundLogger(bound_logger)
