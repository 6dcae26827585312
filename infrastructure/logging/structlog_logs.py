import logging, sys
import structlog

from domain.config import get_logging_config


def configure_logging(level: str | int | None = None) -> None:
    """(Re)configure structlog; `level` defaults to LOG_LEVEL."""
    if level is None:
        level = get_logging_config().level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # structlog processors
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # stdout carries the rendered transactions, logs go to stderr
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


configure_logging()

logger = structlog.get_logger()
