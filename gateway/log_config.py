"""structlog setup for the gateway process."""

import logging

import structlog


def configure_logging(level: str = "info") -> None:
    """Configure structlog with a filtering logger at the given level.

    Args:
        level: Level name ("debug", "info", "warning", "error", "critical")
    """
    log_level = logging.getLevelNamesMapping()[level.upper()]
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )
