"""
structlog setup shared by the engine, the command bridge and the ui.
"""
import logging
import sys

import structlog


def configure_logging(level="INFO"):
    """
    route stdlib logging and structlog to stdout at the given level
    """
    numeric = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger()


def get_logger(name=None):
    # lazy proxy, picks up configure_logging() even if called later
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()
