"""Logging setup.

Modules log through ``structlog.get_logger(__name__)``; this wires
structlog on top of the stdlib root logger once per process.
"""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib and structlog output.

    Args:
        level: Log level name (unknown names fall back to INFO)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    try:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
    except Exception:  # pragma: no cover
        logging.basicConfig(level=logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )
