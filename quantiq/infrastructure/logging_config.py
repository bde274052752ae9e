"""Logging setup for hosts and scripts.

The library only emits events; it never configures logging on import.
"""

import logging as _logging
import os
from typing import Optional

import structlog

LOG_LEVEL_VAR = "QUANTIQ_LOG_LEVEL"


def configure_logging(level: Optional[str] = None) -> int:
    """Configure stdlib logging and structlog at one level.

    Args:
        level: Level name; defaults to QUANTIQ_LOG_LEVEL, then INFO

    Returns:
        int: Numeric level applied
    """
    name = (level or os.getenv(LOG_LEVEL_VAR, "INFO")).upper()
    numeric = getattr(_logging, name, _logging.INFO)
    if not isinstance(numeric, int):
        numeric = _logging.INFO

    _logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        cache_logger_on_first_use=False,
    )
    return numeric
