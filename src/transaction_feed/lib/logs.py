"""
Logging utilities for the Transaction Feed.

Provides a logger factory that returns configured Python loggers with
consistent formatting across the application.
"""

import logging
from pathlib import Path

from transaction_feed import config

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    If name is a file path (e.g., __file__), the module stem is used so log
    lines read "aggregator" rather than the absolute path.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem

    log = logging.getLogger(name)

    # Only configure once per logger name
    if not log.handlers:
        log.setLevel(getattr(logging, config.log_level(), logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)

    return log
