"""
Logging configuration for the Parcel Tracker.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger exactly once. Modules log through loggers
under the ``parcel_tracker`` namespace.
"""

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "parcel_tracker"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``parcel_tracker.store``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Does nothing if the root logger already has handlers, so repeated
    calls (tests, scripts importing each other) are safe.

    Args:
        level: Logging level name, case insensitive
        logfile: Optional path for an additional file handler
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
