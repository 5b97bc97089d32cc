"""Append-only operation log written to ``file-organizer.log``."""

from __future__ import annotations

import logging
import os

LOG_FILE = "file-organizer.log"


def get_logger() -> logging.Logger:
    """Return the operation logger, opening the log file in the working directory on first use."""
    logger = logging.getLogger("forg.operations")
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        handler = logging.FileHandler(os.path.abspath(LOG_FILE), encoding="utf-8")
        handler.setFormatter(
            logging.Formatter(
                "INFO: %(asctime)s %(filename)s:%(lineno)d: %(message)s",
                datefmt="%Y/%m/%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def log_operation(operation: str) -> None:
    """Record one operation as a line in the log file."""
    get_logger().info(operation, stacklevel=2)