"""
Logging utilities for consistent logging setup across the package.
"""

from __future__ import annotations

import logging

from forwardsec.common.config import Config


def setup_logger(
    logger: logging.Logger | None = None, log_level: int | None = None
) -> logging.Logger:
    """
    Set up a logger with a StreamHandler and standard formatter.

    Args:
        logger: The logger to configure (default: the package logger)
        log_level: The logging level to set (default: Config.LOG_LEVEL)

    Returns:
        The configured logger
    """
    if logger is None:
        logger = logging.getLogger("forwardsec")
    if log_level is None:
        log_level = Config.LOG_LEVEL

    logger.setLevel(log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(log_level)
    return logger
