"""Centralized logging configuration."""

import sys

from loguru import logger as loguru_logger

from seat_selector.config import LOG_LEVEL

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}::{function}:{line}</>",
        "{message}",
    )
)

# Remove default handler to use the custom format
loguru_logger.remove()
loguru_logger.add(sys.stderr, format=log_format, level=LOG_LEVEL)

logger = loguru_logger
