"""Logging configuration built around loguru."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>"
)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, everything when verbose, warnings otherwise."""
    level = "TRACE" if verbose else "WARNING"
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
