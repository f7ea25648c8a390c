"""Logging setup for the command line interface."""

import sys

from loguru import logger


def configure_logging(verbose: bool = False) -> int:
    """
    Replace loguru's default sink with a stderr sink.

    Args:
        verbose: Log everything down to DEBUG instead of only warnings

    Returns:
        Id of the added sink
    """
    logger.remove()
    return logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
