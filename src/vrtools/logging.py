"""Logging configuration helpers."""

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(verbose: bool = False) -> None:
    """Configure loguru with a compact stderr sink and enable vrtools records."""
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.enable("vrtools")
