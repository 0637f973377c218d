"""Loguru configuration for chart_label."""

import sys
from pathlib import Path

from loguru import logger


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure Loguru sinks: colorized console plus an optional file."""
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level:<8}</level> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}",
            rotation="5 MB",
            retention="30 days",
            encoding="utf-8",
        )
