"""
Logging configuration for the SatCat toolkit.
Console logging via loguru, with an optional rotating log file.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


class LogConfig:
    """Centralized logging configuration."""

    LOG_FORMAT = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[component]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    @classmethod
    def setup(cls, log_level: str = "INFO", log_file: Optional[Union[str, Path]] = None):
        """
        Set up logging for the toolkit. Meant for application entry points:
        it replaces every installed sink and enables the satcat modules.

        Args:
            log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional path of a rotating log file
        """
        # Remove default and previously installed handlers
        logger.remove()
        logger.enable("satcat")

        # Records logged through the bare logger still need a component
        logger.configure(extra={"component": "satcat"})

        logger.add(
            sys.stderr,
            format=cls.LOG_FORMAT,
            level=log_level,
            colorize=True,
        )

        if log_file is not None:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                log_file,
                format=cls.LOG_FORMAT,
                level=log_level,
                rotation="50 MB",
                retention="7 days",
                compression="zip",
            )

        logger.debug(f"Logging initialized at level {log_level}")


def get_logger(component: str):
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., 'catalog', 'cli')

    Returns:
        Configured logger instance

    Example:
        >>> from satcat.utils.logging_config import get_logger
        >>> logger = get_logger("catalog")
        >>> logger.info("Loaded catalog")
    """
    return logger.bind(component=component)


# Library messages stay silent until an application calls LogConfig.setup()
# or logger.enable("satcat"); sinks installed by the host are left alone.
logger.disable("satcat")
