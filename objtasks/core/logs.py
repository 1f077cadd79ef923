"""Logging setup for ObjTasks."""

import logging
from typing import Optional

from .config import LoggingConfig


def setup_logging(config: Optional[LoggingConfig] = None, verbose: bool = False) -> None:
    """Configure root logging from config.

    Args:
        config: Logging section of the configuration.
        verbose: Force DEBUG level.
    """
    config = config or LoggingConfig()
    level = logging.DEBUG if verbose else getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.format, force=True)
