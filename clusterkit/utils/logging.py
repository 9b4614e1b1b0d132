"""Logging configuration."""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = 'CLUSTERKIT_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get configured logger.

    Args:
        name: Logger name
        level: Log level; falls back to $CLUSTERKIT_LOG_LEVEL, then WARNING

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    level = level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger
