"""Logging utility for Tailwind Mapper."""

import logging
import os
import sys
from typing import Optional, Union
from .config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(log_level: Union[int, str] = LOG_LEVEL,
                  log_file: Optional[str] = LOG_FILE) -> None:
    """Set up logging configuration.

    Records go to stderr so that stdout stays free for a protocol transport.

    Args:
        log_level: Level name or number
        log_file: Optional file that receives a copy of every record
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True
    )

def get_logger(name):
    """Get a logger instance for the specified module.

    Args:
        name: Name of the module

    Returns:
        Logger instance
    """
    return logging.getLogger(name)

# Exported functions
__all__ = ['setup_logging', 'get_logger']
