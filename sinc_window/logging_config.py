"""Logging setup for the command line tools.

The library modules only create loggers with ``logging.getLogger(__name__)``
and never attach handlers.  The runners call `setup_logging` once at
startup:

```python
from sinc_window.logging_config import setup_logging

setup_logging(console_level=logging.DEBUG, log_dir="logs")
```
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB per log file
BACKUP_COUNT = 5

PACKAGE_LOGGER = "sinc_window"


def create_console_handler(level: int = logging.INFO) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    return handler


def create_rotating_handler(
    filepath: str,
    level: int = logging.DEBUG,
    max_bytes: int = MAX_BYTES,
    backup_count: int = BACKUP_COUNT,
) -> logging.Handler:
    """Create a size rotated file handler writing `filepath`."""
    handler = RotatingFileHandler(
        filepath,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(console_level: int = logging.INFO, log_dir: Optional[str] = None) -> None:
    """Configure the package logger.

    Parameters
    ----------
    console_level : int
        Level for the stdout handler.
    log_dir : str, optional
        If given, DEBUG and above are also written to
        ``<log_dir>/sinc_window.log``.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(logging.DEBUG)
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(create_console_handler(console_level))
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        pkg_logger.addHandler(create_rotating_handler(os.path.join(log_dir, "sinc_window.log")))
    pkg_logger.debug("Logging initialized (console level %s)", logging.getLevelName(console_level))

