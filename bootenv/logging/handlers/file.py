# -*- coding: utf-8 -*-
"""
File Log Handlers
=================

Handlers writing FileFormatter output under the boot directory,
optionally rotating by size.
"""

import logging
from logging.handlers import RotatingFileHandler as BaseRotatingFileHandler
from pathlib import Path
from typing import Union

from ..logger import FileFormatter

PathLike = Union[str, Path]


def _prepare_log_path(filename: PathLike) -> str:
    """Create the parent directory and return the path as a string."""
    path = Path(filename).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return str(path)


class FileHandler(logging.FileHandler):
    """Append-only log file with detailed formatting."""

    def __init__(self, filename: PathLike, level: int = logging.DEBUG, encoding: str = "utf-8"):
        super().__init__(_prepare_log_path(filename), encoding=encoding)
        self.setLevel(level)
        self.setFormatter(FileFormatter())


class RotatingFileHandler(BaseRotatingFileHandler):
    """
    Size-rotated log file.

    Args:
        filename: Path to log file
        level: Minimum log level
        max_bytes: Maximum file size before rotation
        backup_count: Number of rotated files to keep
        encoding: File encoding
    """

    def __init__(
        self,
        filename: PathLike,
        level: int = logging.DEBUG,
        max_bytes: int = 1024 * 1024,  # 1MB
        backup_count: int = 3,
        encoding: str = "utf-8",
    ):
        super().__init__(
            _prepare_log_path(filename),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding=encoding,
        )
        self.setLevel(level)
        self.setFormatter(FileFormatter())
