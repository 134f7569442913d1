# -*- coding: utf-8 -*-
"""
Log Handlers
============

Custom logging handlers for file output.
"""

from .file import FileHandler, RotatingFileHandler

__all__ = [
    "FileHandler",
    "RotatingFileHandler",
]
