# -*- coding: utf-8 -*-
"""
Logging for bootenv
===================

A small, consistent logging layer with:
- Unified format: [Module] LEVEL: Message
- Color-coded console output
- Optional file output under the boot directory

Usage:
    from bootenv.logging import get_logger

    logger = get_logger("Boot")
    logger.info("Resolving boot directory")
    logger.warning("Properties file is not readable")
"""

# Configuration
from .config import (
    LoggingConfig,
    get_configured_logger,
    get_default_log_dir,
    load_logging_config,
    logging_config_from_settings,
)

# Handlers
from .handlers import FileHandler, RotatingFileHandler
from .logger import (
    ConsoleFormatter,
    FileFormatter,
    Logger,
    get_logger,
    reset_logger,
    set_default_service_prefix,
)

__all__ = [
    # Core
    "Logger",
    "get_logger",
    "reset_logger",
    "set_default_service_prefix",
    "ConsoleFormatter",
    "FileFormatter",
    # Handlers
    "FileHandler",
    "RotatingFileHandler",
    # Config
    "LoggingConfig",
    "load_logging_config",
    "logging_config_from_settings",
    "get_configured_logger",
    "get_default_log_dir",
]
