# -*- coding: utf-8 -*-
"""
Logging Configuration
=====================

Logging settings for bootenv, taken from the ``logging`` section of
``bootenv.yaml`` in the boot directory.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .logger import Logger, get_logger

if TYPE_CHECKING:
    from ..config.schema import BootSettings
    from ..utils.config_manager import ConfigManager


@dataclass
class LoggingConfig:
    """Configuration for the logging system."""

    level: str = "INFO"

    # Output settings
    console_output: bool = True
    file_output: bool = False

    # Log directory (relative to the boot directory or absolute)
    log_dir: Optional[str] = None


def get_default_log_dir(boot_dir: Path) -> Path:
    """Get the default log directory."""
    return Path(boot_dir) / "logs"


def logging_config_from_settings(settings: "BootSettings", boot_dir: Path) -> LoggingConfig:
    section = settings.logging
    log_dir = Path(section.log_dir) if section.log_dir else get_default_log_dir(boot_dir)
    if not log_dir.is_absolute():
        log_dir = Path(boot_dir) / log_dir
    return LoggingConfig(
        level=section.level,
        console_output=section.console_output,
        file_output=section.file_output,
        log_dir=str(log_dir),
    )


def load_logging_config(manager: "ConfigManager") -> LoggingConfig:
    """
    Load logging configuration through a ConfigManager.

    Returns:
        LoggingConfig built from bootenv.yaml, or defaults when it is absent.
        Invalid settings raise ConfigError.
    """
    return logging_config_from_settings(manager.load_settings(), manager.boot_dir)


def get_configured_logger(name: str, config: LoggingConfig) -> Logger:
    return get_logger(
        name,
        level=config.level,
        console_output=config.console_output,
        file_output=config.file_output,
        log_dir=config.log_dir if config.file_output else None,
    )
