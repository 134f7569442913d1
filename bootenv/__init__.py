"""Environment and configuration access for the boot build tool."""

from .config import (
    ConfigAccessor,
    EnvironmentProvider,
    HostInfo,
    OsEnvironment,
    PropertyStore,
    StaticEnvironment,
    is_windows,
)
from .core.errors import BaseError, ConfigError, EnvError
from .utils.config_manager import ConfigManager

__version__ = "0.1.0"

__all__ = [
    "ConfigAccessor",
    "ConfigManager",
    "EnvironmentProvider",
    "HostInfo",
    "OsEnvironment",
    "PropertyStore",
    "StaticEnvironment",
    "is_windows",
    "BaseError",
    "ConfigError",
    "EnvError",
]
