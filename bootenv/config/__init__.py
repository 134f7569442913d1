# -*- coding: utf-8 -*-
"""
Configuration
=============

Everything the boot process asks of its host:

1. **Accessor (accessors.py)** - environment mapping, lookups with defaults,
   boot directory resolution and Windows detection
   - ConfigAccessor, is_windows

2. **Providers (providers.py)** - injectable environment and host facts
   - EnvironmentProvider, OsEnvironment, StaticEnvironment, HostInfo

3. **Properties (properties.py)** - process-local settings store
   - PropertyStore

4. **Schema (schema.py)** - validated tool settings
   - BootSettings, LoggingSettings, migrate_config
"""

from .accessors import ConfigAccessor, is_windows
from .properties import PropertyStore
from .providers import (
    EnvironmentProvider,
    HostInfo,
    OsEnvironment,
    StaticEnvironment,
    java_style_os_name,
)
from .schema import CURRENT_SCHEMA_VERSION, BootSettings, LoggingSettings, migrate_config

__all__ = [
    # From accessors.py
    "ConfigAccessor",
    "is_windows",
    # From providers.py
    "EnvironmentProvider",
    "OsEnvironment",
    "StaticEnvironment",
    "HostInfo",
    "java_style_os_name",
    # From properties.py
    "PropertyStore",
    # From schema.py
    "BootSettings",
    "LoggingSettings",
    "CURRENT_SCHEMA_VERSION",
    "migrate_config",
]
