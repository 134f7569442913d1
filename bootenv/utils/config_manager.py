import copy
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from ..config.accessors import ConfigAccessor
from ..config.constants import PROPERTIES_FILE, SETTINGS_FILE
from ..config.properties import PropertyStore
from ..config.schema import DEFAULTS, BootSettings, migrate_config
from ..core.errors import ConfigError
from ..logging import Logger, get_configured_logger, get_logger, load_logging_config

logger = get_logger("Settings", level="WARNING")


class ConfigManager:
    """
    Reads the on-disk configuration that lives next to the boot directory.

    - ``bootenv.yaml`` in the boot directory: tool settings, merged over
      defaults, migrated, then validated via pydantic (BootSettings).
    - ``boot.properties`` in the boot directory, then in the project
      directory (override): seeds a PropertyStore.

    Instances are owned by the caller; nothing here is process-global.
    """

    def __init__(self, boot_dir: Path, project_dir: Optional[Path] = None):
        self.boot_dir = Path(boot_dir)
        self.project_dir = Path(project_dir) if project_dir is not None else None
        self.settings_path = self.boot_dir / SETTINGS_FILE

    @classmethod
    def for_accessor(cls, accessor: ConfigAccessor, project_dir: Optional[Path] = None) -> "ConfigManager":
        return cls(accessor.boot_directory(), project_dir=project_dir)

    def _read_yaml(self) -> Dict[str, Any]:
        with open(self.settings_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError("Settings file must contain a mapping", context={"path": str(self.settings_path)})
        return data

    def _deep_update(self, target: Dict[str, Any], source: Dict[str, Any]) -> None:
        for key, value in source.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                self._deep_update(target[key], value)
            else:
                target[key] = value

    def _validate_and_migrate(self, raw: Dict[str, Any]) -> BootSettings:
        merged = copy.deepcopy(DEFAULTS)
        self._deep_update(merged, migrate_config(copy.deepcopy(raw)))
        try:
            return BootSettings(**merged)
        except ValidationError as e:
            raise ConfigError(
                "Settings validation failed",
                context={"path": str(self.settings_path), "errors": e.errors()},
            ) from e

    def load_settings(self) -> BootSettings:
        """
        Load settings from bootenv.yaml, or defaults when the file is absent.
        Raises ConfigError when the file is not UTF-8 YAML or fails validation.
        """
        if not self.settings_path.exists():
            logger.debug(f"Settings not found at {self.settings_path}, using defaults")
            return self._validate_and_migrate({})

        try:
            raw = self._read_yaml()
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigError(
                "Settings file is not valid UTF-8 YAML",
                context={"path": str(self.settings_path), "cause": str(e)},
            ) from e
        return self._validate_and_migrate(raw)

    def properties_files(self) -> List[Path]:
        files = [self.boot_dir / PROPERTIES_FILE]
        if self.project_dir is not None:
            files.append(self.project_dir / PROPERTIES_FILE)
        return files

    def load_properties(self) -> PropertyStore:
        return PropertyStore.from_files(self.properties_files())

    def get_logger(self, name: str) -> Logger:
        """Logger configured from the ``logging`` section of bootenv.yaml."""
        return get_configured_logger(name, load_logging_config(self))
