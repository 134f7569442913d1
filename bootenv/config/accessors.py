from pathlib import Path
from typing import Dict, Optional, Union

from ..core.errors import EnvError
from ..logging import get_logger
from .constants import BOOT_COLOR, BOOT_COLOR_VALUE, BOOT_DIR_NAME, BOOT_HOME, CLOJURE_NAME
from .properties import PropertyStore
from .providers import EnvironmentProvider, HostInfo, OsEnvironment

logger = get_logger("Boot", level="WARNING")


def is_windows(os_name: str) -> bool:
    return "win" in os_name.lower()


class ConfigAccessor:
    """
    Environment and property lookups for the boot process.

    The environment provider, host facts and property store are all injected;
    any left out fall back to the real OS and a fresh, empty store.
    """

    def __init__(
        self,
        environment: Optional[EnvironmentProvider] = None,
        properties: Optional[PropertyStore] = None,
        host: Optional[HostInfo] = None,
    ):
        self.environment = environment if environment is not None else OsEnvironment()
        self.properties = properties if properties is not None else PropertyStore()
        self._host = host

    @property
    def host(self) -> HostInfo:
        if self._host is None:
            self._host = HostInfo.detect()
        return self._host

    @staticmethod
    def clojure_name() -> str:
        return CLOJURE_NAME

    def config(
        self, key: Optional[str] = None, default: Optional[str] = None
    ) -> Union[Dict[str, str], Optional[str]]:
        """
        Look up configuration.

        - ``config()`` returns every environment variable plus
          ``BOOT_COLOR="true"``, rebuilt on each call.
        - ``config(key)`` returns the value for ``key`` or ``None``.
        - ``config(key, default)`` returns the value if present; otherwise
          records ``default`` as the property ``key`` and returns it.
          The recorded property does not show up in later ``config()``
          mappings.
        """
        values = self.environment.snapshot()
        values[BOOT_COLOR] = BOOT_COLOR_VALUE
        if key is None:
            return values

        value = values.get(key)
        if value is not None or default is None:
            return value

        logger.debug(f"Config key {key} not set, defaulting property to {default!r}")
        self.properties.set(key, default)
        return default

    def boot_directory(self) -> Path:
        """Resolve BOOT_HOME: property, then environment, then ``~/.boot``."""
        from_property = self.properties.get(BOOT_HOME)
        if from_property is not None:
            return Path(from_property)

        from_env = self.environment.get(BOOT_HOME)
        if from_env is not None:
            return Path(from_env)

        fallback = self.host.home() / BOOT_DIR_NAME
        try:
            return fallback.resolve()
        except OSError as e:
            raise EnvError("Unable to canonicalize boot directory", context={"path": str(fallback)}) from e

    def get_boot_dir(self) -> Path:
        return self.boot_directory()

    def is_windows_host(self) -> bool:
        return is_windows(self.host.os_name)
