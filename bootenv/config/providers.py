"""
Host Providers
==============

Injectable sources for everything the accessor reads from the host:
environment variables, the platform name and the user home directory.
Tests substitute ``StaticEnvironment`` and a hand-built ``HostInfo`` instead
of touching real OS state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import os
from pathlib import Path
import platform
from typing import Dict, Mapping, Optional

from ..core.errors import EnvError


class EnvironmentProvider(ABC):
    """Read-only view of process environment variables."""

    @abstractmethod
    def snapshot(self) -> Dict[str, str]:
        """Return a fresh copy of all variables."""

    def get(self, key: str) -> Optional[str]:
        return self.snapshot().get(key)


class OsEnvironment(EnvironmentProvider):
    """Environment backed by ``os.environ``, read on every call."""

    def snapshot(self) -> Dict[str, str]:
        return dict(os.environ)

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)


class StaticEnvironment(EnvironmentProvider):
    """Environment backed by a fixed mapping (copied at construction)."""

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self._variables: Dict[str, str] = dict(variables or {})

    def snapshot(self) -> Dict[str, str]:
        return dict(self._variables)

    def get(self, key: str) -> Optional[str]:
        return self._variables.get(key)


def java_style_os_name(system: Optional[str] = None, release: Optional[str] = None) -> str:
    """
    Report the platform the way a JVM ``os.name`` would.

    ``platform.system()`` says "Darwin" on macOS, which would match a naive
    "win" substring check, so it is mapped to "Mac OS X".
    """
    system = platform.system() if system is None else system
    if system == "Darwin":
        return "Mac OS X"
    if system == "Windows":
        release = platform.release() if release is None else release
        return f"Windows {release}".strip()
    return system


def resolve_user_home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise EnvError("Unable to determine user home directory", context={"cause": str(e)}) from e


@dataclass(frozen=True)
class HostInfo:
    """
    Platform facts used by the accessor.

    ``user_home`` may be left unset, in which case it is looked up from the OS
    on each ``home()`` call.
    """

    os_name: str
    user_home: Optional[Path] = None

    @classmethod
    def detect(cls) -> "HostInfo":
        return cls(os_name=java_style_os_name())

    def home(self) -> Path:
        if self.user_home is not None:
            return Path(self.user_home)
        return resolve_user_home()
