"""
Property Store
==============

Process-local key/value settings, kept apart from the OS environment.
One store is created by the caller and handed to whatever needs it.
"""

from pathlib import Path
from threading import Lock
from typing import Dict, Iterable, Iterator, Mapping, Optional, Union

from dotenv import dotenv_values

from ..logging import get_logger

logger = get_logger("Properties", level="WARNING")


class PropertyStore:
    """String-to-string store; every read and write holds the lock."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._lock = Lock()
        self._values: Dict[str, str] = dict(initial or {})

    @classmethod
    def from_files(cls, paths: Iterable[Union[str, Path]]) -> "PropertyStore":
        """
        Build a store from ``KEY=VALUE`` files.

        Later files override earlier ones. Missing files are skipped and keys
        declared without a value are ignored.
        """
        store = cls()
        for path in paths:
            path = Path(path)
            if not path.is_file():
                logger.debug(f"Properties file not found: {path}")
                continue
            parsed = {k: str(v) for k, v in dotenv_values(path).items() if v is not None}
            logger.debug(f"Loaded {len(parsed)} properties from {path}")
            store.update(parsed)
        return store

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def update(self, values: Mapping[str, str]) -> None:
        with self._lock:
            self._values.update(values)

    def remove(self, key: str) -> None:
        """Remove ``key``; raises ``KeyError`` if it is not set."""
        with self._lock:
            del self._values[key]

    def as_dict(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._values)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_dict())

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f"PropertyStore({len(self)} keys)"
