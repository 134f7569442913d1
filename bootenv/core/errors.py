from typing import Any, Dict, Optional

class BaseError(Exception):
    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{message} ({details})"

class ConfigError(BaseError):
    """Settings or properties could not be read or validated."""

class EnvError(BaseError):
    """The host environment could not answer a query (home directory, paths)."""
