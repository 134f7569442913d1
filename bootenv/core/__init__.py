from .errors import BaseError, ConfigError, EnvError

__all__ = ["BaseError", "ConfigError", "EnvError"]
