from typing import Any, Dict, Optional
from pydantic import BaseModel, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class LoggingSettings(BaseModel):
    level: str = "INFO"
    console_output: bool = True
    file_output: bool = False
    log_dir: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")
        return level

class BootSettings(BaseModel):
    version: int
    logging: LoggingSettings = LoggingSettings()

    @field_validator("logging", mode="before")
    @classmethod
    def ensure_logging(cls, v: Any) -> Any:
        if v is None:
            return {}
        if not isinstance(v, (dict, LoggingSettings)):
            raise ValueError("logging section must be a mapping")
        return v

CURRENT_SCHEMA_VERSION = 1

DEFAULTS: Dict[str, Any] = {
    "version": CURRENT_SCHEMA_VERSION,
    "logging": LoggingSettings().model_dump(),
}

def migrate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Bring an older settings mapping up to CURRENT_SCHEMA_VERSION.

    Version 0 files kept the log level at the top level as ``log_level``.
    A non-mapping ``logging`` section is left for validation to reject.
    """
    version = cfg.get("version", 0)
    if version == 0:
        level = cfg.pop("log_level", None)
        section = cfg.get("logging")
        if level is not None and (section is None or isinstance(section, dict)):
            if section is None:
                section = cfg["logging"] = {}
            section["level"] = level
        cfg["version"] = 1
    return cfg
