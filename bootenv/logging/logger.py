# -*- coding: utf-8 -*-
"""
Core Logger Implementation
==========================

Unified logging with consistent format across bootenv modules.
Format: [Module] LEVEL: Message

Example outputs:
    [Boot] DEBUG: Config key BOOT_CLOJURE_VERSION not set, defaulting property to '1.10.1'
    [Properties] DEBUG: Loaded 4 properties from /home/user/.boot/boot.properties
    [Settings] DEBUG: Settings not found at /home/user/.boot/bootenv.yaml, using defaults
"""

from datetime import datetime
import logging
from pathlib import Path
import sys
from typing import List, Optional, Union


class ConsoleFormatter(logging.Formatter):
    """
    Clean console formatter with colors and standard level tags.
    Format: [Module] LEVEL: Message
    """

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[90m",  # Gray
        "INFO": "\033[37m",  # White
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    DIM = "\033[2m"

    def __init__(self, service_prefix: Optional[str] = None, use_colors: Optional[bool] = None):
        """
        Initialize console formatter.

        Args:
            service_prefix: Optional prefix shown before the module tag
            use_colors: Force colors on or off; None means detect a TTY
        """
        super().__init__()
        self.service_prefix = service_prefix
        if use_colors is None:
            stdout_tty = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
            stderr_tty = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
            use_colors = stdout_tty or stderr_tty
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        display_level = getattr(record, "display_level", record.levelname)
        module = getattr(record, "module_name", record.name)

        module_tag = f"[{module}]"
        level_tag = f"{display_level}:"

        if self.use_colors:
            color = self.COLORS.get(display_level, self.COLORS["INFO"])
            dim = self.DIM
            reset = self.RESET
        else:
            color = ""
            dim = ""
            reset = ""

        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        if self.service_prefix:
            service_tag = f"[{self.service_prefix}]"
            return f"{dim}{service_tag}{reset} {dim}{module_tag}{reset} {color}{level_tag}{reset} {message}"
        return f"{dim}{module_tag}{reset} {color}{level_tag}{reset} {message}"


class FileFormatter(logging.Formatter):
    """
    Detailed file formatter for log files.
    Format: TIMESTAMP [LEVEL] [Module] Message
    """

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] [%(module_name)-12s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "module_name"):
            record.module_name = record.name
        return super().format(record)


class Logger:
    """
    Unified logger for bootenv.

    Usage:
        logger = Logger("Boot")
        logger.info("Resolving boot directory")
        logger.warning("Properties file is not readable")
    """

    def __init__(
        self,
        name: str,
        level: str = "INFO",
        console_output: bool = True,
        file_output: bool = False,
        log_dir: Optional[Union[str, Path]] = None,
        service_prefix: Optional[str] = None,
        use_colors: Optional[bool] = None,
    ):
        """
        Initialize logger.

        Args:
            name: Module name (e.g., "Boot", "Settings")
            level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console_output: Whether to output to console
            file_output: Whether to output to a daily log file
            log_dir: Log directory, required when file_output is enabled
            service_prefix: Optional prefix shown before the module tag
            use_colors: Force console colors on or off
        """
        self.name = name
        self.level = getattr(logging, level.upper(), logging.INFO)
        self.service_prefix = service_prefix
        self.log_dir: Optional[Path] = None
        self._log_file: Optional[Path] = None

        self.logger = logging.getLogger(f"bootenv.{name}")
        self.logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
        self.logger.handlers.clear()
        self.logger.propagate = False

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.level)
            console_handler.setFormatter(
                ConsoleFormatter(service_prefix=service_prefix, use_colors=use_colors)
            )
            self.logger.addHandler(console_handler)

        if file_output:
            if log_dir is None:
                raise ValueError("log_dir is required when file_output is enabled")
            log_dir_path = Path(log_dir).expanduser().resolve()
            log_dir_path.mkdir(parents=True, exist_ok=True)
            self.log_dir = log_dir_path

            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = log_dir_path / f"bootenv_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)  # Log everything to file
            file_handler.setFormatter(FileFormatter())
            self.logger.addHandler(file_handler)

            self._log_file = log_file

        self._extra_handlers: List[logging.Handler] = []

    @property
    def log_file(self) -> Optional[Path]:
        return self._log_file

    def add_handler(self, handler: logging.Handler):
        """Attach an extra handler; it is closed on shutdown()."""
        self.logger.addHandler(handler)
        self._extra_handlers.append(handler)

    def _log(
        self,
        level: int,
        message: str,
        display_level: Optional[str] = None,
        **kwargs,
    ):
        """Internal logging method with extra attributes."""
        extra = {
            "module_name": self.name,
            "display_level": display_level or logging.getLevelName(level),
        }
        log_kwargs = {
            "extra": extra,
            "exc_info": kwargs.get("exc_info", False),
            "stack_info": kwargs.get("stack_info", False),
            "stacklevel": kwargs.get("stacklevel", 1),
        }
        self.logger.log(level, message, **log_kwargs)

    def debug(self, message: str, **kwargs):
        """Debug level log [DEBUG]"""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Info level log [INFO]"""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Warning level log [WARNING]"""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Error level log [ERROR]"""
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs):
        """Critical level log [CRITICAL]"""
        self._log(logging.CRITICAL, message, **kwargs)

    def exception(self, message: str, **kwargs):
        """Error level log with the current traceback"""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, **kwargs)

    def shutdown(self):
        """Close and detach every handler attached to this logger."""
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)
        self._extra_handlers.clear()


# Global logger registry - key is tuple of (name, level, console_output, file_output, log_dir, service_prefix)
_loggers: dict[tuple[str, str, bool, bool, Optional[str], Optional[str]], "Logger"] = {}

_default_service_prefix: Optional[str] = None


def set_default_service_prefix(prefix: Optional[str]):
    """
    Set the default service prefix for all new loggers.

    Args:
        prefix: Service prefix (e.g., "Boot") or None to disable
    """
    global _default_service_prefix
    _default_service_prefix = prefix


def get_logger(
    name: str = "Main",
    level: Optional[str] = None,
    console_output: bool = True,
    file_output: bool = False,
    log_dir: Optional[Union[str, Path]] = None,
    service_prefix: Optional[str] = None,
) -> Logger:
    """
    Get or create a logger instance.

    Args:
        name: Module name
        level: Log level (default INFO)
        console_output: Enable console output
        file_output: Enable file output (requires log_dir)
        log_dir: Log directory
        service_prefix: Optional service prefix (if None, uses default set by set_default_service_prefix)

    Returns:
        Logger instance
    """
    effective_service_prefix = (
        service_prefix if service_prefix is not None else _default_service_prefix
    )
    effective_level = (level or "INFO").upper()

    log_dir_key = str(log_dir) if log_dir is not None else None
    cache_key = (
        name,
        effective_level,
        console_output,
        file_output,
        log_dir_key,
        effective_service_prefix,
    )

    if cache_key not in _loggers:
        _loggers[cache_key] = Logger(
            name=name,
            level=effective_level,
            console_output=console_output,
            file_output=file_output,
            log_dir=log_dir,
            service_prefix=effective_service_prefix,
        )

    return _loggers[cache_key]


def reset_logger(name: Optional[str] = None):
    """
    Shut down and forget logger(s).

    Args:
        name: Logger name to reset, or None to reset all
    """
    if name is None:
        keys_to_remove = list(_loggers.keys())
    else:
        keys_to_remove = [key for key in _loggers.keys() if key[0] == name]

    for key in keys_to_remove:
        instance = _loggers.pop(key, None)
        if instance is not None:
            instance.shutdown()
