"""
Logging setup for applications that embed geoanchor.

The library itself only creates module-level loggers. A host application
calls :func:`setup_logging` once to get transformer and registry messages
on the console and, optionally, in a rotating JSON log file.
"""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from geoanchor.core.config import load_settings
from geoanchor.core.errors import ConfigurationError

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation for the optional log file
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Values passed through ``extra`` (zone, offset, rows of a rejected batch)
    are copied into the object next to the standard fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS:
                entry[key] = value

        return json.dumps(entry, default=str)


def resolve_level(level_name: str) -> int:
    """
    Turn a level name such as "info" into its logging constant.

    Raises:
        ConfigurationError: If the name is not a standard level
    """
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level {level_name!r}",
            config_key="log_level",
            suggestions=["Use DEBUG, INFO, WARNING, ERROR or CRITICAL"],
        )
    return level


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Level name; taken from GEOANCHOR_LOG_LEVEL when omitted,
            DEBUG in development and INFO elsewhere
        log_file: Optional path of a rotating log file written as JSON lines

    Raises:
        ConfigurationError: If the level or the environment settings are invalid
    """
    if log_level is None:
        config = load_settings()
        log_level = config.log_level or (
            "DEBUG" if config.environment == "development" else "INFO"
        )
    level = resolve_level(log_level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setFormatter(JSONFormatter())
        root.addHandler(file_handler)

    # PROJ network and database chatter
    logging.getLogger("pyproj").setLevel(logging.WARNING)

    root.debug(f"Logging initialized at {logging.getLevelName(level)}")
