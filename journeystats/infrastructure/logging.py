"""
Centralized Logging

Architectural Intent:
- One stderr handler on the "journeystats" logger, configured from CLI flags or config
- JSON lines for log shippers, a console format for people
- Fields passed through ``extra=`` (e.g. analytics_event) appear in both formats
"""

import json
import logging
import sys
from datetime import datetime, UTC
from typing import Any

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the attributes a caller attached to the record via ``extra=``."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record; extra fields become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(extra_fields(record))
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable lines with extra fields appended as key=value pairs."""

    def __init__(self, fmt: str = CONSOLE_FORMAT) -> None:
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = extra_fields(record)
        if not extras:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(extras.items()))
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    """Translate a configured level name ("debug", "INFO", ...) to a logging level."""
    level = logging.getLevelName(name.upper()) if name else default
    return level if isinstance(level, int) else default


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
) -> None:
    """Install the journeystats stderr handler, replacing any earlier one.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, etc.)
        json_format: JSON lines if True, ConsoleFormatter otherwise
    """
    logger = logging.getLogger("journeystats")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_format else ConsoleFormatter())
    logger.addHandler(handler)
