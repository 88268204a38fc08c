"""
Logging for secure-random.

Importing the library only attaches a NullHandler to the "secure-random" logger,
so records flow to whatever the host application configured. Hosts that want the
library's own console/file output call `init_logging` (or `config.configure_logging`).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

import orjson

LOGGER_NAME = "secure-random"

_library_logger = logging.getLogger(LOGGER_NAME)
_library_logger.addHandler(logging.NullHandler())


class ColoredFormatter(logging.Formatter):
    """Level-colored console output."""

    RESET = "\033[0m"
    GRAY = "\033[90m"
    CYAN = "\033[96m"
    LEVEL_COLORS = {
        logging.DEBUG: "\033[90m",
        logging.INFO: "\033[92m",
        logging.WARNING: "\033[93m",
        logging.ERROR: "\033[91m",
        logging.CRITICAL: "\033[95m",
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        return (
            f"{self.GRAY}{timestamp}{self.RESET} | "
            f"{color}{record.levelname:<8}{self.RESET} | "
            f"{self.CYAN}{record.name}{self.RESET} | {record.getMessage()}"
        )


class PlainFormatter(logging.Formatter):
    """Plain formatter for file output (no colors)."""

    def format(self, record):
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        return f"{timestamp} | {record.levelname:<8} | {record.name} | {record.getMessage()}"


# Attributes every LogRecord carries; anything else came in through `extra=`.
_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, extras included."""

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        payload.update(
            (k, v) for k, v in record.__dict__.items() if k not in _RECORD_ATTRS
        )
        # default=str keeps Decimal and other non-JSON extras serializable
        return orjson.dumps(payload, default=str).decode("utf-8")


FORMATTERS = {
    "color": ColoredFormatter,
    "plain": PlainFormatter,
    "json": JsonFormatter,
}


def get_logger(name: str = None) -> logging.Logger:
    """Returns the library logger, or its child `secure-random.<name>`."""
    if name:
        return _library_logger.getChild(name)
    return _library_logger


def _build_handlers(
    formatter: str,
    log_to_file: bool,
    log_file_path: Optional[Path],
    max_file_size: int,
    backup_count: int,
) -> List[logging.Handler]:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(FORMATTERS.get(formatter, ColoredFormatter)())
    handlers = [console_handler]

    if log_to_file:
        if log_file_path is None:
            log_file_path = Path(__file__).parent.parent.parent / "logs" / "secure_random.log"
        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file_path, maxBytes=max_file_size, backupCount=backup_count
            )
        except OSError as e:
            sys.stderr.write(f"WARNING: Could not set up file logging: {e}\n")
        else:
            file_handler.setFormatter(PlainFormatter())
            handlers.append(file_handler)

    return handlers


def reset_logging() -> logging.Logger:
    """Drop handlers installed by `init_logging` and hand records back to the host."""
    for handler in list(_library_logger.handlers):
        _library_logger.removeHandler(handler)
        handler.close()
    _library_logger.addHandler(logging.NullHandler())
    _library_logger.setLevel(logging.NOTSET)
    _library_logger.propagate = True
    return _library_logger


def init_logging(
    level: str = "INFO",
    log_to_file: bool = False,
    formatter: str = "color",
    log_file_path: Optional[Path] = None,
    max_file_size: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Give the library its own output instead of propagating to the host's handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also log to a rotating file
        formatter: Console formatter name ("color", "plain" or "json")
        log_file_path: Path for the log file (defaults to logs/secure_random.log)
        max_file_size: Max size of log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        The configured library logger
    """
    logger = reset_logging()
    for handler in _build_handlers(formatter, log_to_file, log_file_path, max_file_size, backup_count):
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    logger.info(f"Logging initialized at {level} level")
    return logger
