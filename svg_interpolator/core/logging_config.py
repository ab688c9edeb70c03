"""Logging setup for interpolation runs.

Console lines read ``time level [component] message (operation)``, where the
component is the last part of the logger name (``fill``, ``interpreter``) and
the operation is set by :class:`LogContext`.
"""

import logging
import logging.handlers
import sys
import time
from functools import wraps
from pathlib import Path
from typing import Optional

FILE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that flood DEBUG output with font and backend chatter
NOISY_LOGGERS = ("matplotlib", "PIL")


class InterpolatorFormatter(logging.Formatter):
    """Console formatter tagging each line with its component and operation."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, color: bool = False):
        super().__init__(datefmt=DATE_FORMAT)
        self.color = color

    def _level(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8}"
        if self.color and record.levelno in self.LEVEL_COLORS:
            return f"{self.LEVEL_COLORS[record.levelno]}{level}{self.RESET}"
        return level

    def format(self, record: logging.LogRecord) -> str:
        component = f"[{record.name.rsplit('.', 1)[-1]}]"
        line = (
            f"{self.formatTime(record, self.datefmt)} {self._level(record)} "
            f"{component:15} {record.getMessage()}"
        )

        operation = getattr(record, "operation", None)
        if operation:
            line += f" ({operation})"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Replace the root handlers with a console and an optional rotating file.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Path of a log file, created with its parent directories
        console: Whether to log to stderr
        max_bytes: Size at which the log file rotates
        backup_count: Number of rotated files to keep
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handlers = []
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            InterpolatorFormatter(color=sys.stderr.isatty())
        )
        handlers.append(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        f"Logging initialized: level={level}, console={console}, file={log_file}"
    )


class LogContext:
    """Tag every record created inside the block with an operation name."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None):
        self.operation = operation
        self.logger = logger or logging.getLogger()
        self._previous_factory = None

    def __enter__(self):
        previous = logging.getLogRecordFactory()
        operation = self.operation

        def tagged_record(*args, **kwargs):
            record = previous(*args, **kwargs)
            record.operation = operation
            return record

        self._previous_factory = previous
        logging.setLogRecordFactory(tagged_record)
        self.logger.info(f"Started operation: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.info(f"Completed operation: {self.operation}")
        else:
            self.logger.error(f"Operation failed: {self.operation}: {exc_val}")
        logging.setLogRecordFactory(self._previous_factory)


def log_performance(func):
    """Log how long each call of ``func`` takes, and failures."""

    logger = logging.getLogger(func.__module__)

    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(
                f"Failed {func.__name__} after {time.perf_counter() - start:.3f}s: {e}"
            )
            raise
        logger.info(f"Completed {func.__name__} in {time.perf_counter() - start:.3f}s")
        return result

    return wrapper
