# core/logger.py

"""Logging setup for the Gradebook CLI."""

import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | module=%(module)s | "
    "funcName=%(funcName)s | lineno=%(lineno)d | message=%(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure the root logger for the process.

    Existing root handlers are replaced. With a log file, records go to a
    rotating file; otherwise to stderr, so they never mix with menu output
    on stdout.

    Args:
        level (int): The minimum level to emit.
        log_file (Path | None): File to write logs to, created along with its directory.

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(handler)
