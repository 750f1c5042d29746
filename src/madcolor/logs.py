"""Logging setup for the madcolor command."""

import logging
import sys
import threading
from pathlib import Path

from .config import DEFAULT_LOG_FILE

__all__ = ["LOGGER_NAME", "LOG_FORMAT", "setup_logging"]

LOGGER_NAME = "madcolor"
LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

_logging_lock = threading.Lock()


def setup_logging(
    log_file: str | Path | None = DEFAULT_LOG_FILE,
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
) -> logging.Logger:
    """Configure the package logger with a file handler and a console handler.

    The log file is truncated on every run. ``quiet`` keeps messages out of
    stderr (they still reach the log file). Calling this again replaces the
    handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    with _logging_lock:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        logger.setLevel(level)
        logger.propagate = False
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        if log_file is not None:
            try:
                file_handler = logging.FileHandler(
                    log_file, mode="w", encoding="utf-8", delay=True
                )
            except OSError as e:
                print(
                    f"Could not open log file {log_file}: {e}. File logging disabled.",
                    file=sys.stderr,
                )
            else:
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)

        if not quiet:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
