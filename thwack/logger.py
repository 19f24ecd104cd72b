"""Session logging setup.

Logging is off unless a log file is requested. The configured logger is
passed explicitly to the session and walker rather than looked up globally,
and :func:`close_logging` tears it down when the session ends.
"""

from __future__ import annotations

import logging

from .errors import FileSystemError

LOGGER_NAME = "thwack"
LOG_FORMAT = "[%(levelname)s] [%(module)s:%(lineno)d] %(message)s"


def configure_logging(log_file: str | None) -> logging.Logger:
    """Return the ``thwack`` logger writing to ``log_file`` (append mode).

    Without a log file the logger only carries a ``NullHandler``. Records
    never propagate to the root logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    close_logging(logger)
    logger.propagate = False

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        return logger

    try:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        raise FileSystemError(f"Unable to open the log file {log_file!r}: {exc.strerror}") from exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger


def close_logging(logger: logging.Logger) -> None:
    """Flush, close, and detach every handler on ``logger``."""
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
