"""Logging utilities."""

import logging
import os
import sys

# Configure loggers for the package
_LOG_LEVEL = os.environ.get("HTML5SLIDE_LOG_LEVEL", "INFO").upper()
_LOG_FORMAT = "[%(asctime)s]: %(message)s"


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Get a configured logger.

    Records are stamped with local wall-clock time. Info and debug go
    to stdout, warnings and errors to stderr.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        formatter = logging.Formatter(_LOG_FORMAT)

        out = logging.StreamHandler(sys.stdout)
        out.addFilter(_BelowWarning())
        out.setFormatter(formatter)
        logger.addHandler(out)

        err = logging.StreamHandler(sys.stderr)
        err.setLevel(logging.WARNING)
        err.setFormatter(formatter)
        logger.addHandler(err)

    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))

    return logger
