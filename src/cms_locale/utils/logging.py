"""Logging helpers shared across cms_locale modules."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Handlers are attached by configure_logging()."""
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[object] = None) -> None:
    """
    Attach a single stream handler to the package logger.

    Safe to call more than once; later calls only adjust the level.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or numeric level
        stream: Output stream (defaults to stderr so JSON on stdout stays clean)
    """
    global _configured

    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    root = logging.getLogger("cms_locale")
    root.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True
