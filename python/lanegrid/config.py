"""Logging configuration.

The package logs under the ``lanegrid`` logger and is silent by default. Call
`configure_logging()` to send records to a stream; the level defaults to the
``LANEGRID_LOG_LEVEL`` environment variable (``WARNING`` when unset).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

LOGGER_NAME = "lanegrid"
ENV_LOG_LEVEL = "LANEGRID_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_FMT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def _normalize_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def get_log_level() -> int:
    """Return the level from ``LANEGRID_LOG_LEVEL``, or ``WARNING``."""
    raw = os.environ.get(ENV_LOG_LEVEL)
    if raw and raw.strip():
        return _normalize_level(raw)
    return _normalize_level(DEFAULT_LOG_LEVEL)


def configure_logging(
    level: Optional[Union[str, int]] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach a formatted stream handler to the ``lanegrid`` logger.

    Repeated calls replace the previous handler instead of stacking a new one.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_FMT, datefmt=_DATEFMT))
    logger.addHandler(handler)
    logger.setLevel(get_log_level() if level is None else _normalize_level(level))
    _handler = handler
    return logger


def reset_logging() -> None:
    """Remove the handler installed by `configure_logging`."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None
    logger.setLevel(logging.NOTSET)
