"""Logging setup shared by the training, evaluation and CLI modules."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
_LEVEL_ENV_VARS = ("AVSRC_LOG_LEVEL", "LOG_LEVEL")


def _resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """Resolve the log level from an explicit value or the environment.

    ``AVSRC_LOG_LEVEL`` takes precedence over the generic ``LOG_LEVEL``.
    Unknown level names fall back to ``logging.INFO``.
    """

    if isinstance(level, int):
        return level

    name = level
    if name is None:
        name = next((os.environ[var] for var in _LEVEL_ENV_VARS if os.getenv(var)), "INFO")
    return getattr(logging, str(name).upper(), logging.INFO)


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger once with the project formatter.

    Repeated calls only adjust the level; handlers installed by a host
    application are left in place.
    """

    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(_resolve_level(level))
        return

    logging.basicConfig(
        level=_resolve_level(level),
        format=_DEFAULT_FORMAT,
        datefmt=_DEFAULT_DATEFMT,
    )


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Return a logger for ``name`` after making sure logging is configured."""

    configure_logging(level)
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger


__all__ = ["configure_logging", "get_logger"]
