"""
Logger Utility
--------------

Provides :func:`get_logger`, which configures and returns a logger for
the given module.  Every command run through a session is traced at
``DEBUG``; project creation and cleanup are reported at ``INFO``.

The level is read from ``REFINE_E2E_LOG_LEVEL`` and falls back to the
generic ``LOG_LEVEL`` variable.  Loggers keep propagating to the root
logger so pytest's ``caplog`` and ``--log-cli-level`` still see them.
"""

import logging
import os
from functools import lru_cache

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s – %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _level_from_env() -> int:
    level_name = os.getenv("REFINE_E2E_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    return getattr(logging, level_name.upper(), logging.INFO)


@lru_cache(maxsize=None)
def get_logger(name: str) -> logging.Logger:
    """Return a configured logger with the specified name."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.setLevel(_level_from_env())
    return logger


__all__ = ["get_logger"]
