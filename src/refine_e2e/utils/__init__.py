"""
Utility subpackage for the OpenRefine helpers.

Aggregates logging and the busy-flag wait helpers so higher level
modules can import them from one place::

    from refine_e2e.utils import get_logger, wait_for_idle
"""

from .logger import get_logger
from .wait_utils import (
    wait_for_busy_flag,
    wait_for_idle,
    wait_for_operation,
)

__all__ = [
    "get_logger",
    "wait_for_busy_flag",
    "wait_for_idle",
    "wait_for_operation",
]
