"""
Wait Utilities
--------------

Centralised waiting logic for the OpenRefine UI.  OpenRefine flips the
``ajax_in_progress`` attribute on ``<body>`` to ``"true"`` while it
talks to the server and back to ``"false"`` once the round trip has
settled.  Commands should not call ``time.sleep``; they wait on that
flag (or on Playwright's own auto-waiting) to synchronise with the
application under test.

Timeouts are in milliseconds, like everywhere else in Playwright.
Expiry raises :class:`playwright.sync_api.TimeoutError` and is never
swallowed here.
"""

from __future__ import annotations

from playwright.sync_api import Page

from .. import selectors
from .logger import get_logger

logger = get_logger(__name__)


def wait_for_busy_flag(page: Page, busy: bool, timeout: float | None = None) -> None:
    """Block until ``<body>`` carries the given busy-flag value."""
    page.locator(selectors.busy_flag(busy)).wait_for(state="attached", timeout=timeout)


def wait_for_idle(page: Page, timeout: float | None = None) -> None:
    """Wait until no asynchronous OpenRefine operation is in flight.

    Column headers are re-rendered (and detached from the DOM) while an
    operation runs, so menu interactions are only safe once idle.
    """
    wait_for_busy_flag(page, False, timeout)


def wait_for_operation(page: Page, timeout: float | None = None) -> None:
    """Wait for one asynchronous operation to start and then finish."""
    logger.debug("Waiting for an OpenRefine operation to complete")
    wait_for_busy_flag(page, True, timeout)
    wait_for_busy_flag(page, False, timeout)


__all__ = [
    "wait_for_busy_flag",
    "wait_for_idle",
    "wait_for_operation",
]
