"""
OpenRefine End-to-End Helpers
=============================

Browser-automation commands for driving the OpenRefine web UI from
end-to-end tests, built on Playwright's synchronous API.

Modules
-------

``session``
    :class:`RefineSession`, the object tests call commands on.

``commands``
    The command registry and the built-in commands (grid, panels,
    projects).

``api``
    Client for OpenRefine's command API (project creation and deletion,
    preferences).

``fixtures``
    Bundled datasets and CSV conversion for project uploads.

``pytest_plugin``
    pytest fixtures wiring a browser, a page and a session per test.
"""

from .api import RefineAPIError, RefineClient
from .commands import commands
from .config import Config
from .reporting import Reporter
from .session import RefineSession

__version__ = "0.3.0"

__all__ = [
    "Config",
    "RefineAPIError",
    "RefineClient",
    "RefineSession",
    "Reporter",
    "commands",
]
