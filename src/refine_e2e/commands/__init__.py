"""
OpenRefine Commands
===================

Importing this package registers every built-in command on the shared
:data:`commands` registry.

``panels``
    Facets, dialog panels, notifications and JSON text areas.

``grid``
    Reading, editing and asserting on data table cells; column menus.

``projects``
    Navigation and project creation (command API and import wizard),
    preferences and cleanup.
"""

from .registry import Command, CommandRegistry, commands
from . import grid, panels, projects  # noqa: F401  (registers the commands)

__all__ = ["Command", "CommandRegistry", "commands"]
