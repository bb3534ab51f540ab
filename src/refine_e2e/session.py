"""
Refine Session
--------------

:class:`RefineSession` is the object tests talk to.  It owns the
Playwright page for the current test, the configuration, the command
API client, the Allure reporter and a small alias store that lives as
long as the test does.  Registered commands are exposed as methods::

    refine.load_and_visit_project("food.mini")
    refine.edit_cell(0, "Shrt_Desc", "BUTTER")
    refine.assert_cell_equals(0, "Shrt_Desc", "BUTTER")

Commands run one after the other on the single page; a command may
call other commands through the session it receives.
"""

from __future__ import annotations

import functools
from typing import Any, Dict, List, Optional

from playwright.sync_api import Page

from .api import RefineClient
from .commands import commands as default_registry
from .commands.registry import CommandRegistry
from .config import Config
from .reporting import Reporter
from .utils.logger import get_logger

LOADED_PROJECT_IDS = "loaded_project_ids"


class RefineSession:
    """Bind the registered commands to one page and one OpenRefine instance."""

    def __init__(
        self,
        page: Page,
        config: Config,
        client: Optional[RefineClient] = None,
        reporter: Optional[Reporter] = None,
        registry: Optional[CommandRegistry] = None,
    ) -> None:
        self.page = page
        self.config = config
        self.base_url = config.openrefine_url
        self.timeout = float(config.get_int("ui.timeout", 10000))
        self.client = client or RefineClient.from_config(config)
        self.reporter = reporter or Reporter()
        self.registry = registry or default_registry
        self.logger = get_logger(self.__class__.__name__)
        self.aliases: Dict[str, Any] = {}
        self.reset_aliases()

    def reset_aliases(self) -> None:
        """Start a fresh alias store; called before every test."""
        self.aliases.clear()
        self.aliases[LOADED_PROJECT_IDS] = []

    @property
    def loaded_project_ids(self) -> List[str]:
        return self.aliases[LOADED_PROJECT_IDS]

    def alias(self, name: str, value: Any) -> Any:
        """Store ``value`` under ``name`` for the rest of the test and return it."""
        self.aliases[name] = value
        return value

    def url(self, path: str = "") -> str:
        return self.base_url + path

    def run(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Run the command registered as ``name``."""
        command = self.registry.get(name)
        if not command.log:
            return command.fn(self, *args, **kwargs)
        with self.reporter.step(name, args, kwargs):
            return command.fn(self, *args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        # only reached for names that are not regular attributes
        if name.startswith("_") or "registry" not in self.__dict__ or name not in self.registry:
            raise AttributeError(f"{type(self).__name__!s} has no command or attribute {name!r}")
        return functools.partial(self.run, name)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self.registry.names()))


__all__ = ["RefineSession", "LOADED_PROJECT_IDS"]
