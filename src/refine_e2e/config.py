"""
Configuration Loader
--------------------

Settings come from one YAML document, overlaid by environment variables
(a ``.env`` file in the working directory is read first).  The document
is, in order of preference:

* the ``yaml_path`` argument (the pytest plugin passes ``--refine-config``),
* the file named by ``REFINE_E2E_CONFIG``,
* the defaults bundled with the package (``refine_e2e/data/config.yaml``).

A dotted key maps to an upper-case environment name, so ``openrefine.url``
is overridden by ``OPENREFINE_URL`` and ``ui.headless`` by ``UI_HEADLESS``.
"""

import os
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from .utils.logger import get_logger

BUNDLED_DEFAULTS = "bundled defaults"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def env_name(dotted_key: str) -> str:
    """Environment variable that overrides ``dotted_key``."""
    return dotted_key.upper().replace(".", "_")


class Config:
    """YAML settings with environment overrides."""

    def __init__(self, yaml_path: Optional[Union[str, Path]] = None) -> None:
        load_dotenv()
        self.logger = get_logger(__name__)

        yaml_path = yaml_path or os.getenv("REFINE_E2E_CONFIG")
        if yaml_path:
            self.source = str(yaml_path)
            self.data = self._read_file(Path(yaml_path))
        else:
            self.source = BUNDLED_DEFAULTS
            bundled = resources.files("refine_e2e") / "data" / "config.yaml"
            self.data = yaml.safe_load(bundled.read_text(encoding="utf-8")) or {}
        self.logger.debug("Configuration loaded from %s", self.source)

    def _read_file(self, path: Path) -> Dict[str, Any]:
        if not path.is_file():
            self.logger.warning("Configuration file %s not found", path)
            return {}
        with path.open(encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    def get(self, dotted_key: str, default: Any = None) -> Any:
        """Return the value of ``dotted_key``, from the environment if set there.

        ``ui.timeout`` reads ``data["ui"]["timeout"]``; a missing level
        yields ``default``.
        """
        override = os.getenv(env_name(dotted_key))
        if override is not None:
            return override
        node: Any = self.data
        for part in dotted_key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_bool(self, dotted_key: str, default: bool = False) -> bool:
        """Like :meth:`get` but coerce environment strings to ``bool``."""
        value = self.get(dotted_key, default)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(f"Invalid boolean for {dotted_key}: {value!r}")
        return bool(value)

    def get_int(self, dotted_key: str, default: int = 0) -> int:
        return int(self.get(dotted_key, default))

    def require(self, dotted_key: str) -> Any:
        """Return ``dotted_key``, raising ``ValueError`` when it is unset or empty."""
        value = self.get(dotted_key)
        if value is None or value == "":
            self.logger.error("Missing required configuration value %s (from %s)", dotted_key, self.source)
            raise ValueError(
                f"Missing required configuration value: {dotted_key} (set it in {self.source} or {env_name(dotted_key)})"
            )
        return value

    @property
    def openrefine_url(self) -> str:
        """Base URL of the OpenRefine instance under test, without trailing slash."""
        return str(self.require("openrefine.url")).rstrip("/")


__all__ = ["Config", "env_name"]
