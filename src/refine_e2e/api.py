"""
OpenRefine Command API Client
-----------------------------

This module defines :class:`RefineClient`, a small wrapper over
``requests`` for the parts of OpenRefine's ``/command/core`` API the
end-to-end helpers need: creating a project from uploaded CSV content
without going through the UI, deleting projects after a test and
setting preferences.

Every mutating command requires a CSRF token, which is fetched fresh
for each call.  HTTP errors propagate as :class:`requests.HTTPError`;
responses OpenRefine reports as failed raise :class:`RefineAPIError`.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import requests

from . import selectors
from .utils.logger import get_logger

CSV_FORMAT = "text/line-based/*sv"
DEFAULT_CSV_OPTIONS: Dict[str, Any] = {
    "encoding": "UTF-8",
    "separator": ",",
    "ignoreLines": -1,
    "headerLines": 1,
    "skipDataLines": 0,
    "limit": -1,
    "storeBlankRows": True,
    "guessCellValueTypes": False,
    "processQuotes": True,
    "storeBlankCellsAsNulls": True,
    "includeFileSources": False,
}


class RefineAPIError(RuntimeError):
    """OpenRefine answered, but reported the command as failed."""


class RefineClient:
    """Talk to the command API of one OpenRefine instance."""

    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None) -> None:
        if not base_url:
            raise ValueError("RefineClient needs the OpenRefine base URL")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = get_logger(self.__class__.__name__)

    @classmethod
    def from_config(cls, config: Any) -> "RefineClient":
        return cls(config.openrefine_url, timeout=float(config.get("api.timeout", 30)))

    def _url(self, command: str) -> str:
        return f"{self.base_url}/command/core/{command}"

    def _check(self, response: requests.Response) -> Dict[str, Any]:
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError:
            return {}
        if isinstance(payload, dict) and payload.get("status") == "error":
            raise RefineAPIError(payload.get("message") or f"OpenRefine rejected {response.url}")
        return payload if isinstance(payload, dict) else {}

    def get_csrf_token(self) -> str:
        response = self.session.get(self._url("get-csrf-token"), timeout=self.timeout)
        token = self._check(response).get("token")
        if not token:
            raise RefineAPIError("OpenRefine did not return a CSRF token")
        return token

    def create_project(
        self,
        content: str,
        project_name: str,
        options: Optional[Dict[str, Any]] = None,
        file_name: str = "test.csv",
    ) -> str:
        """Create a project from CSV ``content`` and return its id.

        OpenRefine answers the upload with a redirect to the project
        page; the id is read from the final URL of that redirect chain.
        """
        csv_options = dict(DEFAULT_CSV_OPTIONS)
        csv_options.update(options or {})
        response = self.session.post(
            self._url("create-project-from-upload"),
            params={"csrf_token": self.get_csrf_token()},
            files={"project-file": (file_name, content.encode("utf-8"), "application/octet-stream")},
            data={
                "project-name": project_name,
                "format": CSV_FORMAT,
                "options": json.dumps(csv_options),
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        if "project=" not in response.url:
            raise RefineAPIError(f"Project {project_name!r} was not created; ended at {response.url}")
        project_id = selectors.project_id_from_url(response.url)
        self.logger.info("Created project %s (%s)", project_id, project_name)
        return project_id

    def delete_project(self, project_id: str) -> None:
        response = self.session.post(
            self._url("delete-project"),
            params={"csrf_token": self.get_csrf_token()},
            data={"project": project_id},
            timeout=self.timeout,
        )
        self._check(response)
        self.logger.info("Deleted project %s", project_id)

    def set_preference(self, name: str, value: Any) -> None:
        """Store a preference; ``value`` is sent JSON-encoded, as the UI does."""
        response = self.session.post(
            self._url("set-preference"),
            params={"csrf_token": self.get_csrf_token()},
            data={"name": name, "value": json.dumps(value)},
            timeout=self.timeout,
        )
        self._check(response)
        self.logger.debug("Set preference %s=%r", name, value)

    def close(self) -> None:
        self.session.close()


__all__ = ["RefineClient", "RefineAPIError", "CSV_FORMAT"]
