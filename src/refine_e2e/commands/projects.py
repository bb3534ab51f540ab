"""
Navigation and Project Commands
-------------------------------

Commands that open OpenRefine, move between its main screens and create
projects, either through the command API (fast, used by most tests) or
through the Create Project wizard (when the import UI itself is under
test).  Every project a test creates is recorded in the session's
``loaded_project_ids`` alias so it can be deleted once the test is over.
"""

from __future__ import annotations

import json
import re
import time
from typing import TYPE_CHECKING, Any, Optional

import requests
from playwright.sync_api import expect

from .. import selectors
from ..api import RefineAPIError
from ..fixtures import Fixture, resolve_fixture_file, to_csv
from ..utils.logger import get_logger
from ..utils.wait_utils import wait_for_operation
from .registry import commands

if TYPE_CHECKING:
    from ..session import RefineSession

logger = get_logger(__name__)

CREATED_PROJECT_ID = "created_project_id"
DEFAULT_PROJECT_NAME = "refine-e2e"
UPLOAD_MIME_TYPE = "application/csv"

_PROJECT_URL = re.compile(r"/project\?project=[^&#]+")


@commands.add()
def visit_openrefine(refine: "RefineSession", **options: Any) -> None:
    """Open the OpenRefine start page; ``options`` go to ``page.goto``."""
    refine.page.goto(refine.url(), **options)


@commands.add()
def navigate_to(refine: "RefineSession", target: str) -> None:
    """Click an entry of the main left menu (Create Project, Open Project, ...)."""
    tabs = refine.page.locator(selectors.ACTION_AREA_TAB)
    tabs.filter(has_text=selectors.contains_text(target)).first.click()


@commands.add()
def wait_for_or_operation(refine: "RefineSession") -> None:
    """Wait for OpenRefine to start and finish an asynchronous operation."""
    wait_for_operation(refine.page, refine.timeout)


@commands.add()
def visit_project(refine: "RefineSession", project_id: str) -> None:
    """Open a project given its id."""
    refine.page.goto(refine.url(selectors.project_path(project_id)))
    expect(refine.page.locator(selectors.PROJECT_TITLE)).to_be_attached(timeout=refine.timeout)


@commands.add()
def load_project(refine: "RefineSession", fixture: Fixture, project_name: Optional[str] = None) -> str:
    """Create a project from a fixture through the command API and return its id.

    ``fixture`` is the name of a bundled dataset (``food.mini``,
    ``food.small``) or a list of rows whose first row holds the column
    names.
    """
    project_id = refine.client.create_project(to_csv(fixture), project_name or DEFAULT_PROJECT_NAME)
    refine.loaded_project_ids.append(project_id)
    return project_id


@commands.add()
def load_and_visit_project(refine: "RefineSession", fixture: Fixture, project_name: Optional[str] = None) -> str:
    """Load a fixture as a new project and open it."""
    if project_name is None:
        project_name = str(int(time.time() * 1000))
    project_id = refine.load_project(fixture, project_name)
    refine.page.goto(refine.url(selectors.project_path(project_id)))
    return project_id


@commands.add()
def create_project_through_user_interface(refine: "RefineSession", fixture_file: str) -> None:
    """Attach a fixture file on the Create Project page and submit it."""
    page = refine.page
    path = resolve_fixture_file(fixture_file, refine.config.get("fixtures.path", "tests/fixtures"))
    refine.navigate_to("Create Project")
    page.locator(selectors.SELECTED_SOURCE_FILE_INPUT).set_input_files(
        {"name": path.name, "mimeType": UPLOAD_MIME_TYPE, "buffer": path.read_bytes()}
    )
    page.locator(selectors.SELECTED_SOURCE_PRIMARY_BUTTON).click()


@commands.add()
def do_create_project_through_user_interface(refine: "RefineSession") -> str:
    """Finish the import wizard, open the new project and return its id."""
    page = refine.page
    page.locator(selectors.WIZARD_NEXT_BUTTON).click()
    # OpenRefine leaves the wizard with window.location once the import is done
    page.wait_for_url(_PROJECT_URL, timeout=refine.timeout)
    project_id = selectors.project_id_from_url(page.url)
    refine.visit_project(project_id)
    refine.alias(CREATED_PROJECT_ID, project_id)
    refine.loaded_project_ids.append(project_id)
    logger.info("Created project %s through the import wizard", project_id)
    return project_id


@commands.add()
def load_and_visit_sample_json_project(refine: "RefineSession", project_name: str, fixture: Any) -> str:
    """Import a JSON document pasted in the Clipboard tab and open the project."""
    page = refine.page
    refine.visit_openrefine()
    refine.navigate_to("Create Project")
    tabs = page.locator(selectors.SOURCE_SELECTION_TAB)
    tabs.filter(has_text=selectors.contains_text("Clipboard")).first.click()

    content = fixture if isinstance(fixture, str) else json.dumps(fixture)
    page.locator(selectors.CLIPBOARD_TEXTAREA).evaluate_all(
        "(els, value) => els.forEach(el => { el.value = value; })", content
    )
    next_button = page.locator(selectors.SELECTED_SOURCE_PRIMARY_BUTTON)
    next_button.filter(has_text=selectors.contains_text("Next »")).click()

    page.locator(selectors.WIZARD_PROJECT_NAME_INPUT).fill(project_name)
    # the record path picker sits under fixed-position overlays
    first_element = page.locator(selectors.JSON_FIRST_ELEMENT).first
    first_element.scroll_into_view_if_needed()
    first_element.click(force=True)
    return refine.do_create_project_through_user_interface()


@commands.add()
def set_preference(refine: "RefineSession", name: str, value: Any) -> None:
    """Set an OpenRefine preference through the command API."""
    refine.client.set_preference(name, value)


@commands.add()
def cleanup_projects(refine: "RefineSession") -> None:
    """Delete every project this test created.

    Failures are logged rather than raised so they never hide the
    outcome of the test itself.
    """
    while refine.loaded_project_ids:
        project_id = refine.loaded_project_ids.pop()
        try:
            refine.client.delete_project(project_id)
        except (requests.RequestException, RefineAPIError) as exc:
            logger.warning("Could not delete project %s: %s", project_id, exc)
