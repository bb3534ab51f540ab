"""
pytest Plugin
-------------

Registered through the ``pytest11`` entry point, this plugin provides
the fixtures an OpenRefine end-to-end test needs:

``refine_config``
    The :class:`~refine_e2e.config.Config` for the run (``--refine-config``
    selects the YAML file).

``refine_client``
    A :class:`~refine_e2e.api.RefineClient` shared by the whole run.

``refine_browser``
    One Playwright browser per run, launched from the ``ui.*`` settings.

``refine_page``
    A fresh browser context and page per test.

``refine``
    The :class:`~refine_e2e.session.RefineSession` for the test.  Its alias
    store starts empty; projects it created are deleted afterwards when
    ``cleanup.delete_projects`` is on.

When a test using ``refine_page`` fails, a screenshot of the page is
attached to the Allure report.
"""

from __future__ import annotations

from typing import Iterator

import pytest
from playwright.sync_api import Browser, Error as PlaywrightError, Page, sync_playwright

from .api import RefineClient
from .config import Config
from .reporting import Reporter
from .session import RefineSession
from .utils.logger import get_logger

logger = get_logger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("refine-e2e", "OpenRefine end-to-end helpers")
    group.addoption("--refine-config", default=None, help="YAML configuration for the OpenRefine helpers")
    group.addoption("--refine-url", default=None, help="OpenRefine base URL (overrides the configuration)")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo) -> Iterator[None]:
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return
    page = getattr(item, "funcargs", {}).get("refine_page")
    config = getattr(item, "funcargs", {}).get("refine_config")
    if page is None or (config is not None and not config.get_bool("cleanup.screenshot_on_failure", True)):
        return
    reporter = Reporter()
    try:
        reporter.attach_screenshot(page.screenshot(full_page=True), name=f"{item.name} failure")
        reporter.attach_text(page.url, name="page url")
    except PlaywrightError as exc:
        # a crashed page must not turn a test failure into an internal error
        logger.warning("Could not capture a screenshot for %s: %s", item.nodeid, exc)


@pytest.fixture(scope="session")
def refine_config(pytestconfig: pytest.Config, refine_url_override: None) -> Config:
    return Config(pytestconfig.getoption("--refine-config"))


@pytest.fixture(scope="session")
def refine_url_override(pytestconfig: pytest.Config) -> Iterator[None]:
    """Expose ``--refine-url`` as ``OPENREFINE_URL`` for the whole run."""
    url = pytestconfig.getoption("--refine-url")
    if not url:
        yield
        return
    mp = pytest.MonkeyPatch()
    mp.setenv("OPENREFINE_URL", url)
    yield
    mp.undo()


@pytest.fixture(scope="session")
def refine_client(refine_config: Config) -> Iterator[RefineClient]:
    client = RefineClient.from_config(refine_config)
    yield client
    client.close()


@pytest.fixture(scope="session")
def refine_browser(refine_config: Config) -> Iterator[Browser]:
    browser_name = refine_config.get("ui.browser", "chromium")
    with sync_playwright() as playwright:
        browser_type = getattr(playwright, browser_name)
        browser = browser_type.launch(headless=refine_config.get_bool("ui.headless", True))
        logger.info("Launched %s (headless=%s)", browser_name, refine_config.get_bool("ui.headless", True))
        yield browser
        browser.close()


@pytest.fixture
def refine_page(refine_browser: Browser, refine_config: Config) -> Iterator[Page]:
    context = refine_browser.new_context(viewport=refine_config.get("ui.viewport"))
    context.set_default_timeout(refine_config.get_int("ui.timeout", 10000))
    page = context.new_page()
    yield page
    context.close()


@pytest.fixture
def refine(refine_page: Page, refine_config: Config, refine_client: RefineClient) -> Iterator[RefineSession]:
    session = RefineSession(refine_page, refine_config, client=refine_client)
    yield session
    if refine_config.get_bool("cleanup.delete_projects", True):
        session.cleanup_projects()
