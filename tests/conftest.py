"""
Shared fixtures for the refine_e2e test-suite.

Browser tests never talk to a real OpenRefine: every request to
``BASE_URL`` is answered by :class:`FakeRefine`, which serves small
pages shaped like OpenRefine's markup.  They are skipped when no
Chromium build can be launched.  The command API is replaced by
:class:`FakeClient`, which records calls instead of sending them.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple
from urllib.parse import urlparse

import pytest
import yaml
from playwright.sync_api import Browser, Error as PlaywrightError, Page, Route, sync_playwright

from refine_e2e.config import Config
from refine_e2e.session import RefineSession

pytest_plugins = ["pytester"]

BASE_URL = "http://refine.test"


class FakeClient:
    """Stand-in for :class:`refine_e2e.api.RefineClient`."""

    def __init__(self) -> None:
        self.created: List[Tuple[str, str]] = []
        self.deleted: List[str] = []
        self.preferences: Dict[str, object] = {}
        self.next_id = 1000

    def create_project(self, content: str, project_name: str) -> str:
        self.next_id += 1
        self.created.append((content, project_name))
        return str(self.next_id)

    def delete_project(self, project_id: str) -> None:
        self.deleted.append(project_id)

    def set_preference(self, name: str, value: object) -> None:
        self.preferences[name] = value


class FakeRefine:
    """Serve canned pages for ``BASE_URL`` by path."""

    def __init__(self) -> None:
        self.pages: Dict[str, str] = {}
        self.requests: List[str] = []

    def serve(self, path: str, html: str) -> None:
        self.pages[path] = html

    def handle(self, route: Route) -> None:
        url = route.request.url
        self.requests.append(url)
        path = urlparse(url).path or "/"
        if path in self.pages:
            route.fulfill(status=200, content_type="text/html", body=self.pages[path])
        else:
            route.fulfill(status=404, content_type="text/html", body="<h2>HTTP ERROR 404</h2>")


def write_config(directory, data: dict) -> str:
    path = directory / "config.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OPENREFINE_URL", "UI_TIMEOUT", "UI_HEADLESS", "REFINE_E2E_CONFIG", "FIXTURES_PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        write_config(
            tmp_path,
            {
                "openrefine": {"url": BASE_URL + "/"},
                "ui": {"timeout": 3000},
                "fixtures": {"path": str(tmp_path)},
                "cleanup": {"delete_projects": True},
            },
        )
    )


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture(scope="session")
def chromium() -> Iterator[Browser]:
    try:
        playwright = sync_playwright().start()
    except PlaywrightError as exc:
        pytest.skip(f"Playwright is not usable here: {exc}")
    try:
        browser = playwright.chromium.launch(headless=True)
    except PlaywrightError as exc:
        playwright.stop()
        pytest.skip(f"Chromium cannot be launched: {exc}")
    yield browser
    browser.close()
    playwright.stop()


@pytest.fixture
def fake_refine() -> FakeRefine:
    return FakeRefine()


@pytest.fixture
def page(chromium: Browser, fake_refine: FakeRefine) -> Iterator[Page]:
    context = chromium.new_context()
    context.set_default_timeout(3000)
    context.route(BASE_URL + "/**", fake_refine.handle)
    page = context.new_page()
    yield page
    context.close()


@pytest.fixture
def refine(page: Page, config: Config, fake_client: FakeClient) -> RefineSession:
    return RefineSession(page, config, client=fake_client)
