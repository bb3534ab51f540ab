"""Facets, dialog panels, notifications and JSON text areas."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from playwright.sync_api import Locator, expect

from .. import selectors
from .registry import commands

if TYPE_CHECKING:
    from ..session import RefineSession


@commands.add(log=False)
def get_facet_container(refine: "RefineSession", facet_name: str) -> Locator:
    """Return the facet container whose title contains ``facet_name``."""
    page = refine.page
    return page.locator(selectors.FACET_CONTAINER).filter(
        has=page.locator(selectors.FACET_TITLE, has_text=selectors.contains_text(facet_name))
    )


@commands.add()
def wait_for_dialog_panel(refine: "RefineSession") -> None:
    """Wait until a dialog panel is visible."""
    expect(refine.page.locator(selectors.DIALOG_FRAME)).to_be_visible(timeout=refine.timeout)


@commands.add()
def confirm_dialog_panel(refine: "RefineSession") -> None:
    """Click OK on the open dialog panel and wait for it to close."""
    page = refine.page
    page.locator(selectors.DIALOG_OK_BUTTON).click()
    expect(page.locator(selectors.DIALOG_FRAME)).to_have_count(0, timeout=refine.timeout)


@commands.add()
def assert_notification_containing_text(refine: "RefineSession", text: str) -> None:
    expect(refine.page.locator(selectors.NOTIFICATION)).to_contain_text(text, timeout=refine.timeout)


@commands.add()
def assert_textarea_have_json_value(refine: "RefineSession", selector: str, value: Any) -> None:
    """Assert that a textarea holds ``value`` once both are serialised as JSON.

    The textarea content is parsed and re-serialised so indentation and
    spacing in the rendered text do not matter; key order does.  Integral
    floats equal integers, so ``1.0`` in the textarea matches ``1``.
    """
    present = json.loads(refine.page.locator(selector).input_value(timeout=refine.timeout))
    actual, expected = json.dumps(_as_js_numbers(present)), json.dumps(_as_js_numbers(value))
    if actual != expected:
        raise AssertionError(f"Textarea {selector} holds {actual}, expected {expected}")


def _as_js_numbers(value: Any) -> Any:
    # JavaScript has one number type: 1.0 serialises as 1
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _as_js_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_js_numbers(item) for item in value]
    return value
