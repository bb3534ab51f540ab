"""
Grid Commands
-------------

Commands reading and editing OpenRefine's data table.  Cells are
addressed by a 0-based row index and the title of their column header;
the column's position is read from the header at call time, so the
helpers keep working after columns are added, moved or removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from playwright.sync_api import Locator, expect

from .. import selectors
from ..utils.logger import get_logger
from ..utils.wait_utils import wait_for_idle
from .registry import commands

if TYPE_CHECKING:
    from ..session import RefineSession

logger = get_logger(__name__)

# jQuery's .index(): position of the element among its siblings
_SIBLING_INDEX_JS = "el => Array.prototype.indexOf.call(el.parentElement.children, el)"

# text OpenRefine renders for a null cell
NULL_CELL_TEXT = "null"


def _header_index(refine: "RefineSession", column_name: str) -> int:
    header = refine.page.locator(selectors.column_header(column_name)).first
    return int(header.evaluate(_SIBLING_INDEX_JS, timeout=refine.timeout))


@commands.add(log=False)
def get_cell(refine: "RefineSession", row_index: int, column_name: str) -> Locator:
    """Return the ``td`` for a row index and a column name."""
    return refine.page.locator(selectors.cell(row_index, _header_index(refine, column_name)))


@commands.add()
def edit_cell(refine: "RefineSession", row_index: int, column_name: str, value: str) -> None:
    """Edit a cell through its in-place editor."""
    page = refine.page
    cell = refine.get_cell(row_index, column_name)
    cell.hover()
    cell.locator(selectors.CELL_EDIT_LINK).click()
    page.locator(selectors.CELL_EDITOR_TEXTAREA).press_sequentially(value)
    page.locator(selectors.CELL_EDITOR_OK_BUTTON).click()


@commands.add()
def assert_cell_equals(refine: "RefineSession", row_index: int, column_name: str, value: Optional[str]) -> None:
    """Assert the rendered content of a cell.

    ``None`` stands for a null cell, which OpenRefine renders as the text
    ``null``.
    """
    expected = NULL_CELL_TEXT if value is None else value
    span = refine.get_cell(row_index, column_name).locator(selectors.CELL_CONTENT_SPAN)
    expect(span).to_have_text(expected, timeout=refine.timeout)


@commands.add()
def assert_cell_not_string(
    refine: "RefineSession", row_index: int, column_name: str, expected_type: Optional[str] = None
) -> None:
    """Assert that a cell holds a non-string value (number, boolean, date)."""
    if expected_type:
        logger.debug("Expecting a %s in row %s of %s", expected_type, row_index, column_name)
    value = refine.get_cell(row_index, column_name).locator(selectors.CELL_NON_STRING_VALUE)
    expect(value.first).to_be_attached(timeout=refine.timeout)


def _open_column_menu(refine: "RefineSession", column_name: str) -> None:
    page = refine.page
    header = page.locator(selectors.DATA_TABLE_HEADER_CELL, has_text=selectors.contains_text(column_name))
    header.locator(selectors.COLUMN_HEADER_MENU).first.click()


def _click_menu_entries(refine: "RefineSession", entries: Sequence[str]) -> None:
    # each entry opens a submenu, appended as the next body-level container
    menus = refine.page.locator(selectors.MENU_CONTAINER)
    for depth, entry in enumerate(entries):
        menus.nth(depth).get_by_text(selectors.contains_text(entry)).first.click()


@commands.add()
def column_action_click(refine: "RefineSession", column_name: str, actions: Sequence[str]) -> None:
    """Click through the column menu of ``column_name``, one entry per menu level."""
    # headers are detached from the DOM while an operation is running
    wait_for_idle(refine.page, refine.timeout)
    _open_column_menu(refine, column_name)
    _click_menu_entries(refine, actions)
    wait_for_idle(refine.page, refine.timeout)


@commands.add()
def cast_column_to(refine: "RefineSession", column_name: str, target: str) -> None:
    """Cast a whole column using Edit cells > Common transforms > To ``target``."""
    _open_column_menu(refine, column_name)
    _click_menu_entries(refine, ["Edit cells", "Common transforms", f"To {target}"])


@commands.add()
def delete_column(refine: "RefineSession", column_name: str) -> None:
    """Remove a column from the grid."""
    header = refine.page.locator(selectors.column_header_anywhere(column_name))
    expect(header.first).to_be_attached(timeout=refine.timeout)
    refine.column_action_click(column_name, ["Edit column", "Remove this column"])
    expect(header).to_have_count(0, timeout=refine.timeout)
