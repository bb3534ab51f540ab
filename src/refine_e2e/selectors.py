"""
OpenRefine DOM Contract
-----------------------

CSS selectors and attribute names exposed by OpenRefine's rendered
markup.  The commands only ever reach the application through these
strings, so a change to the application's structure shows up here
first.  Helpers that need an argument (a column title, a row index)
build the selector with the functions at the bottom of the module.
"""

from __future__ import annotations

import re
from typing import Pattern

# Facets
FACET_CONTAINER = "#refine-tabs-facets .facets-container .facet-container"
FACET_TITLE = 'span[bind="titleSpan"]'

# Data table
DATA_TABLE = "table.data-table"
DATA_TABLE_HEADER_CELL = ".data-table th"
COLUMN_HEADER_MENU = ".column-header-menu"
CELL_CONTENT_SPAN = "div.data-table-cell-content > span"
CELL_EDIT_LINK = "a.data-table-cell-edit"
CELL_NON_STRING_VALUE = ".data-table-value-nonstring"
CELL_EDITOR_TEXTAREA = ".menu-container.data-table-cell-editor textarea"
CELL_EDITOR_OK_BUTTON = '.menu-container button[bind="okButton"]'
# Leading cells of every row (star, flag, row number) before the first column
LEADING_ROW_CELLS = 3

# Menus and dialogs
MENU_CONTAINER = "body > .menu-container"
DIALOG_FRAME = "body > .dialog-container > .dialog-frame"
DIALOG_OK_BUTTON = DIALOG_FRAME + ' .dialog-footer button[bind="okButton"]'
NOTIFICATION = "#notification"

# Application chrome
ACTION_AREA_TAB = "#action-area-tabs li"
PROJECT_TITLE = "#project-title"

# Busy flag toggled on <body> around every asynchronous operation
AJAX_IN_PROGRESS_ATTR = "ajax_in_progress"

# Create Project page
SOURCE_SELECTION_TAB = "#create-project-ui-source-selection-tabs > div"
SELECTED_SOURCE_BODY = ".create-project-ui-source-selection-tab-body.selected"
SELECTED_SOURCE_FILE_INPUT = SELECTED_SOURCE_BODY + ' input[type="file"]'
SELECTED_SOURCE_PRIMARY_BUTTON = SELECTED_SOURCE_BODY + " button.button-primary"
CLIPBOARD_TEXTAREA = "textarea"
WIZARD_NEXT_BUTTON = '.default-importing-wizard-header button[bind="nextButton"]'
WIZARD_PROJECT_NAME_INPUT = '.default-importing-wizard-header input[bind="projectNameInput"]'
JSON_FIRST_ELEMENT = "[data-cy=element0]"


def busy_flag(busy: bool) -> str:
    """Selector matching ``<body>`` while an operation is (not) in flight."""
    return f'body[{AJAX_IN_PROGRESS_ATTR}="{"true" if busy else "false"}"]'


def column_header(column_name: str) -> str:
    """Header cell of the data table whose ``title`` is ``column_name``."""
    return f'{DATA_TABLE} thead th[title="{column_name}"]'


def column_header_anywhere(column_name: str) -> str:
    """Header cell with the given title, matched in any ``.data-table``."""
    return f'{DATA_TABLE_HEADER_CELL}[title="{column_name}"]'


def cell(row_index: int, header_index: int) -> str:
    """``td`` for a 0-based row and the 0-based sibling index of its header.

    CSS ``nth-child`` is 1-based and every row starts with
    :data:`LEADING_ROW_CELLS` cells that have no header of their own.
    """
    if row_index < 0:
        raise ValueError(f"row_index must be >= 0, got {row_index}")
    css_row = row_index + 1
    css_column = header_index + LEADING_ROW_CELLS
    return f"{DATA_TABLE} tbody tr:nth-child({css_row}) td:nth-child({css_column})"


def project_path(project_id: str) -> str:
    return f"/project?project={project_id}"


def project_id_from_url(url: str) -> str:
    """Return the project id carried by ``url``: the text after the last ``=``."""
    return url.split("=")[-1]


def contains_text(text: str) -> Pattern[str]:
    """Case-sensitive substring match for ``has_text`` and ``get_by_text``.

    Playwright matches a plain string ignoring case.
    """
    return re.compile(re.escape(text))
