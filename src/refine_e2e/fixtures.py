"""
Fixture Data
------------

Datasets handed to :func:`refine_e2e.commands.projects.load_project`.
A fixture is either the name of a bundled dataset (see
``data/fixtures.yaml``: ``food.mini``, ``food.small``) or a list of
rows whose first row holds the column names.  Both are turned into the
CSV text that is uploaded to OpenRefine.

Rows given inline are written with every field quoted so that values
containing commas survive the import untouched.
"""

from __future__ import annotations

import csv
import io
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import yaml

Rows = Sequence[Sequence[Any]]
Fixture = Union[str, Rows]


@lru_cache(maxsize=None)
def _bundled() -> Dict[str, List[List[str]]]:
    text = (resources.files("refine_e2e") / "data" / "fixtures.yaml").read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def fixture_names() -> List[str]:
    return sorted(_bundled())


def get_rows(name: str) -> List[List[str]]:
    """Return a copy of the rows of a bundled dataset."""
    try:
        rows = _bundled()[name]
    except KeyError:
        raise KeyError(f"Unknown fixture {name!r}; known fixtures: {', '.join(fixture_names())}") from None
    return [list(row) for row in rows]


def rows_to_csv(rows: Rows, quote_all: bool = True) -> str:
    """Serialise ``rows`` to CSV text with ``\\n`` line endings."""
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        quoting=csv.QUOTE_ALL if quote_all else csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    for row in rows:
        writer.writerow(["" if value is None else value for value in row])
    return buffer.getvalue().rstrip("\n")


def to_csv(fixture: Fixture) -> str:
    """Turn a fixture name or an inline list of rows into upload content."""
    if isinstance(fixture, str):
        return rows_to_csv(get_rows(fixture), quote_all=False)
    if not fixture:
        raise ValueError("An inline fixture needs at least a header row")
    return rows_to_csv(fixture)


def resolve_fixture_file(fixture_file: Union[str, Path], fixtures_dir: Union[str, Path]) -> Path:
    """Locate a file to attach, relative to the configured fixtures directory."""
    path = Path(fixture_file)
    if not path.is_absolute():
        path = Path(fixtures_dir) / path
    if not path.is_file():
        raise FileNotFoundError(f"Fixture file not found: {path}")
    return path


__all__ = [
    "fixture_names",
    "get_rows",
    "rows_to_csv",
    "to_csv",
    "resolve_fixture_file",
]
