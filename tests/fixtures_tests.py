"""Bundled datasets and the CSV content uploaded for them."""

import csv
import io

import pytest

from refine_e2e import fixtures


def test_bundled_fixture_names() -> None:
    assert fixtures.fixture_names() == ["food.mini", "food.small"]


def test_named_fixture_to_csv() -> None:
    rows = list(csv.reader(io.StringIO(fixtures.to_csv("food.mini"))))
    assert rows[0][:3] == ["NDB_No", "Shrt_Desc", "Water"]
    assert rows[1][:2] == ["01001", "BUTTER,WITH SALT"]
    assert len(rows) == 3


def test_get_rows_returns_a_copy() -> None:
    rows = fixtures.get_rows("food.small")
    rows[1][1] = "CHANGED"
    assert fixtures.get_rows("food.small")[1][1] == "BUTTER,WITH SALT"


def test_unknown_fixture() -> None:
    with pytest.raises(KeyError, match="food.mini"):
        fixtures.to_csv("food.large")


def test_inline_rows_are_fully_quoted() -> None:
    content = fixtures.to_csv([["name", "note"], ["Jane", 'says "hi", twice'], ["Joe", None]])
    assert content == '"name","note"\n"Jane","says ""hi"", twice"\n"Joe",""'


def test_empty_inline_fixture() -> None:
    with pytest.raises(ValueError):
        fixtures.to_csv([])


def test_resolve_fixture_file(tmp_path) -> None:
    (tmp_path / "food.csv").write_text("a\n1\n", encoding="utf-8")
    assert fixtures.resolve_fixture_file("food.csv", tmp_path) == tmp_path / "food.csv"
    absolute = tmp_path / "food.csv"
    assert fixtures.resolve_fixture_file(absolute, "/elsewhere") == absolute
    with pytest.raises(FileNotFoundError):
        fixtures.resolve_fixture_file("other.csv", tmp_path)
