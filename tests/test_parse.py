"""Tests for resolving complete tables."""

from __future__ import annotations

import json
import logging

import pytest

from autotable.config import THEMES
from autotable.context import BuildContext
from autotable.data_structures import DiFloat
from autotable.parse import create_table, parse_input


def test_scenario_array_rows() -> None:
    """Positional rows without columns give a two by two body."""
    table = parse_input({"body": [["a", "b"], ["c", "d"]]})
    assert [column.index for column in table.columns] == [0, 1]
    assert len(table.body) == 2
    assert table.head == []
    assert table.foot == []


def test_scenario_synthesized_head() -> None:
    """Column headers produce a head row."""
    table = parse_input(
        {"columns": [{"data_key": "x", "header": "X"}], "body": [{"x": "v1"}, {"x": "v2"}]}
    )
    assert len(table.head) == 1
    assert table.head[0].cells["x"].text == ["X"]


def test_scenario_col_span() -> None:
    """A cell spanning two of three columns leaves the next slot unset."""
    table = parse_input(
        {
            "columns": [{"data_key": "a"}, {"data_key": "b"}, {"data_key": "c"}],
            "body": [{"a": {"content": "Q", "col_span": 2}, "c": "R"}],
        }
    )
    row = table.body[0]
    assert row.cells["a"].text == ["Q"]
    assert "b" not in row.cells
    assert row.cells["c"].text == ["R"]


def test_scenario_fixed_column_width() -> None:
    """A column style cell width fixes the column's widths."""
    table = parse_input(
        {
            "columns": [{"data_key": "x"}],
            "body": [{"x": "some rather long content"}],
            "column_styles": {"x": {"cell_width": 40}},
        }
    )
    assert table.columns[0].min_width == 40
    assert table.columns[0].wrapped_width == 40


def test_scenario_alternate_rows() -> None:
    """Only even body rows take the alternate row style."""
    table = parse_input(
        {
            "head": [["h"], ["h"]],
            "body": [["a"], ["b"], ["c"]],
            "foot": [["f"], ["f"]],
            "alternate_row_styles": {"text_color": 1},
        }
    )
    assert [row.cells[0].styles["text_color"] for row in table.body] == [1, 80, 1]
    assert all(row.cells[0].styles["text_color"] != 1 for row in table.head)
    assert all(row.cells[0].styles["text_color"] != 1 for row in table.foot)


def test_span_conservation() -> None:
    """Rows beneath a spanning cell have no cells in the claimed block."""
    table = parse_input(
        {
            "body": [
                ["a", {"content": "B", "row_span": 3, "col_span": 2}, "c"],
                ["d", "e"],
                ["f", "g"],
                ["h", "i", "j", "k"],
            ]
        }
    )
    for row in table.body[1:3]:
        assert 1 not in row.cells
        assert 2 not in row.cells
        assert row.cells[0].text and row.cells[3].text
    assert len([k for k in table.body[3].cells if isinstance(k, int)]) == 4


def test_idempotent() -> None:
    """Resolving the same options twice gives identical output."""
    options = {
        "columns": [{"data_key": "a", "header": "A"}, {"data_key": "b", "footer": "F"}],
        "body": [{"a": {"content": "x y", "row_span": 2}, "b": 1}, {"b": 2}],
        "styles": {"cell_padding": [1, 2]},
        "theme": "grid",
    }
    first = parse_input(options).to_dict()
    second = parse_input(options).to_dict()
    assert json.dumps(first, default=str) == json.dumps(second, default=str)


def test_option_layers() -> None:
    """Table options override document options, which override global options."""
    table = parse_input(
        {"body": [["x"]], "head_styles": {"font_size": 20}},
        global_options={"theme": "plain", "margin": 1, "head_styles": {"halign": "right"}},
        document_options={"margin": 2},
    )
    assert table.settings["theme"] == "plain"
    assert table.margin == DiFloat(2, 2, 2, 2)
    assert table.styles["head_styles"] == {"halign": "right", "font_size": 20}


def test_legacy_arguments() -> None:
    """The legacy columns, body and options form is accepted."""
    table = parse_input(
        [{"title": "Name", "data_key": "name"}],
        [{"name": "Ann"}, {"name": "Bob"}],
        {"theme": "plain"},
    )
    assert table.head[0].cells["name"].text == ["Name"]
    assert [row.cells["name"].text for row in table.body] == [["Ann"], ["Bob"]]


def test_create_table_defaults() -> None:
    """Margins default to forty units, scaled."""
    table = create_table({}, BuildContext(scale_factor=2))
    assert table.margin == DiFloat(20, 20, 20, 20)
    assert table.settings["theme"] == "striped"
    assert set(table.hooks) == {
        "did_parse_cell",
        "will_draw_cell",
        "did_draw_cell",
        "did_draw_page",
    }


def test_table_id() -> None:
    """The table identifier is taken from the options."""
    assert parse_input({"table_id": "t1"}).id == "t1"


def test_to_dict() -> None:
    """The resolved table can be represented as plain data."""
    table = parse_input({"body": [["ab"]], "styles": {"cell_padding": 1}})
    data = table.to_dict()
    assert data["columns"] == [
        {
            "data_key": 0,
            "index": 0,
            "min_readable_width": 4,
            "min_width": 10,
            "wrapped_width": 10,
        }
    ]
    cell = data["body"][0]["cells"][0]
    assert cell["text"] == ["ab"]
    assert cell["content_width"] == 4
    assert data["head"] == []
    assert data["width"] == pytest.approx(595.28 - 80)


def test_start_y() -> None:
    """The start position defaults to the top margin."""
    assert parse_input({"body": [["a"]], "start_y": 99}).start_y == 99
    assert parse_input({"body": [["a"]], "margin": 12}).start_y == 12
    assert parse_input({"margin": {"top": 7}}).start_y == 7
    assert parse_input({"body": [["a"]]}).to_dict()["start_y"] == 40


def test_unknown_theme_warns_once(caplog: pytest.LogCaptureFixture) -> None:
    """An unknown theme is reported once per table."""
    with caplog.at_level(logging.WARNING, logger="autotable.config"):
        table = parse_input({"theme": "neon", "body": [["a", "b"], ["c", "d"]]})
    warnings = [r for r in caplog.records if r.name == "autotable.config"]
    assert len(warnings) == 1
    assert table.theme is THEMES["striped"]
