"""Tests for the default configuration and option merging."""

from __future__ import annotations

import logging

import pytest

from autotable import config


def test_default_styles_are_scaled() -> None:
    """Sizes in the default style are divided by the scale factor."""
    styles = config.default_styles(2)
    assert styles["cell_padding"] == 2.5
    assert styles["cell_width"] == "auto"
    assert styles["min_cell_width"] == 0


def test_default_styles_are_fresh() -> None:
    """Each call returns a new dictionary."""
    styles = config.default_styles()
    styles["font_size"] = 99
    assert config.default_styles()["font_size"] == 10


def test_get_theme() -> None:
    """Known themes are returned and unknown themes fall back to striped."""
    assert config.get_theme("grid")["table"]["line_width"] == 0.1
    assert config.get_theme("plain")["head"] == {"font_style": "bold"}


def test_get_unknown_theme(caplog: pytest.LogCaptureFixture) -> None:
    """An unknown theme logs a warning."""
    with caplog.at_level(logging.WARNING, logger="autotable.config"):
        theme = config.get_theme("neon")
    assert theme is config.THEMES["striped"]
    assert "neon" in caplog.text


@pytest.mark.parametrize(
    ("settings", "expected"),
    [
        ({}, "striped"),
        ({"theme": "auto"}, "striped"),
        ({"theme": "auto", "use_css": True}, "plain"),
        ({"theme": "grid", "use_css": True}, "grid"),
    ],
)
def test_resolve_theme_name(settings: dict, expected: str) -> None:
    """The auto theme depends on whether CSS is used."""
    assert config.resolve_theme_name(settings) == expected


def test_merge_settings() -> None:
    """Later layers override earlier ones key by key."""
    settings = config.merge_settings(
        [{"margin": 10, "theme": "grid"}, {}, {"margin": 20, "body": (["a"],)}]
    )
    assert settings["margin"] == 20
    assert settings["theme"] == "grid"
    assert settings["body"] == [["a"]]
    assert settings["head"] == []
    assert settings["table_width"] == "auto"


def test_merge_style_options() -> None:
    """Style scopes are merged one level deeper than other options."""
    styles = config.merge_style_options(
        [
            {"head_styles": {"font_size": 8, "halign": "left"}},
            {"head_styles": {"halign": "center"}, "column_styles": {"x": {"a": 1}}},
        ]
    )
    assert styles["head_styles"] == {"font_size": 8, "halign": "center"}
    assert styles["column_styles"] == {"x": {"a": 1}}
    assert styles["styles"] == {}
    assert set(styles) == set(config.STYLE_SCOPES)


def test_collect_hooks() -> None:
    """Hooks from every layer are kept in layer order."""

    def first(data: object) -> None:
        pass

    def second(data: object) -> None:
        pass

    def third(data: object) -> None:
        pass

    hooks = config.collect_hooks(
        [{"did_parse_cell": first}, {}, {"did_parse_cell": [second, third]}]
    )
    assert hooks["did_parse_cell"] == [first, second, third]
    assert hooks["did_draw_page"] == []
    assert set(hooks) == set(config.HOOK_NAMES)


def test_parse_user_arguments_single() -> None:
    """A single options mapping is used as is."""
    options = {"body": [["a"]]}
    assert config.parse_user_arguments([options]) == options


def test_parse_user_arguments_legacy() -> None:
    """The legacy form takes columns, body and options."""
    columns = [{"title": "Name", "data_key": "name"}, {"header": "Age"}, "City"]
    options = config.parse_user_arguments(
        [columns, [{"name": "Ann"}], {"theme": "plain"}]
    )
    assert options["theme"] == "plain"
    assert options["body"] == [{"name": "Ann"}]
    assert options["columns"][0]["header"] == "Name"
    assert options["columns"][1]["header"] == "Age"
    assert options["columns"][2] == "City"
    # The caller's descriptors are left untouched
    assert "header" not in columns[0]
