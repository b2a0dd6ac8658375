"""Define the default configuration, styles and themes for autotable."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from autotable.utils import assign

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from typing import Any

log = logging.getLogger(__name__)

STYLE_SCOPES = (
    "styles",
    "head_styles",
    "body_styles",
    "foot_styles",
    "alternate_row_styles",
    "column_styles",
)

HOOK_NAMES = (
    "did_parse_cell",
    "will_draw_cell",
    "did_draw_cell",
    "did_draw_page",
)

DEFAULT_THEME = "striped"

THEMES: dict[str, dict[str, dict[str, Any]]] = {
    "striped": {
        "table": {"fill_color": 255, "text_color": 80, "font_style": "normal"},
        "head": {
            "text_color": 255,
            "fill_color": (41, 128, 185),
            "font_style": "bold",
        },
        "body": {},
        "foot": {
            "text_color": 255,
            "fill_color": (41, 128, 185),
            "font_style": "bold",
        },
        "alternate_row": {"fill_color": 245},
    },
    "grid": {
        "table": {
            "fill_color": 255,
            "text_color": 80,
            "font_style": "normal",
            "line_width": 0.1,
        },
        "head": {
            "text_color": 255,
            "fill_color": (26, 188, 156),
            "font_style": "bold",
            "line_width": 0,
        },
        "body": {},
        "foot": {
            "text_color": 255,
            "fill_color": (26, 188, 156),
            "font_style": "bold",
            "line_width": 0,
        },
        "alternate_row": {},
    },
    "plain": {
        "table": {},
        "head": {"font_style": "bold"},
        "body": {},
        "foot": {"font_style": "bold"},
        "alternate_row": {},
    },
}


def get_theme(name: str) -> dict[str, dict[str, Any]]:
    """Look up a named theme, falling back to the default theme."""
    try:
        return THEMES[name]
    except KeyError:
        log.warning("Unknown theme %r, using %r", name, DEFAULT_THEME)
        return THEMES[DEFAULT_THEME]


def default_styles(scale_factor: float = 1.0) -> dict[str, Any]:
    """Return a fresh copy of the base cell style."""
    return {
        "font": "helvetica",
        "font_style": "normal",
        "overflow": "linebreak",
        "fill_color": None,
        "text_color": 20,
        "halign": "left",
        "valign": "top",
        "font_size": 10,
        "cell_padding": 5 / scale_factor,
        "line_color": 200,
        "line_width": 0 / scale_factor,
        "cell_width": "auto",
        "min_cell_height": 0,
        "min_cell_width": 0,
    }


def default_config(scale_factor: float = 1.0) -> dict[str, Any]:
    """Return a fresh copy of the default table settings."""
    return {
        "columns": None,
        "head": [],
        "body": [],
        "foot": [],
        "theme": "auto",
        "use_css": False,
        "start_y": None,
        "margin": 40 / scale_factor,
        "page_break": "auto",
        "row_page_break": "auto",
        "table_width": "auto",
        "show_head": "everyPage",
        "show_foot": "everyPage",
        "table_line_width": 0,
        "table_line_color": 200,
    }


def resolve_theme_name(settings: Mapping[str, Any]) -> str:
    """Resolve the ``auto`` theme to a concrete theme name."""
    theme = settings.get("theme") or "auto"
    if theme == "auto":
        return "plain" if settings.get("use_css") else "striped"
    return theme


def merge_style_options(
    layers: Sequence[Mapping[str, Any]],
) -> dict[str, dict[str, Any]]:
    """Merge every style scope of the option layers one level deep.

    Each scope (``styles``, ``head_styles``, ...) is merged key by key across
    the layers, so a table-level ``head_styles`` only overrides the properties
    it names from a global ``head_styles``.
    """
    return {
        scope: assign({}, *(layer.get(scope) for layer in layers))
        for scope in STYLE_SCOPES
    }


def collect_hooks(
    layers: Sequence[Mapping[str, Any]],
) -> dict[str, list[Callable[..., Any]]]:
    """Gather the lifecycle callbacks registered on each option layer."""
    hooks: dict[str, list[Callable[..., Any]]] = {name: [] for name in HOOK_NAMES}
    for layer in layers:
        for name in HOOK_NAMES:
            hook = layer.get(name)
            if hook is None:
                continue
            if callable(hook):
                hooks[name].append(hook)
            else:
                hooks[name].extend(hook)
    return hooks


def merge_settings(
    layers: Sequence[Mapping[str, Any]], scale_factor: float = 1.0
) -> dict[str, Any]:
    """Merge option layers over the default configuration, later layers winning."""
    settings = assign(default_config(scale_factor), *layers)
    settings["theme"] = resolve_theme_name(settings)
    for section in ("head", "body", "foot"):
        settings[section] = list(settings.get(section) or [])
    return settings


def parse_user_arguments(args: Sequence[Any]) -> dict[str, Any]:
    """Normalise the positional arguments given when creating a table.

    The usual form is a single mapping of options. The legacy form
    ``(columns, body, options)`` is also accepted, in which case column
    descriptors with a ``title`` but no ``header`` use the title as header.
    """
    if len(args) == 1:
        return dict(args[0] or {})

    options = dict(args[2] or {}) if len(args) > 2 else {}
    options["body"] = args[1]
    columns = []
    for column in args[0]:
        if isinstance(column, dict) and column.get("header") is None:
            column = {**column, "header": column.get("title")}
        columns.append(column)
    options["columns"] = columns
    return options
