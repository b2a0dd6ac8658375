"""Compute each cell's effective style from layered style sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from autotable.config import default_styles
from autotable.models import Section
from autotable.utils import assign

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from typing import Any

    from autotable.context import BuildContext
    from autotable.models import Column, Table


class StyleLayer(NamedTuple):
    """A named source of style properties."""

    name: str
    styles: Mapping[str, Any]


def merge_layers(layers: Iterable[StyleLayer]) -> dict[str, Any]:
    """Merge style layers property by property, later layers winning."""
    return assign({}, *(layer.styles for layer in layers))


def style_layers(
    table: Table,
    context: BuildContext,
    section: Section,
    column: Column,
    row_index: int,
    overrides: Mapping[str, Any] | None = None,
) -> list[StyleLayer]:
    """List the style layers which apply to a cell, lowest precedence first.

    Args:
        table: The table being built
        context: The build context providing the scale factor
        section: The section containing the cell
        column: The column the cell is anchored in
        row_index: The index of the cell's row within its section
        overrides: Style overrides given on the cell itself

    Returns:
        The ordered list of style layers

    """
    theme = table.theme
    styles = table.styles
    is_body = section is Section.BODY

    alternate_row: dict[str, Any] = {}
    if is_body and row_index % 2 == 0:
        alternate_row = assign(
            {}, theme.get("alternate_row"), styles.get("alternate_row_styles")
        )

    return [
        StyleLayer("default", default_styles(context.scale_factor)),
        StyleLayer("theme", theme.get("table") or {}),
        StyleLayer("theme_section", theme.get(section.value) or {}),
        StyleLayer("styles", styles.get("styles") or {}),
        StyleLayer("section_styles", styles.get(f"{section.value}_styles") or {}),
        StyleLayer("alternate_row", alternate_row),
        StyleLayer("column", table.column_style(column) if is_body else {}),
        StyleLayer("cell", overrides or {}),
    ]


def cell_styles(
    table: Table,
    context: BuildContext,
    section: Section,
    column: Column,
    row_index: int,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Compute the effective style of a cell."""
    return merge_layers(
        style_layers(table, context, section, column, row_index, overrides)
    )
