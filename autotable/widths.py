"""Compute the widths of cells, columns and the table."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from autotable.hooks import normalize_text

if TYPE_CHECKING:
    from autotable.context import BuildContext
    from autotable.models import Cell, Table

log = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def _is_number(value: object) -> bool:
    """Determine if a style value is a fixed numeric width."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def resolve_cell_width(cell: Cell, context: BuildContext) -> None:
    """Compute a cell's content, readable, minimum and wrapped widths.

    Args:
        cell: The cell to size, after hooks have run
        context: The build context providing the measurement function

    """
    normalize_text(cell)
    assert isinstance(cell.text, list)
    padding = cell.padding("horizontal")

    cell.content_width = context.measure(cell.text, cell.styles) + padding

    words = _WHITESPACE_RE.split(" ".join(cell.text))
    cell.min_readable_width = context.measure(words, cell.styles) + padding

    cell_width = cell.styles.get("cell_width")
    if _is_number(cell_width):
        cell.min_width = cell_width
        cell.wrapped_width = cell_width
    elif cell_width == "wrap":
        cell.min_width = cell.content_width
        cell.wrapped_width = cell.content_width
    else:
        # auto
        cell.min_width = cell.styles.get("min_cell_width") or context.default_min_width
        cell.wrapped_width = max(cell.content_width, cell.min_width)


def resolve_column_widths(table: Table) -> None:
    """Aggregate cell widths into column widths.

    Only cells spanning a single column contribute, as the width of a spanning
    cell cannot be attributed to any one of its columns. A numeric
    ``cell_width`` in a column's ``column_styles`` overrides the aggregate.
    Columns left unsized take the minimum width of a spanning cell anchored in
    them.
    """
    for column in table.columns:
        spanning: list[Cell] = []
        for row in table.all_rows():
            cell = row.get_cell(column)
            if cell is None:
                continue
            if cell.col_span == 1:
                column.wrapped_width = max(column.wrapped_width, cell.wrapped_width)
                column.min_width = max(column.min_width, cell.min_width)
                column.min_readable_width = max(
                    column.min_readable_width, cell.min_readable_width
                )
            else:
                spanning.append(cell)

        cell_width = table.column_style(column).get("cell_width")
        if _is_number(cell_width):
            column.min_width = cell_width
            column.wrapped_width = cell_width

        for cell in spanning:
            if not column.min_width:
                column.min_width = cell.min_width
            if not column.wrapped_width:
                column.wrapped_width = cell.min_width


def resolve_table_width(table: Table, context: BuildContext) -> None:
    """Total the column widths and choose the table's width."""
    table.min_width = sum(column.min_width for column in table.columns)
    table.wrapped_width = sum(column.wrapped_width for column in table.columns)

    table_width = table.settings.get("table_width")
    if _is_number(table_width):
        table.width = table_width
    elif table_width == "wrap":
        table.width = table.wrapped_width
    else:
        table.width = context.page_width - table.margin.left - table.margin.right

    log.debug(
        "Table widths: min=%s wrapped=%s width=%s",
        table.min_width,
        table.wrapped_width,
        table.width,
    )
