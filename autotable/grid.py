"""Expand section rows into a grid of cells, honouring row and column spans."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from autotable.inputs import Keyed, Positional, to_row_input
from autotable.models import Cell, Row, Section
from autotable.styles import cell_styles

if TYPE_CHECKING:
    from typing import Any

    from autotable.context import BuildContext
    from autotable.inputs import CellInput, RowInput
    from autotable.models import Column, Table

log = logging.getLogger(__name__)


class SpanEntry:
    """The span claim a cell makes on the rows beneath it in one column."""

    __slots__ = ("left", "times")

    def __init__(self, left: int = 0, times: int = 0) -> None:
        """Create a new ledger entry.

        Args:
            left: The number of rows below which are still covered
            times: The number of columns to the right the claim covers

        """
        self.left = left
        self.times = times

    def __repr__(self) -> str:
        """Return a textual representation of the entry."""
        return f"{self.__class__.__name__}(left={self.left}, times={self.times})"


class SpanLedger:
    """Per-column span bookkeeping for one pass over a section."""

    def __init__(self, n_columns: int) -> None:
        """Create an empty ledger for a number of columns."""
        self.entries = [SpanEntry() for _ in range(n_columns)]

    def __getitem__(self, index: int) -> SpanEntry:
        """Return the entry for a column index."""
        return self.entries[index]

    def claim(self, index: int, row_span: int, col_span: int) -> None:
        """Record the span of a cell anchored in a column."""
        entry = self.entries[index]
        entry.left = row_span - 1
        entry.times = col_span - 1


def synthesize_section_row(
    columns: list[Column], section: Section
) -> dict[Any, Any] | None:
    """Generate a head or foot row from the column descriptors.

    The head row uses each descriptor's ``header`` (or the descriptor itself
    when it is a bare value), the foot row uses each descriptor's ``footer``.

    Returns:
        A keyed row, or ``None`` if no column provides any content

    """
    row = {}
    for column in columns:
        raw = column.raw
        if section is Section.HEAD:
            value = raw.get("header") if isinstance(raw, Mapping) else raw
        elif section is Section.FOOT and isinstance(raw, Mapping):
            value = raw.get("footer")
        else:
            value = None
        if value:
            row[column.data_key] = value
    return row or None


def section_inputs(
    table: Table, section: Section, has_column_descriptors: bool
) -> list[RowInput]:
    """Return the classified rows of a section, synthesising one if needed."""
    raw_rows = list(table.settings.get(section.value) or [])
    if not raw_rows and has_column_descriptors and section is not Section.BODY:
        if (synthesized := synthesize_section_row(table.columns, section)) is not None:
            log.debug("Generated a %s row from the column data", section.value)
            raw_rows.append(synthesized)
    return [to_row_input(raw) for raw in raw_rows]


def lookup_cell(
    raw_row: RowInput, column: Column, col_spans_added: int, row_span_skips: int
) -> CellInput | None:
    """Find the value which starts a new cell in a column."""
    if isinstance(raw_row, Positional):
        # Positional rows omit the slots claimed by spans
        return raw_row.get(column.index - col_spans_added - row_span_skips)
    assert isinstance(raw_row, Keyed)
    return raw_row.get(column.data_key)


def build_section(table: Table, context: BuildContext, section: Section) -> list[Row]:
    """Expand a section's rows into cells positioned against the table's columns.

    Args:
        table: The table being built, with its columns already resolved
        context: The build context
        section: The section to expand

    Returns:
        The section's rows

    """
    has_column_descriptors = bool(table.settings.get("columns"))
    raw_rows = section_inputs(table, section, has_column_descriptors)
    ledger = SpanLedger(len(table.columns))
    rows = []

    for row_index, raw_row in enumerate(raw_rows):
        row = Row(raw_row, row_index, section)
        rows.append(row)

        row_span_skips = 0
        col_spans_added = 0
        col_spans_left = 0
        for column in table.columns:
            entry = ledger[column.index]
            if entry.left > 0:
                # Claimed by a cell in a row above
                entry.left -= 1
                col_spans_left = entry.times
                row_span_skips += 1
            elif col_spans_left > 0:
                # Claimed by a cell to the left in this row
                col_spans_left -= 1
                col_spans_added += 1
            else:
                cell_input = lookup_cell(
                    raw_row, column, col_spans_added, row_span_skips
                )
                if cell_input is None:
                    ledger.claim(column.index, 1, 1)
                    continue
                styles = cell_styles(
                    table, context, section, column, row_index, cell_input.styles
                )
                cell = Cell(cell_input.raw, styles, section, cell_input)
                row.add_cell(column, cell)

                col_spans_left = cell.col_span - 1
                ledger.claim(column.index, cell.row_span, cell.col_span)

    return rows


def build_grid(table: Table, context: BuildContext) -> None:
    """Build the head, body and foot rows of a table in place."""
    for section in Section:
        rows = build_section(table, context, section)
        table.section_rows(section)[:] = rows
        log.debug("Built %d %s rows", len(rows), section.value)
