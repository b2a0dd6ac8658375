"""Invoke user callbacks on parsed cells."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from autotable.models import CellHookData, split_text

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Any

    from autotable.models import Cell, Column, Row, Table

log = logging.getLogger(__name__)


def normalize_text(cell: Cell) -> None:
    """Make sure a cell's text is a list of lines."""
    if not isinstance(cell.text, list):
        cell.text = split_text(cell.text)


def call_cell_hooks(
    handlers: Iterable[Callable[[CellHookData], Any]],
    table: Table,
    cell: Cell,
    row: Row,
    column: Column,
) -> bool:
    """Call each handler in turn with the cell's hook data.

    A handler which returns ``False`` prevents the remaining handlers from
    being called. Exceptions raised by a handler are not caught.

    Returns:
        ``False`` if a handler stopped the chain, otherwise ``True``

    """
    for handler in handlers:
        result = handler(CellHookData(table, cell, row, column))
        normalize_text(cell)
        if result is False:
            return False
    return True


def run_did_parse_cell(
    table: Table, after: Callable[[Cell], Any] | None = None
) -> None:
    """Run the ``did_parse_cell`` hooks on every cell of a table.

    Args:
        table: The table whose cells are visited
        after: Called with each cell once its hooks have run, before the next
            cell is visited

    """
    handlers = table.hooks.get("did_parse_cell") or []
    for row, column, cell in table.iter_cells():
        if handlers:
            call_cell_hooks(handlers, table, cell, row, column)
        normalize_text(cell)
        if after is not None:
            after(cell)
    log.debug("Ran %d did_parse_cell hooks", len(handlers))
