"""Resolve the ordered list of columns for a table."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from autotable.inputs import Positional, to_row_input
from autotable.models import Column

if TYPE_CHECKING:
    from typing import Any

log = logging.getLogger(__name__)


def column_key(descriptor: Any, index: int) -> Any:
    """Return the identity of an explicitly described column."""
    if isinstance(descriptor, Mapping):
        for name in ("data_key", "key"):
            key = descriptor.get(name)
            if key is not None and key != "":
                return key
    return index


def get_table_columns(settings: Mapping[str, Any]) -> list[Column]:
    """Derive the table's columns from the settings.

    Explicit column descriptors are used when given. Otherwise the columns are
    inferred from the first row of the head, body or foot, in that order.

    Args:
        settings: The merged table settings

    Returns:
        The ordered list of columns

    """
    descriptors = settings.get("columns")
    if descriptors:
        return [
            Column(column_key(descriptor, index), descriptor, index)
            for index, descriptor in enumerate(descriptors)
        ]

    first_row: Any = []
    for section in ("head", "body", "foot"):
        if rows := settings.get(section):
            first_row = rows[0]
            break
    row = to_row_input(first_row)

    columns: list[Column] = []
    for key in row.keys():
        cell = row.get(key)
        col_span = cell.col_span if cell is not None else 1
        for i in range(col_span):
            if isinstance(row, Positional):
                data_key: Any = len(columns)
            else:
                data_key = f"{key}_{i}" if i > 0 else key
            columns.append(Column(data_key, data_key, len(columns)))

    log.debug("Inferred %d columns from the first row", len(columns))
    return columns
