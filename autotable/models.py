"""Define the table model produced by a build pass."""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from autotable.data_structures import to_di
from autotable.inputs import to_cell_input

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterator, Mapping
    from typing import Any

    from autotable.data_structures import DiFloat
    from autotable.inputs import CellInput, RowInput

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class Section(Enum):
    """A named group of rows in a table."""

    HEAD = "head"
    BODY = "body"
    FOOT = "foot"


def split_text(content: Any) -> list[str]:
    """Convert cell content to a list of lines."""
    if isinstance(content, (list, tuple)):
        return [str(line) for line in content]
    text = "" if content is None else str(content)
    return _LINE_BREAK_RE.split(text)


class Cell:
    """A table cell."""

    def __init__(
        self,
        raw: Any,
        styles: dict[str, Any],
        section: Section,
        cell_input: CellInput | None = None,
    ) -> None:
        """Create a new table cell.

        Args:
            raw: The value given by the user for this cell
            styles: The resolved style of the cell
            section: The section of the table the cell belongs to
            cell_input: The classified raw value, derived from ``raw`` if not given

        """
        if cell_input is None:
            cell_input = to_cell_input(raw)
        self.raw = raw
        self.styles = styles
        self.section = section
        self.col_span = cell_input.col_span
        self.row_span = cell_input.row_span
        self.text: list[str] | str = split_text(cell_input.content)

        self.content_width: float = 0
        self.min_readable_width: float = 0
        self.min_width: float = 0
        self.wrapped_width: float = 0

    def padding(self, name: str) -> float:
        """Return the cell's padding for an edge, or a ``horizontal``/``vertical`` sum."""
        padding = to_di(self.styles.get("cell_padding"), 0)
        return getattr(padding, name)

    def to_dict(self) -> dict[str, Any]:
        """Represent the resolved cell as a dictionary."""
        return {
            "text": self.text,
            "styles": self.styles,
            "col_span": self.col_span,
            "row_span": self.row_span,
            "content_width": self.content_width,
            "min_readable_width": self.min_readable_width,
            "min_width": self.min_width,
            "wrapped_width": self.wrapped_width,
        }

    def __repr__(self) -> str:
        """Return a text representation of the cell."""
        cell_text = " ".join(self.text) if isinstance(self.text, list) else self.text
        if len(cell_text) > 5:
            cell_text = cell_text[:4] + "…"
        return f"{self.__class__.__name__}({cell_text!r})"


class Column:
    """A column in a table."""

    def __init__(self, data_key: Hashable, raw: Any, index: int) -> None:
        """Create a new column.

        Args:
            data_key: The key used to look up this column's values in keyed rows
            raw: The column descriptor given by the user
            index: The position of the column in the table

        """
        self.data_key = data_key
        self.raw = raw
        self._index = index

        self.min_readable_width: float = 0
        self.min_width: float = 0
        self.wrapped_width: float = 0
        self.width: float | None = None

    @property
    def index(self) -> int:
        """The column's position in the table."""
        return self._index

    def to_dict(self) -> dict[str, Any]:
        """Represent the resolved column as a dictionary."""
        return {
            "data_key": self.data_key,
            "index": self.index,
            "min_readable_width": self.min_readable_width,
            "min_width": self.min_width,
            "wrapped_width": self.wrapped_width,
        }

    def __repr__(self) -> str:
        """Return a textual representation of the column."""
        return f"{self.__class__.__name__}({self.data_key!r}, index={self.index})"


class Row:
    """A row in a table."""

    def __init__(self, raw: RowInput, index: int, section: Section) -> None:
        """Create a new row.

        Args:
            raw: The classified row given by the user
            index: The position of the row within its section
            section: The section of the table the row belongs to

        """
        self.raw = raw
        self.index = index
        self.section = section
        # Cells are keyed by both column ``data_key`` and column ``index``
        self.cells: dict[Hashable, Cell] = {}

    def add_cell(self, column: Column, cell: Cell) -> None:
        """Place a cell in the given column of this row."""
        self.cells[column.data_key] = cell
        self.cells[column.index] = cell

    def get_cell(self, column: Column) -> Cell | None:
        """Return the cell anchored in a column, if any."""
        return self.cells.get(column.index)

    def to_dict(self, columns: list[Column]) -> dict[str, Any]:
        """Represent the resolved row as a dictionary keyed by column index."""
        return {
            "index": self.index,
            "cells": {
                column.index: cell.to_dict()
                for column in columns
                if (cell := self.get_cell(column)) is not None
            },
        }

    def __repr__(self) -> str:
        """Return a textual representation of the row."""
        cells = {k: v for k, v in self.cells.items() if isinstance(k, int)}
        return f"{self.__class__.__name__}({', '.join(map(str, cells.values()))})"


class CellHookData(NamedTuple):
    """The values passed to a cell hook."""

    table: Table
    cell: Cell
    row: Row
    column: Column

    @property
    def section(self) -> Section:
        """The section of the table the cell belongs to."""
        return self.cell.section


class Table:
    """A table resolved from user settings."""

    def __init__(
        self,
        settings: dict[str, Any],
        styles: dict[str, dict[str, Any]],
        hooks: dict[str, list[Callable[..., Any]]],
        margin: DiFloat,
        table_id: Any = None,
        start_y: float = 0,
        theme: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        """Create a new table instance.

        Args:
            settings: The merged table settings
            styles: The merged style scopes, keyed by scope name
            hooks: The lifecycle callbacks, keyed by hook name
            margin: The margin around the table
            table_id: An optional identifier for the table
            start_y: The vertical position the table starts at
            theme: The section styles of the table's theme

        """
        self.id = table_id
        self.settings = settings
        self.styles = styles
        self.hooks = hooks
        self.margin = margin
        self.start_y = start_y
        self.theme = theme or {}

        self.columns: list[Column] = []
        self.head: list[Row] = []
        self.body: list[Row] = []
        self.foot: list[Row] = []

        self.min_width: float = 0
        self.wrapped_width: float = 0
        self.width: float = 0

    def section_rows(self, section: Section) -> list[Row]:
        """Return the list of rows for a section."""
        return getattr(self, section.value)

    def all_rows(self) -> list[Row]:
        """Return the head, body and foot rows, in that order."""
        return [*self.head, *self.body, *self.foot]

    def iter_cells(self) -> Iterator[tuple[Row, Column, Cell]]:
        """Iterate over every anchored cell with its row and column."""
        for row in self.all_rows():
            for column in self.columns:
                cell = row.get_cell(column)
                if cell is not None:
                    yield row, column, cell

    def column_style(self, column: Column) -> dict[str, Any]:
        """Return the user's style overrides for a column."""
        column_styles = self.styles.get("column_styles", {})
        # Keys loaded from JSON are always strings
        for key in (column.data_key, column.index, str(column.index)):
            if style := column_styles.get(key):
                return style
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Represent the resolved table as a dictionary."""
        return {
            "id": self.id,
            "start_y": self.start_y,
            "min_width": self.min_width,
            "wrapped_width": self.wrapped_width,
            "width": self.width,
            "columns": [column.to_dict() for column in self.columns],
            **{
                section.value: [
                    row.to_dict(self.columns) for row in self.section_rows(section)
                ]
                for section in Section
            },
        }

    def __repr__(self) -> str:
        """Return a textual representation of the table."""
        return (
            f"{self.__class__.__name__}(columns={len(self.columns)}, "
            f"head={len(self.head)}, body={len(self.body)}, foot={len(self.foot)})"
        )
