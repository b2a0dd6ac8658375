"""Tagged representations of user supplied rows and cells.

Rows arrive either as sequences of cell values (positional rows) or as mappings
from column keys to cell values (keyed rows). Cell values are either scalars or
mappings carrying ``content``, ``col_span``, ``row_span`` and ``styles``. Both
are classified once, when a row is built.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NamedTuple, Union

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator, Sequence

log = logging.getLogger(__name__)

# Key used by markup input adapters to attach their source element to a row
ELEMENT_KEY = "_element"


class Scalar(NamedTuple):
    """A plain cell value."""

    value: Any

    @property
    def raw(self) -> Any:
        """The value as given by the user."""
        return self.value

    @property
    def content(self) -> Any:
        """The value displayed in the cell."""
        return self.value

    @property
    def col_span(self) -> int:
        """Plain values always occupy a single column."""
        return 1

    @property
    def row_span(self) -> int:
        """Plain values always occupy a single row."""
        return 1

    @property
    def styles(self) -> dict[str, Any]:
        """Plain values carry no style overrides."""
        return {}


class Rich(NamedTuple):
    """A cell value with content, spans and style overrides."""

    content: Any = None
    col_span: int = 1
    row_span: int = 1
    styles: dict[str, Any] | None = None
    raw: Any = None


CellInput = Union[Scalar, Rich]


def _span(raw: Mapping[str, Any], name: str) -> int:
    """Read a span from a cell mapping, clamping invalid values to one."""
    value = raw.get(name)
    if value is None:
        return 1
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        log.warning("Invalid %s %r, using 1", name, value)
        return 1
    return value


def to_cell_input(raw: Any) -> CellInput:
    """Classify a raw cell value."""
    if isinstance(raw, Mapping):
        return Rich(
            content=raw.get("content"),
            col_span=_span(raw, "col_span"),
            row_span=_span(raw, "row_span"),
            styles=dict(raw.get("styles") or {}),
            raw=raw,
        )
    return Scalar(raw)


class Positional:
    """A row given as a sequence of cell values."""

    def __init__(self, raw: Sequence[Any]) -> None:
        """Classify each cell of a positional row."""
        self.raw = raw
        self.cells = [to_cell_input(value) for value in raw]

    def get(self, position: int) -> CellInput | None:
        """Return the cell at a position, or ``None`` if the row is too short."""
        if 0 <= position < len(self.cells):
            return self.cells[position]
        return None

    def keys(self) -> Iterator[int]:
        """Iterate over the positions in the row."""
        return iter(range(len(self.cells)))

    def __len__(self) -> int:
        """Return the number of values in the row."""
        return len(self.cells)

    def __repr__(self) -> str:
        """Return a textual representation of the row."""
        return f"{self.__class__.__name__}({self.cells!r})"


class Keyed:
    """A row given as a mapping from column keys to cell values."""

    def __init__(self, raw: Mapping[Hashable, Any]) -> None:
        """Classify each cell of a keyed row."""
        self.raw = raw
        self.cells = {
            key: to_cell_input(value)
            for key, value in raw.items()
            if key != ELEMENT_KEY
        }

    def get(self, key: Hashable) -> CellInput | None:
        """Return the cell for a key, or ``None`` if the row lacks the key.

        Integer keys also match their string form, as found in rows loaded from
        JSON.
        """
        cell = self.cells.get(key)
        if cell is None and isinstance(key, int) and not isinstance(key, bool):
            cell = self.cells.get(str(key))
        return cell

    def keys(self) -> Iterator[Hashable]:
        """Iterate over the keys in the row."""
        return iter(self.cells)

    def __len__(self) -> int:
        """Return the number of values in the row."""
        return len(self.cells)

    def __repr__(self) -> str:
        """Return a textual representation of the row."""
        return f"{self.__class__.__name__}({self.cells!r})"


RowInput = Union[Positional, Keyed]


def to_row_input(raw: Any) -> RowInput:
    """Classify a raw row."""
    if isinstance(raw, (Positional, Keyed)):
        return raw
    if isinstance(raw, Mapping):
        return Keyed(raw)
    return Positional(list(raw or []))
