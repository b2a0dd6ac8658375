"""Contains commonly used data structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import NamedTuple, Union


class DiFloat(NamedTuple):
    """A tuple of four numbers with directions."""

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    @classmethod
    def from_value(cls, value: float) -> DiFloat:
        """Construct an instance from a single value."""
        return cls(top=value, right=value, bottom=value, left=value)

    @property
    def horizontal(self) -> float:
        """The sum of the left and right values."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """The sum of the top and bottom values."""
        return self.top + self.bottom


AnyEdges = Union[DiFloat, float, Sequence[float], Mapping[str, float], None]


def to_di(value: AnyEdges, default: float = 0) -> DiFloat:
    """Convert a margin or padding specification to a :class:`DiFloat`.

    Accepts a single number, a CSS-like sequence of one to four numbers, or a
    mapping with any of the keys ``top``, ``right``, ``bottom``, ``left``,
    ``horizontal`` and ``vertical``. Unspecified edges take the default.

    Args:
        value: The margin or padding specification
        default: The value used for any edge which is not given

    Returns:
        The four resolved edge values

    """
    if isinstance(value, DiFloat):
        return value

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return DiFloat.from_value(value)

    if isinstance(value, Mapping):
        vertical = value.get("vertical")
        horizontal = value.get("horizontal")
        output = {}
        for direction, fallback in (
            ("top", vertical),
            ("right", horizontal),
            ("bottom", vertical),
            ("left", horizontal),
        ):
            edge = value.get(direction, fallback)
            output[direction] = default if edge is None else edge
        return DiFloat(**output)

    if isinstance(value, Sequence) and not isinstance(value, str):
        values = list(value)
        if len(values) == 1:
            return DiFloat.from_value(values[0])
        if len(values) == 2:
            return DiFloat(values[0], values[1], values[0], values[1])
        if len(values) == 3:
            return DiFloat(values[0], values[1], values[2], values[1])
        if len(values) >= 4:
            return DiFloat(*values[:4])

    return DiFloat.from_value(default)
