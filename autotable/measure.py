"""Measure the display width of cell text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_toolkit.utils import get_cwidth

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from typing import Any


def line_width(line: str) -> int:
    """Return the number of terminal character cells a line of text occupies.

    Takes double width characters into account.
    """
    return sum(get_cwidth(c) for c in line)


def text_width(lines: Iterable[str], styles: Mapping[str, Any] | None = None) -> float:
    """Calculate the width of the widest line of text.

    Text is measured in terminal character cells, so the font properties in
    ``styles`` do not change the result.

    Args:
        lines: The lines of text to measure
        styles: The resolved style of the cell holding the text

    Returns:
        The width of the widest line, or zero if there are no lines

    """
    return max((line_width(line) for line in lines), default=0)
