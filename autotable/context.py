"""Hold the collaborators used while resolving a table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from autotable.config import get_theme
from autotable.measure import text_width

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping
    from typing import Any

# An A4 page width in points
DEFAULT_PAGE_WIDTH = 595.28


@dataclass
class BuildContext:
    """Explicit state threaded through a single table build.

    Attributes:
        measure: Returns the width of the widest of the given lines of text when
            rendered with the given style
        scale_factor: The host's rendering scale factor, used to scale default
            sizes
        theme_lookup: Returns the section styles of a named theme
        page_width: The width of the page the table will be drawn on

    """

    measure: Callable[[Iterable[str], Mapping[str, Any]], float] = text_width
    scale_factor: float = 1.0
    theme_lookup: Callable[[str], Mapping[str, Mapping[str, Any]]] = field(
        default=get_theme
    )
    page_width: float = DEFAULT_PAGE_WIDTH

    def get_theme(self, name: str) -> Mapping[str, Mapping[str, Any]]:
        """Return the styles of the named theme."""
        return self.theme_lookup(name)

    @property
    def default_min_width(self) -> float:
        """The minimum cell width used when a style sets none."""
        return 10 / self.scale_factor
