"""Create a resolved table model from user input."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from autotable.columns import get_table_columns
from autotable.config import (
    collect_hooks,
    default_config,
    merge_settings,
    merge_style_options,
    parse_user_arguments,
)
from autotable.context import BuildContext
from autotable.data_structures import to_di
from autotable.grid import build_grid
from autotable.hooks import run_did_parse_cell
from autotable.models import Table
from autotable.widths import (
    resolve_cell_width,
    resolve_column_widths,
    resolve_table_width,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

log = logging.getLogger(__name__)


def create_table(
    table_options: Mapping[str, Any],
    context: BuildContext,
    global_options: Mapping[str, Any] | None = None,
    document_options: Mapping[str, Any] | None = None,
) -> Table:
    """Create an empty table from the merged option layers.

    The theme is looked up once here. A missing or zero ``start_y`` places the
    table at the top margin.
    """
    layers = [global_options or {}, document_options or {}, table_options]
    settings = merge_settings(layers, context.scale_factor)
    margin = to_di(
        settings.get("margin"), default_config(context.scale_factor)["margin"]
    )
    return Table(
        settings=settings,
        styles=merge_style_options(layers),
        hooks=collect_hooks(layers),
        margin=margin,
        table_id=settings.get("table_id"),
        start_y=settings.get("start_y") or margin.top,
        theme=context.get_theme(settings["theme"]),
    )


def parse_input(
    *args: Any,
    context: BuildContext | None = None,
    global_options: Mapping[str, Any] | None = None,
    document_options: Mapping[str, Any] | None = None,
) -> Table:
    """Resolve user input into a sized and styled table.

    Args:
        args: Either a single mapping of table options, or the legacy
            ``(columns, body, options)`` form
        context: The collaborators used to measure text and look up themes
        global_options: Options applying to every table
        document_options: Options applying to every table in the document

    Returns:
        The resolved table

    """
    context = context or BuildContext()
    table = create_table(
        parse_user_arguments(args), context, global_options, document_options
    )

    table.columns = get_table_columns(table.settings)
    build_grid(table, context)
    run_did_parse_cell(table, lambda cell: resolve_cell_width(cell, context))
    resolve_column_widths(table)
    resolve_table_width(table, context)

    log.debug("Resolved %r", table)
    return table
