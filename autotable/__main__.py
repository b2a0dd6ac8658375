"""Main entry point into autotable."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

from autotable import __app_name__, __version__
from autotable.context import DEFAULT_PAGE_WIDTH, BuildContext
from autotable.log import setup_logs
from autotable.parse import parse_input

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Any

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Resolve table settings into a sized and styled table model.",
    )
    parser.add_argument(
        "settings",
        type=argparse.FileType("r"),
        help="A JSON file of table options, or - to read standard input",
    )
    parser.add_argument(
        "--scale-factor",
        type=float,
        default=1.0,
        help="The rendering scale factor used to scale default sizes",
    )
    parser.add_argument(
        "--page-width",
        type=float,
        default=DEFAULT_PAGE_WIDTH,
        help="The width of the page the table will be drawn on",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error", "critical"],
        help="The minimum level of messages to log",
    )
    parser.add_argument("--log-file", default=None, help="A file to write logs to")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Resolve a settings file and print the resolved table as JSON."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logs(args.log_level, args.log_file)

    with args.settings as f:
        try:
            options: Any = json.load(f)
        except json.JSONDecodeError as error:
            log.error("Could not parse settings file %s", f.name)
            parser.error(f"invalid JSON in {f.name}: {error}")
    if not isinstance(options, dict):
        parser.error("the settings file must contain a JSON object")

    context = BuildContext(scale_factor=args.scale_factor, page_width=args.page_width)
    table = parse_input(options, context=context)
    json.dump(table.to_dict(), sys.stdout, indent=args.indent, default=str)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
