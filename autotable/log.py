"""Initiate logging for autotable."""

from __future__ import annotations

import logging
import logging.config
import sys
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING

from prompt_toolkit.formatted_text.base import FormattedText
from prompt_toolkit.output.defaults import create_output
from prompt_toolkit.shortcuts.utils import print_formatted_text
from prompt_toolkit.styles.style import Style

from autotable.utils import dict_merge

if TYPE_CHECKING:
    from typing import Any, TextIO

    from prompt_toolkit.formatted_text.base import StyleAndTextTuples
    from prompt_toolkit.styles.base import BaseStyle

log = logging.getLogger(__name__)

LOG_STYLE = [
    ("log.level.notset", "fg:ansigray"),
    ("log.level.debug", "fg:ansigreen"),
    ("log.level.info", "fg:ansiblue"),
    ("log.level.warning", "fg:ansiyellow"),
    ("log.level.error", "fg:ansired"),
    ("log.level.critical", "fg:ansiwhite bg:ansired bold"),
    ("log.ref", "fg:grey"),
    ("log.date", "fg:#00875f"),
]


class StdoutFormatter(logging.Formatter):
    """A log formatter for formatting log entries for display on the standard output."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Create a new formatter instance."""
        super().__init__(*args, **kwargs)
        self.datefmt = self.datefmt or "%H:%M:%S"
        self.last_date: str | None = None

    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        """Format certain attributes on the log record."""
        record.asctime = self.formatTime(record, self.datefmt)
        record.message = record.getMessage()
        record.exc_text = ""
        if record.exc_info:
            record.exc_text = self.formatException(record.exc_info)
        return record

    def ft_format(self, record: logging.LogRecord, width: int = 80) -> FormattedText:
        """Format a log record as :py:class:`FormattedText`."""
        record = self.prepare(record)

        date = f"{record.asctime}"
        if date == self.last_date:
            date = " " * len(date)
        else:
            self.last_date = date
        ref = f"{record.name}.{record.funcName}:{record.lineno}"

        msg_pad = len(date) + 10
        msg_lines = textwrap.wrap(
            record.message, width=max(width - msg_pad, 20), replace_whitespace=False
        ) or [""]

        output: StyleAndTextTuples = [
            ("class:log.date", date),
            ("", " " * (9 - len(record.levelname))),
            (f"class:log.level.{record.levelname.lower()}", record.levelname),
            ("", " "),
            ("", msg_lines[0]),
            ("", " "),
            ("class:log.ref", ref),
        ]
        for line in msg_lines[1:]:
            output += [("", "\n"), ("", " " * msg_pad), ("", line)]
        if record.exc_text:
            output += [("", "\n"), ("", textwrap.indent(record.exc_text, " " * msg_pad))]
        output += [("", "\n")]
        return FormattedText(output)


class FormattedTextHandler(logging.StreamHandler):
    """Format log records for display on the standard output."""

    formatter: StdoutFormatter

    def __init__(
        self, stream: TextIO | None = None, style: BaseStyle | None = None
    ) -> None:
        """Create a new log handler instance."""
        super().__init__(stream)
        self.style = style or Style(LOG_STYLE)
        self.output = create_output(stdout=self.stream)

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a formatted record."""
        try:
            msg = self.formatter.ft_format(record, width=self.output.get_size()[1])
            print_formatted_text(
                msg,
                end="",
                style=self.style,
                output=self.output,
                include_default_pygments_style=False,
            )
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def setup_logs(
    level: str = "INFO",
    log_file: str | None = None,
    log_config: dict[str, Any] | None = None,
) -> None:
    """Configure the logger for autotable.

    Args:
        level: The minimum level of messages to log
        log_file: An optional file to which log messages are also written
        log_config: Additional :py:mod:`logging.config` settings merged over the
            defaults

    """
    level = level.upper()
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "file_format": {
                "format": "{asctime}.{msecs:03.0f} {levelname:<7} [{name}.{funcName}:{lineno}] {message}",
                "style": "{",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "stdout_format": {
                "()": StdoutFormatter,
            },
        },
        "handlers": {
            "stdout": {
                "level": level,
                "()": FormattedTextHandler,
                "formatter": "stdout_format",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "autotable": {
                "level": level,
                "handlers": ["stdout"],
                "propagate": False,
            },
        },
    }

    if log_file:
        config["handlers"]["file"] = {
            "level": level,
            "class": "logging.FileHandler",
            "filename": Path(log_file).expanduser(),
            "formatter": "file_format",
        }
        config["loggers"]["autotable"]["handlers"].append("file")

    if log_config:
        dict_merge(config, log_config)

    logging.config.dictConfig(config)

    # Capture warnings so they show up in the logs
    logging.captureWarnings(True)
