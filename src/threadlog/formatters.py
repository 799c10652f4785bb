"""
Formatters for the two renditions of every log call.

A call produces a display line for the terminal, colorized with rich styles
when the console supports color, and a plain-text record for transports.
The two are built independently so that terminal styling never leaks into
persisted output.
"""

import traceback
from datetime import datetime
from typing import Any, Optional

from rich.console import COLOR_SYSTEMS, Console
from rich.errors import StyleSyntaxError
from rich.style import Style

from .constants import (
    ANSI_ESCAPE_PATTERN,
    DEFAULT_TIMESTAMP_FORMAT,
    RECORD_SEPARATOR,
    THREAD_ID_STYLE,
    UNKNOWN_ERROR_MESSAGE,
)
from .levels import LogLevel


class TimestampFormatter:
    """Formats record timestamps with a strftime pattern."""

    def __init__(self, fmt: str = DEFAULT_TIMESTAMP_FORMAT):
        self.fmt = fmt

    def format(self, now: Optional[datetime] = None) -> str:
        return (now or datetime.now()).strftime(self.fmt)

    def __repr__(self) -> str:
        return f"TimestampFormatter({self.fmt!r})"


def strip_ansi(text: str) -> str:
    """Remove terminal color-control sequences from ``text``."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def resolve_style(color: Optional[str]) -> Optional[Style]:
    """Parse a rich color/style name, returning None when it is not valid."""
    if not color:
        return None
    try:
        return Style.parse(color)
    except StyleSyntaxError:
        return None


def paint(text: str, color: Optional[str], color_system: Optional[str]) -> str:
    """Wrap ``text`` in the ANSI codes of a rich color/style.

    Returns ``text`` as-is when the color is unknown or the console has no
    color system (not a terminal, NO_COLOR).
    """
    style = resolve_style(color)
    if style is None or color_system is None:
        return text
    return style.render(text, color_system=COLOR_SYSTEMS[color_system])


def format_display(
    message: str,
    level: LogLevel,
    color: Optional[str] = None,
    thread_id: Optional[str] = None,
    color_system: Optional[str] = None,
) -> str:
    """Build the interactive line: ``[TAG] [id ]message``.

    The message itself is never rewritten; escape sequences it already
    carries reach the terminal unchanged.
    """
    prefix = f"[{paint(level.tag, level.style, color_system)}]"
    if thread_id is not None:
        prefix += f" {paint(thread_id, THREAD_ID_STYLE, color_system)}"
    return f"{prefix} {paint(message, color, color_system)}"


def format_record(
    message: str,
    level: LogLevel,
    timestamp: str,
    thread_id: Optional[str] = None,
) -> str:
    """Build the transport record: ``[ts] - LEVEL - [id - ]message\\n``."""
    fields = [f"[{timestamp}]", level.tag]
    if thread_id is not None:
        fields.append(thread_id)
    fields.append(strip_ansi(message))
    return RECORD_SEPARATOR.join(fields) + "\n"


def create_console(**kwargs) -> Console:
    """Create the rich console used for interactive output (stdout)."""
    return Console(**kwargs)


def describe_error(err: Any) -> str:
    """Detailed text for an error: its traceback, else its message.

    Never raises; missing detail degrades to a placeholder.
    """
    if err is None:
        return UNKNOWN_ERROR_MESSAGE
    if isinstance(err, BaseException):
        detail = "".join(
            traceback.format_exception(type(err), err, err.__traceback__)
        ).rstrip("\n")
    else:
        detail = str(err)
    return detail or UNKNOWN_ERROR_MESSAGE
