"""
The closed set of log levels.

Each level carries its interactive tag and the rich style used to draw it.
"""

from enum import Enum
from typing import Union

from .exceptions import InvalidLogLevelError


class LogLevel(str, Enum):
    """Valid log levels."""

    INFO = "info"
    INIT = "init"
    DEBUG = "debug"
    ERROR = "error"
    WARN = "warn"
    THREAD = "thread"

    @property
    def tag(self) -> str:
        """Uppercase label used in both the display prefix and records."""
        return self.value.upper()

    @property
    def style(self) -> str:
        """Rich style name for the display tag."""
        return LEVEL_STYLES[self]

    @classmethod
    def coerce(cls, level: Union["LogLevel", str]) -> "LogLevel":
        """Return the member for ``level`` or raise InvalidLogLevelError."""
        if isinstance(level, cls):
            return level
        try:
            return cls(level)
        except ValueError:
            raise InvalidLogLevelError(level, [m.value for m in cls]) from None


LEVEL_STYLES = {
    LogLevel.INFO: "bright_green",
    LogLevel.INIT: "bright_white",
    LogLevel.DEBUG: "bright_cyan",
    LogLevel.ERROR: "bright_red",
    LogLevel.WARN: "bright_yellow",
    LogLevel.THREAD: "bright_magenta",
}
