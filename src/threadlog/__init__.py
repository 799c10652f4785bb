"""
threadlog: multi-transport logging with tagged logical threads.

Messages are shown on the terminal (colorized through rich) and fanned out
as plain-text records to files and live connections. Related messages can
be grouped under a LoggerThread whose id tags every line it produces.

- levels: the closed LogLevel set with display tags and colors
- formatters: display lines, transport records, timestamps
- transports: file and live-connection sinks
- loggers: the Logger
- thread: LoggerThread and the thread id allocator
- config: pydantic LoggerConfig
- manager: the process-wide default Logger
- context: the @logged decorator
"""

__version__ = "0.1.0"

from .config import LoggerConfig
from .context import logged
from .exceptions import (
    ConfigurationError,
    InvalidLogLevelError,
    InvalidTransportError,
    ThreadlogError,
    TransportError,
)
from .formatters import TimestampFormatter, strip_ansi
from .levels import LogLevel
from .loggers import Logger
from .manager import configure_logger, get_logger, reset_logger
from .thread import LoggerThread, ThreadIdAllocator, ThreadState
from .transports import (
    FileTransport,
    LiveConnection,
    StreamTransport,
    Transport,
    create_transport,
)

__all__ = [
    "Logger",
    "LoggerThread",
    "LogLevel",
    "LoggerConfig",
    "configure_logger",
    "get_logger",
    "reset_logger",
    "logged",
    # Threads
    "ThreadIdAllocator",
    "ThreadState",
    # Transports
    "Transport",
    "FileTransport",
    "StreamTransport",
    "LiveConnection",
    "create_transport",
    # Formatting
    "TimestampFormatter",
    "strip_ansi",
    # Exceptions
    "ThreadlogError",
    "ConfigurationError",
    "InvalidLogLevelError",
    "InvalidTransportError",
    "TransportError",
]
