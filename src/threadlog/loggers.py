"""
The Logger: formats leveled messages and fans them out.

Each call yields a display line written to the terminal through rich and a
plain-text record written to every transport. The two paths are independent:
a failing transport drops only its own copy of the record.
"""

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Union

from rich.console import Console

from .config import LoggerConfig
from .constants import DEFAULT_STREAM_CHANNEL, DEFAULT_TIMESTAMP_FORMAT, ERROR_STYLE
from .formatters import (
    TimestampFormatter,
    create_console,
    describe_error,
    format_display,
    format_record,
)
from .levels import LogLevel
from .thread import LoggerThread, ThreadIdAllocator, default_allocator
from .transports import Transport, create_transport

logger = logging.getLogger(__name__)


class Logger:
    """Multi-transport logger with tagged logical threads.

    Usage::

        log = Logger(["logs/app.log", sio], debug_mode=True)
        log.log("Listening on :8080", LogLevel.INIT)
        t = log.start_thread()
        t.log("Handling request")
        t.end()
    """

    def __init__(
        self,
        transports: Optional[Iterable[Any]] = None,
        debug_mode: bool = False,
        *,
        console: Optional[Console] = None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        ids: Optional[ThreadIdAllocator] = None,
        channel: str = DEFAULT_STREAM_CHANNEL,
    ):
        self.transports: List[Transport] = [
            create_transport(spec, channel) for spec in (transports or [])
        ]
        self.threads: Dict[str, LoggerThread] = {}
        self.debug_mode = bool(debug_mode)
        self.console = console or create_console()
        self.timestamp = TimestampFormatter(timestamp_format)
        self.ids = ids or default_allocator
        self._lock = threading.RLock()

        for transport in self.transports:
            transport.prepare()

    @classmethod
    def from_config(
        cls, config: LoggerConfig, connections: Iterable[Any] = (), **kwargs
    ) -> "Logger":
        """Build a Logger from a LoggerConfig plus live connections."""
        return cls(
            [*config.log_files, *connections],
            config.debug_mode,
            timestamp_format=config.timestamp_format,
            channel=config.channel,
            **kwargs,
        )

    def log(
        self,
        message: str,
        level: Union[LogLevel, str] = LogLevel.INFO,
        color: Optional[str] = None,
        silent: bool = False,
        thread: Optional[LoggerThread] = None,
    ) -> str:
        """Show ``message`` (unless silent) and write it to every transport.

        Returns ``message`` unchanged. Raises InvalidLogLevelError for a
        level outside LogLevel; never raises for output failures.
        """
        level = LogLevel.coerce(level)
        thread_id = thread.id if thread is not None else None

        if not silent:
            self._display(message, level, color, thread_id)

        if self.transports:
            record = format_record(message, level, self.timestamp.format(), thread_id)
            self._dispatch(record)

        return message

    def info(self, message: str) -> str:
        """Log info message."""
        return self.log(message, LogLevel.INFO)

    def init(self, message: str) -> str:
        """Log init message."""
        return self.log(message, LogLevel.INIT)

    def warn(self, message: str) -> str:
        """Log warning message."""
        return self.log(message, LogLevel.WARN)

    def debug(self, message: str, thread: Optional[LoggerThread] = None) -> str:
        """Debug message, shown on screen only in debug mode."""
        return self.log(
            message, LogLevel.DEBUG, silent=not self.debug_mode, thread=thread
        )

    def error(self, err: Any, thread: Optional[LoggerThread] = None) -> str:
        """Log an error's traceback (or message) in red."""
        return self.log(
            describe_error(err), LogLevel.ERROR, color=ERROR_STYLE, thread=thread
        )

    def start_thread(self) -> LoggerThread:
        """Create, register and return a new LoggerThread."""
        return LoggerThread(self)

    def end_all_threads(self) -> List[str]:
        """End every registered thread; returns the ids that were ended."""
        with self._lock:
            live = list(self.threads.values())

        ended = []
        for thread in live:
            thread.end()
            ended.append(thread.id)
        return ended

    def _register(self, thread: LoggerThread) -> None:
        with self._lock:
            self.threads[thread.id] = thread

    def _unregister(self, thread_id: str) -> None:
        with self._lock:
            self.threads.pop(thread_id, None)

    def _display(
        self,
        message: str,
        level: LogLevel,
        color: Optional[str],
        thread_id: Optional[str],
    ) -> None:
        console = self.console
        color_system = None if console.no_color else console.color_system
        line = format_display(message, level, color, thread_id, color_system)
        try:
            console.file.write(line + "\n")
            console.file.flush()
        except (OSError, ValueError) as e:
            logger.debug(f"Interactive output failed (error={e})")

    def _dispatch(self, record: str) -> None:
        for transport in self.transports:
            try:
                transport.write(record)
            except Exception as e:
                logger.debug(
                    f"Transport write failed, record dropped "
                    f"(transport={transport!r}, error={e})"
                )

    def __repr__(self) -> str:
        return (
            f"<Logger transports={len(self.transports)} "
            f"threads={len(self.threads)} debug_mode={self.debug_mode}>"
        )
