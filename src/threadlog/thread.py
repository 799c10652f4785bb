"""
Logical threads: tagged sub-streams of a logger's output.

A LoggerThread is a lightweight handle for one unit of concurrent work. It
shares the transports of the Logger that created it and stamps every message
with its id so interleaved operations can be told apart in one stream.
"""

import logging
import threading
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from .constants import THREAD_ID_PREFIX, THREAD_ID_START
from .levels import LogLevel

if TYPE_CHECKING:
    from .loggers import Logger

logger = logging.getLogger(__name__)


class ThreadIdAllocator:
    """Hands out process-unique thread ids: 0x1, 0x2, ...

    The counter starts at 1 and is never reset or reused.
    """

    def __init__(self, start: int = THREAD_ID_START, prefix: str = THREAD_ID_PREFIX):
        self._next = start
        self._prefix = prefix
        self._lock = threading.Lock()

    def allocate(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return f"{self._prefix}{value:x}"

    def peek(self) -> str:
        """The id the next call to allocate() will return."""
        with self._lock:
            return f"{self._prefix}{self._next:x}"


# Shared by every Logger unless one is injected
default_allocator = ThreadIdAllocator()


class ThreadState(str, Enum):
    CREATED = "created"
    ACTIVE = "active"
    ENDED = "ended"


class LoggerThread:
    """Handle for one logical thread of a Logger.

    Created through ``Logger.start_thread()``; registers itself and emits a
    "started" lifecycle message immediately. ``end()`` is the only way to
    reach the terminal ENDED state. A LoggerThread must not outlive the
    Logger it came from.

    Usage::

        with logger.start_thread() as t:
            t.log("Fetching page")
            t.debug("cache miss")
    """

    def __init__(self, logger: "Logger"):
        self.state = ThreadState.CREATED
        self.logger = logger
        self.id = logger.ids.allocate()
        logger._register(self)
        self.state = ThreadState.ACTIVE

        self.logger.log(
            f"Started thread ID {self.id}",
            LogLevel.THREAD,
            silent=not self.logger.debug_mode,
            thread=self,
        )

    @property
    def active(self) -> bool:
        return self.state is ThreadState.ACTIVE

    def log(
        self,
        message: str,
        level: Union[LogLevel, str] = LogLevel.INFO,
        color: Optional[str] = None,
        silent: bool = False,
    ) -> str:
        """Log ``message`` tagged with this thread's id. Returns ``message``."""
        return self.logger.log(message, level, color=color, silent=silent, thread=self)

    def info(self, message: str) -> str:
        """Log info message."""
        return self.log(message, LogLevel.INFO)

    def init(self, message: str) -> str:
        """Log init message."""
        return self.log(message, LogLevel.INIT)

    def warn(self, message: str) -> str:
        """Log warning message."""
        return self.log(message, LogLevel.WARN)

    def debug(self, message: str) -> str:
        """Log debug message."""
        return self.logger.debug(message, thread=self)

    def error(self, err: BaseException) -> str:
        """Log error message."""
        return self.logger.error(err, thread=self)

    def end(self) -> None:
        """Emit the "ended" lifecycle message and leave the registry."""
        if self.state is ThreadState.ENDED:
            logger.debug(f"Thread already ended (thread_id={self.id})")
            return

        self.logger.log(
            f"Ended thread ID {self.id}",
            LogLevel.THREAD,
            silent=not self.logger.debug_mode,
            thread=self,
        )
        self.state = ThreadState.ENDED
        self.logger._unregister(self.id)

    def __enter__(self) -> "LoggerThread":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            if exc_value is not None:
                self.error(exc_value)
        finally:
            self.end()

    def __repr__(self) -> str:
        return f"<LoggerThread {self.id} {self.state.value}>"
