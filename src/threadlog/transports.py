"""
Transports: the persistent sinks a logger fans records out to.

Two variants share the single ``write(record)`` capability:

- FileTransport: appends UTF-8 lines to a file that is recreated when the
  owning logger is built.
- StreamTransport: publishes records to a live duplex connection (for
  example a socket.io client) under a fixed event name.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Protocol, Union, runtime_checkable

from .constants import DEFAULT_STREAM_CHANNEL
from .exceptions import InvalidTransportError, TransportError

logger = logging.getLogger(__name__)


@runtime_checkable
class LiveConnection(Protocol):
    """Shape of a connected peer: a readiness flag and an emit operation."""

    connected: bool

    def emit(self, event: str, data: Any) -> Any:
        ...


class Transport(ABC):
    """A sink for plain-text log records."""

    def prepare(self) -> None:
        """Called once when the owning logger is constructed."""

    @property
    def available(self) -> bool:
        return True

    @abstractmethod
    def write(self, record: str) -> None:
        """Deliver one record; raise TransportError on failure."""


class FileTransport(Transport):
    """Append-only UTF-8 log file."""

    def __init__(self, path: Union[str, os.PathLike]):
        self.path = Path(path)

    def prepare(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.path.exists():
            self.path.unlink()
        logger.debug(f"File transport ready (path={self.path})")

    def write(self, record: str) -> None:
        try:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(record)
        except OSError as e:
            raise TransportError(self, str(e)) from e

    def __repr__(self) -> str:
        return f"FileTransport({str(self.path)!r})"


class StreamTransport(Transport):
    """Live-connection transport; skipped while the peer is disconnected."""

    def __init__(self, connection: LiveConnection, channel: str = DEFAULT_STREAM_CHANNEL):
        self.connection = connection
        self.channel = channel

    @property
    def available(self) -> bool:
        return bool(getattr(self.connection, "connected", False))

    def write(self, record: str) -> None:
        if not self.available:
            return
        try:
            self.connection.emit(self.channel, record)
        except Exception as e:
            raise TransportError(self, str(e)) from e

    def __repr__(self) -> str:
        return f"StreamTransport({type(self.connection).__name__}, channel={self.channel!r})"


def create_transport(spec: Any, channel: str = DEFAULT_STREAM_CHANNEL) -> Transport:
    """Turn a transport spec (path, connection or Transport) into a Transport."""
    if isinstance(spec, Transport):
        return spec
    if isinstance(spec, (str, os.PathLike)):
        return FileTransport(spec)
    if isinstance(spec, LiveConnection):
        return StreamTransport(spec, channel)
    raise InvalidTransportError(spec)
