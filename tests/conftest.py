"""
Pytest configuration and shared fixtures for threadlog tests.
"""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from threadlog import Logger, ThreadIdAllocator
from threadlog import manager as manager_mod


class FakeConnection:
    """Stand-in for a socket.io client: records every emit."""

    def __init__(self, connected=True):
        self.connected = connected
        self.emitted = []

    def emit(self, event, data):
        self.emitted.append((event, data))


class BrokenConnection(FakeConnection):
    """A connection that claims to be up but fails on emit."""

    def emit(self, event, data):
        raise ConnectionResetError("peer went away")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def plain_console():
    """A rich console writing uncolored output to a buffer."""
    return Console(
        file=io.StringIO(), color_system=None, width=200,
        highlight=False, markup=False, emoji=False,
    )


@pytest.fixture
def color_console():
    """A rich console that always emits ANSI color codes to a buffer."""
    return Console(
        file=io.StringIO(), force_terminal=True, color_system="standard",
        no_color=False, width=200, highlight=False, markup=False, emoji=False,
    )


@pytest.fixture
def allocator():
    """A fresh thread id allocator, so ids start at 0x1 in every test."""
    return ThreadIdAllocator()


@pytest.fixture
def make_logger(plain_console, allocator):
    """Factory for loggers writing to the plain console."""
    def _make(transports=None, debug_mode=False, **kwargs):
        kwargs.setdefault("console", plain_console)
        kwargs.setdefault("ids", allocator)
        return Logger(transports, debug_mode, **kwargs)
    return _make


@pytest.fixture
def connection():
    return FakeConnection()


@pytest.fixture
def broken_connection():
    return BrokenConnection()


@pytest.fixture(autouse=True)
def _reset_default_logger():
    """Keep the process-wide default Logger from leaking between tests."""
    manager_mod.reset_logger()
    yield
    manager_mod.reset_logger()
