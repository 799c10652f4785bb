"""
Threadlog exception hierarchy.

Exception Hierarchy:
    ThreadlogError (base)
    ├── ConfigurationError
    │   ├── InvalidLogLevelError
    │   └── InvalidTransportError
    └── TransportError

Only configuration errors ever reach callers. TransportError is raised by
individual transports and swallowed by the dispatcher so that one broken
sink never affects the others.
"""

from typing import Any, Iterable, Optional


class ThreadlogError(Exception):
    """Base exception for all threadlog errors."""

    def __init__(self, message: str, help_text: Optional[str] = None):
        self.message = message
        self.help_text = help_text
        super().__init__(message)

    def __str__(self) -> str:
        if self.help_text:
            return f"{self.message}\n\nHelp: {self.help_text}"
        return self.message


class ConfigurationError(ThreadlogError):
    """Base exception for construction-time configuration problems."""


class InvalidLogLevelError(ConfigurationError, ValueError):
    """Raised when a log call names a level outside the closed set."""

    def __init__(self, level: Any, valid: Iterable[str]):
        self.level = level
        self.valid = tuple(valid)
        message = f"Invalid log level: {level!r}"
        help_text = f"Use one of: {', '.join(self.valid)}"
        super().__init__(message, help_text)


class InvalidTransportError(ConfigurationError, TypeError):
    """Raised when a transport spec is neither a path nor a live connection."""

    def __init__(self, transport: Any):
        self.transport = transport
        message = f"Unsupported transport: {type(transport).__name__}"
        help_text = (
            "Pass a file path, an object exposing 'connected' and "
            "'emit(event, data)', or a Transport instance"
        )
        super().__init__(message, help_text)


class TransportError(ThreadlogError):
    """Raised when a single transport fails to write a record."""

    def __init__(self, transport: Any, reason: str):
        self.transport = transport
        self.reason = reason
        super().__init__(f"Transport {transport!r} failed: {reason}")
