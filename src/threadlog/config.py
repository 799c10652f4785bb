"""
Logger configuration.

Pydantic model describing the file transports, debug visibility and record
format of a Logger. Live connections are runtime objects and are passed to
``Logger.from_config`` separately.
"""

import re
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_STREAM_CHANNEL, DEFAULT_TIMESTAMP_FORMAT

_STRFTIME_DIRECTIVE = re.compile(r"%[a-zA-Z]")


class LoggerConfig(BaseModel):
    """Configuration for a Logger."""

    log_files: List[Path] = Field(
        default_factory=list, description="Log files, recreated on startup"
    )
    debug_mode: bool = Field(
        False, description="Show debug and thread lifecycle messages on screen"
    )
    timestamp_format: str = Field(
        DEFAULT_TIMESTAMP_FORMAT, description="strftime pattern for record timestamps"
    )
    channel: str = Field(
        DEFAULT_STREAM_CHANNEL, description="Event name used for live connections"
    )

    @field_validator("timestamp_format")
    @classmethod
    def validate_timestamp_format(cls, v: str) -> str:
        if not _STRFTIME_DIRECTIVE.search(v):
            raise ValueError(f"timestamp_format has no strftime directive: {v!r}")
        return v

    @field_validator("channel")
    @classmethod
    def validate_channel(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("channel must not be empty")
        return v
