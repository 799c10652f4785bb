"""
Formatting constants shared by the logger and its threads.
"""

import re

# Record timestamps: long form is the default, short form is selectable
DEFAULT_TIMESTAMP_FORMAT = "%d-%m-%y %H:%M:%S"
SHORT_TIMESTAMP_FORMAT = "%H:%M:%S"

# Event name used when publishing records to live connections
DEFAULT_STREAM_CHANNEL = "logger"

# Thread ids render as 0x1, 0x2, ...
THREAD_ID_PREFIX = "0x"
THREAD_ID_START = 1
THREAD_ID_STYLE = "bright_magenta"

ERROR_STYLE = "bright_red"
UNKNOWN_ERROR_MESSAGE = "Unknown error"

RECORD_SEPARATOR = " - "

# CSI / escape sequences emitted by terminal colorizers
ANSI_ESCAPE_PATTERN = re.compile(
    r"[\u001b\u009b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]"
)
