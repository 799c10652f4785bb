"""
Process-wide default Logger.

Applications typically build one Logger at startup and share it; this module
holds that instance so library code can reach it with ``get_logger()``.
"""

import logging
import threading
from typing import Any, Iterable, Optional

from .config import LoggerConfig
from .loggers import Logger

logger = logging.getLogger(__name__)

_default: Optional[Logger] = None
_lock = threading.Lock()


def configure_logger(
    config: Optional[LoggerConfig] = None,
    connections: Iterable[Any] = (),
    **overrides,
) -> Logger:
    """Build the default Logger and install it.

    ``overrides`` are LoggerConfig fields applied on top of ``config``.
    Threads still registered on a previously installed Logger are ended.
    """
    global _default

    config = config or LoggerConfig()
    if overrides:
        config = LoggerConfig(**{**config.model_dump(), **overrides})

    new_logger = Logger.from_config(config, connections)
    with _lock:
        previous, _default = _default, new_logger

    if previous is not None and previous.threads:
        ended = previous.end_all_threads()
        logger.debug(f"Ended threads of replaced logger (thread_ids={ended})")
    return new_logger


def get_logger() -> Logger:
    """Get the default Logger, creating a transport-less one if needed."""
    global _default
    with _lock:
        if _default is None:
            _default = Logger()
        return _default


def reset_logger() -> None:
    """Forget the default Logger (its threads are left as they are)."""
    global _default
    with _lock:
        _default = None
