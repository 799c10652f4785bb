"""
Decorator for running a function inside its own logical thread.
"""

from functools import wraps
from typing import Callable, Optional

from .loggers import Logger
from .manager import get_logger


def logged(logger: Optional[Logger] = None) -> Callable:
    """Run the decorated function inside a fresh LoggerThread.

    Entry and completion are logged at debug level, a failure is logged as
    an error and re-raised, and the thread is always ended.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            with (logger or get_logger()).start_thread() as thread:
                thread.debug(f"Calling {func.__name__}")
                result = func(*args, **kwargs)
                thread.debug(f"Completed {func.__name__}")
                return result
        return wrapper
    return decorator
