"""Timing utilities for the conversion pipeline.

Elapsed times are logged through the app logger. Nothing is measured when
the logger would discard the record anyway.
"""

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar

from blockpaste.logger import logger

__all__ = ["timeit", "timer"]

P = ParamSpec("P")
R = TypeVar("R")


@contextmanager
def timer(name: str = "Operation", log_level: int = logging.INFO) -> Iterator[None]:
    """Log how long the ``with`` body took, including when it raises.

    Args:
        name: Name of the operation being timed
        log_level: Logging level to use (default: INFO)

    Example:
        >>> with timer("Piece materialization", logging.DEBUG):
        ...     blocks = materializer.materialize(piece)

    """
    if not logger.isEnabledFor(log_level):
        yield
        return

    start_time = time.perf_counter()
    try:
        yield
    finally:
        logger.log(log_level, "%s took %.4f seconds", name, time.perf_counter() - start_time)


def timeit(
    name: str | None = None, log_level: int = logging.INFO
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Time every call of the decorated function with ``timer``.

    Args:
        name: Custom name for the operation (default: module and function name)
        log_level: Logging level to use (default: INFO)

    Example:
        >>> @timeit("Raw handling", logging.DEBUG)
        ... def convert(html):
        ...     ...

    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        operation_name = name or f"{func.__module__}.{func.__qualname__}"

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with timer(operation_name, log_level):
                return func(*args, **kwargs)
        return wrapper
    return decorator
