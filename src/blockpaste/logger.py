"""Logging for blockpaste.

The package only ever logs through ``logger``. It ships with a
``NullHandler`` so that host applications decide where records go;
``setup_logging`` is for scripts and debugging sessions that want output
without configuring logging themselves.
"""

import logging
import sys

from blockpaste.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "blockpaste-stderr"

logger = logging.getLogger("blockpaste")
logger.addHandler(logging.NullHandler())


def setup_logging(debug: bool | None = None) -> logging.Handler:
    """Send app log records to stderr.

    Calling it again replaces the handler installed by the previous call,
    so records are never emitted twice. The root logger is left alone.

    Args:
        debug: Log at DEBUG instead of INFO (default: ``BLOCKPASTE_DEBUG``).

    Returns:
        The installed handler.

    """
    if debug is None:
        debug = settings.blockpaste_debug

    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    level_name = "DEBUG" if debug else "INFO"
    logger.setLevel(level_name)
    logger.info("blockpaste logging initialized at %s level", level_name)
    return handler
