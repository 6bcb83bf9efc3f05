"""Logging setup for applications embedding the client.

The library itself only creates module loggers; handlers are attached
on request by the application.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "sunk-stream"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the ``sunk`` logger.

    Calling this again only updates the level.

    Args:
        level: Minimum level to emit.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("sunk")
    logger.setLevel(level)

    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
