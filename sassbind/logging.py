"""Package-wide logging helpers.

All sassbind loggers are children of the ``sassbind`` logger. The library never configures the
root logger; applications opt in with :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from sassbind.env import get_sassbind_log_level

_ROOT_LOGGER_NAME = "sassbind"
_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return the sassbind logger for a component.

    Parameters
    ----------
    name : str
        Component name, e.g. ``"Context"``. It becomes ``sassbind.<name>``.
    """
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stream handler to the sassbind logger and set its level.

    Calling this more than once replaces the level but never adds a second handler.

    Parameters
    ----------
    level : Optional[Union[int, str]]
        Level number or name. If None, ``SASSBIND_LOG_LEVEL`` is used.

    Returns
    -------
    logging.Logger
        The configured ``sassbind`` logger.
    """
    global _handler

    if level is None:
        level = get_sassbind_log_level()
    elif isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
