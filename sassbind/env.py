"""Environment-variable configuration for sassbind."""

from __future__ import annotations

import logging
import os

_LOG_LEVEL_ENV = "SASSBIND_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = "WARNING"


def get_sassbind_log_level() -> str:
    """Get the log level name configured through ``SASSBIND_LOG_LEVEL``.

    Returns
    -------
    str
        The upper-cased level name. Defaults to ``"WARNING"`` when the variable is unset or
        empty.

    Raises
    ------
    ValueError
        If the variable names a level unknown to :mod:`logging`.
    """
    level = os.environ.get(_LOG_LEVEL_ENV, "").strip().upper() or _DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid {_LOG_LEVEL_ENV} '{level}'")
    return level
