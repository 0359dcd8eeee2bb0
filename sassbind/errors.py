"""Exception hierarchy for the libsass binding.

Every error derives from :class:`SassBindError` and from the builtin exception of the same
category, so callers may catch either ``sassbind.errors.OptionTypeError`` or plain ``TypeError``.
"""

from __future__ import annotations

import re
from typing import Optional

_LOCATION_PATTERN = re.compile(r"on line (\d+)(?::(\d+))?")


class SassBindError(Exception):
    """Base class for all errors raised by sassbind."""


class InvalidOptionError(SassBindError, ValueError):
    """Raised when an option carries a value outside its allowed set."""


class OptionTypeError(SassBindError, TypeError):
    """Raised when an argument has the wrong type or shape."""


class AbstractContextError(SassBindError, TypeError):
    """Raised when the abstract :class:`~sassbind.context.BaseContext` is instantiated."""


class InvariantViolationError(SassBindError, ValueError):
    """Raised when stored state no longer satisfies an internal invariant."""


class CompileError(SassBindError, RuntimeError):
    """Raised when libsass fails to compile the input of a context.

    Attributes
    ----------
    message : str
        The error report produced by libsass.
    line : Optional[int]
        The 1-based line the error points at, if libsass reported one.
    column : Optional[int]
        The 1-based column the error points at, if libsass reported one.
    """

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    @classmethod
    def from_report(cls, report: str) -> "CompileError":
        """Build an error from a libsass report, extracting the source location if present.

        Parameters
        ----------
        report : str
            The message of a ``sass.CompileError``, e.g.
            ``'Error: Invalid CSS ...\\n        on line 1:4 of stdin\\n>> a {'``.

        Returns
        -------
        CompileError
            The structured error. ``line`` and ``column`` are ``None`` when the report does
            not name a location.
        """
        match = _LOCATION_PATTERN.search(report)
        if match is None:
            return cls(report)
        line = int(match.group(1))
        column = int(match.group(2)) if match.group(2) is not None else None
        return cls(report, line=line, column=column)

    def __str__(self) -> str:
        return self.message
