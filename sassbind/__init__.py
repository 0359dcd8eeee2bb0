"""The thin binding of libsass for Python."""

from sass import libsass_version

from sassbind.context import BaseContext, Context, FileContext, FolderContext
from sassbind.errors import (
    AbstractContextError,
    CompileError,
    InvalidOptionError,
    InvariantViolationError,
    OptionTypeError,
    SassBindError,
)
from sassbind.logging import configure_logging, get_logger
from sassbind.options import NativeOptions, Options, OutputStyle

__version__ = "0.1.0"

__all__ = [
    # Options
    "Options",
    "OutputStyle",
    "NativeOptions",
    # Contexts
    "BaseContext",
    "Context",
    "FileContext",
    "FolderContext",
    # Errors
    "SassBindError",
    "InvalidOptionError",
    "OptionTypeError",
    "AbstractContextError",
    "InvariantViolationError",
    "CompileError",
    "configure_logging",
    "get_logger",
    "libsass_version",
]
