"""Compilation contexts: where the SASS input comes from and which options compile it."""

from __future__ import annotations

import os
import posixpath
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Union

import sass

from .errors import AbstractContextError, CompileError, OptionTypeError
from .logging import get_logger
from .options import Options, OutputStyle

logger = get_logger("Context")

PathLike = Union[str, os.PathLike]

_ABSTRACT_INIT_MESSAGE = (
    "the sassbind.BaseContext type cannot be instantiated because it's an abstract "
    "interface.  use one of sassbind.Context, sassbind.FileContext, or "
    "sassbind.FolderContext instead"
)
_ABSTRACT_CALL_MESSAGE = (
    "the sassbind.BaseContext type is an abstract interface.  use one of sassbind.Context, "
    "sassbind.FileContext, or sassbind.FolderContext instead"
)


def _make_image_url(image_path: str) -> Callable[[str], str]:
    """Create the ``image-url($path)`` SASS function bound to ``image_path``."""

    def image_url(path: str) -> str:
        path = str(path).strip("\"'")
        resolved = posixpath.join(image_path, path) if image_path else path
        return f'url("{resolved}")'

    return image_url


def _compile_kwargs(options: Options) -> Dict[str, Any]:
    """Translate options into keyword arguments of :func:`sass.compile`."""
    native = options.native
    return {
        "output_style": OutputStyle.from_ordinal(native.output_style).value,
        "include_paths": options.include_paths,
        "custom_functions": {"image-url": _make_image_url(native.image_path)},
    }


def _check_options(options: Any) -> Options:
    if not isinstance(options, Options):
        raise OptionTypeError(
            f"options must be a sassbind.Options, not {type(options).__name__}"
        )
    return options


class BaseContext(ABC):
    """The common interface between Context, FileContext, and FolderContext.

    The class itself cannot be instantiated; subclasses must override both :attr:`options`
    and :meth:`compile`.
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> "BaseContext":
        if cls is BaseContext:
            raise AbstractContextError(_ABSTRACT_INIT_MESSAGE)
        return super().__new__(cls)

    @property
    @abstractmethod
    def options(self) -> Options:
        """The compilation options for the context."""
        raise NotImplementedError(_ABSTRACT_CALL_MESSAGE)

    @abstractmethod
    def compile(self) -> str:
        """Compile the SASS input of the context.

        Returns
        -------
        str
            The generated CSS, or for folder contexts the output directory.

        Raises
        ------
        CompileError
            If libsass rejects the input or the input cannot be read.
        """
        raise NotImplementedError(_ABSTRACT_CALL_MESSAGE)

    def _run(self, label: str, **source: Any) -> Any:
        """Call libsass with ``source`` and this context's options, normalizing its errors."""
        kwargs = _compile_kwargs(self.options)
        logger.debug(
            "Compiling %s (output_style=%s, include_paths=%s)",
            label,
            kwargs["output_style"],
            kwargs["include_paths"],
        )
        try:
            return sass.compile(**source, **kwargs)
        except sass.CompileError as e:
            report = str(e)
            logger.warning("libsass failed to compile %s: %s", label, report)
            raise CompileError.from_report(report) from e


class Context(BaseContext):
    """Compiles a SASS source string.

    Parameters
    ----------
    source : str
        SCSS source text.
    options : Options
        The compilation options.
    """

    def __init__(self, source: str, options: Options) -> None:
        if not isinstance(source, str):
            raise OptionTypeError(f"source must be a string, not {type(source).__name__}")
        self._source = source
        self._options = _check_options(options)

    @property
    def source(self) -> str:
        return self._source

    @property
    def options(self) -> Options:
        return self._options

    def compile(self) -> str:
        return self._run("<string>", string=self._source)


class FileContext(BaseContext):
    """Compiles a single SASS file. The file is read when :meth:`compile` is called."""

    def __init__(self, filename: PathLike, options: Options) -> None:
        if not isinstance(filename, (str, os.PathLike)):
            raise OptionTypeError(
                f"filename must be a string or path, not {type(filename).__name__}"
            )
        self._filename = Path(filename)
        self._options = _check_options(options)

    @property
    def filename(self) -> Path:
        return self._filename

    @property
    def options(self) -> Options:
        return self._options

    def compile(self) -> str:
        if not self._filename.is_file():
            raise CompileError(f"{self._filename} does not exist or is not a file")
        return self._run(str(self._filename), filename=str(self._filename))


class FolderContext(BaseContext):
    """Compiles every stylesheet in a directory tree into an output directory.

    Partials (files whose name starts with ``_``) are only compiled through imports. Each
    ``search_path/sub/name.scss`` is written to ``output_path/sub/name.css``.

    Parameters
    ----------
    search_path : PathLike
        Directory holding the SASS sources.
    output_path : PathLike
        Directory the CSS files are written to. Created if missing when the search
        directory exists, and left in place if libsass then fails.
    options : Options
        The compilation options.
    """

    def __init__(self, search_path: PathLike, output_path: PathLike, options: Options) -> None:
        for name, value in (("search_path", search_path), ("output_path", output_path)):
            if not isinstance(value, (str, os.PathLike)):
                raise OptionTypeError(
                    f"{name} must be a string or path, not {type(value).__name__}"
                )
        self._search_path = Path(search_path)
        self._output_path = Path(output_path)
        self._options = _check_options(options)

    @property
    def search_path(self) -> Path:
        return self._search_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    @property
    def options(self) -> Options:
        return self._options

    def compile(self) -> str:
        """Compile the folder and return the output directory path."""
        if not self._search_path.is_dir():
            raise CompileError(f"{self._search_path} does not exist or is not a directory")
        self._output_path.mkdir(parents=True, exist_ok=True)
        self._run(
            str(self._search_path),
            dirname=(str(self._search_path), str(self._output_path)),
        )
        return str(self._output_path)
