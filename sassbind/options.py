"""Compilation options and their marshaling into the libsass options record."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict

from .errors import InvalidOptionError, InvariantViolationError, OptionTypeError

INCLUDE_PATH_SEPARATOR = ":"
"""Separator libsass expects between entries of its include path string."""


class OutputStyle(str, Enum):
    """Formatting modes for the generated CSS.

    Each member's value is the label accepted by :class:`Options`; :attr:`ordinal` is the
    matching ``SASS_STYLE_*`` constant of libsass.
    """

    NESTED = "nested"
    EXPANDED = "expanded"
    COMPACT = "compact"
    COMPRESSED = "compressed"

    @property
    def ordinal(self) -> int:
        return _STYLE_ORDINALS[self]

    @classmethod
    def from_label(cls, label: str) -> "OutputStyle":
        """Look up a style by its exact label.

        Raises
        ------
        InvalidOptionError
            If ``label`` is not one of the four known labels.
        """
        for style in cls:
            if style.value == label:
                return style
        raise InvalidOptionError(
            f"invalid output_style option: {label!r}; expected one of "
            f"{', '.join(repr(style.value) for style in cls)}"
        )

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "OutputStyle":
        """Look up a style by its libsass constant.

        Raises
        ------
        InvariantViolationError
            If ``ordinal`` matches no known constant.
        """
        for style, value in _STYLE_ORDINALS.items():
            if value == ordinal:
                return style
        raise InvariantViolationError(f"output_style is invalid ({ordinal})")


_STYLE_ORDINALS = {
    OutputStyle.NESTED: 0,
    OutputStyle.EXPANDED: 1,
    OutputStyle.COMPACT: 2,
    OutputStyle.COMPRESSED: 3,
}


class NativeOptions(BaseModel):
    """The flat options record handed to libsass, mirroring ``struct sass_options``."""

    model_config = ConfigDict(frozen=True, use_attribute_docstrings=True)

    output_style: int
    """One of the ``SASS_STYLE_*`` constants."""
    include_paths: str
    """Include directories joined with ``INCLUDE_PATH_SEPARATOR``."""
    image_path: str
    """Directory that ``image-url()`` references are resolved against."""


def join_include_paths(paths: Union[str, Sequence[str]]) -> str:
    """Join include paths into the single string libsass consumes.

    A string is taken as already joined and returned unchanged. A sequence is joined with
    ``INCLUDE_PATH_SEPARATOR`` in order; an empty sequence gives an empty string.

    Raises
    ------
    OptionTypeError
        If ``paths`` is None, is neither a string nor a sequence, or holds a non-string item.
    """
    if paths is None:
        raise OptionTypeError("include_paths must not be None")
    if isinstance(paths, str):
        return paths
    if isinstance(paths, (bytes, bytearray)) or not isinstance(paths, Sequence):
        raise OptionTypeError("include_paths must be a string or a sequence of strings")
    for i, path in enumerate(paths):
        if not isinstance(path, str):
            raise OptionTypeError(
                f"include_paths must consist of only strings, but #{i} is not a string"
            )
    return INCLUDE_PATH_SEPARATOR.join(paths)


def split_include_paths(joined: str) -> List[str]:
    """Split a joined include path string back into its entries.

    Only non-empty segments are emitted, so leading, trailing and doubled separators produce
    no empty entries: ``":/a"`` reads back as ``["/a"]``.
    """
    return [path for path in joined.split(INCLUDE_PATH_SEPARATOR) if path]


class Options:
    """The object which contains compilation options.

    Options are validated on construction and are read-only afterwards.

    Parameters
    ----------
    output_style : str
        One of ``"nested"``, ``"expanded"``, ``"compact"`` or ``"compressed"``.
    include_paths : Union[str, Sequence[str]]
        Directories searched for imported partials, either as a list or as a string already
        joined with ``":"``.
    image_path : str
        The path to find images. Not checked for existence.

    Raises
    ------
    InvalidOptionError
        If ``output_style`` is not a known label.
    OptionTypeError
        If any argument has the wrong type.

    Examples
    --------
    >>> opts = Options(output_style="compact", include_paths=["/a", "/b"], image_path="img")
    >>> opts.include_paths
    ['/a', '/b']
    """

    __slots__ = ("_native",)

    _native: NativeOptions

    def __init__(
        self, output_style: str, include_paths: Union[str, Sequence[str]], image_path: str
    ) -> None:
        if not isinstance(output_style, str):
            raise OptionTypeError(
                f"output_style must be a string, not {type(output_style).__name__}"
            )
        style = OutputStyle.from_label(output_style)
        joined = join_include_paths(include_paths)
        if not isinstance(image_path, str):
            raise OptionTypeError(f"image_path must be a string, not {type(image_path).__name__}")
        native = NativeOptions(
            output_style=style.ordinal, include_paths=joined, image_path=image_path
        )
        object.__setattr__(self, "_native", native)

    @property
    def output_style(self) -> str:
        """The string value of output style option."""
        return OutputStyle.from_ordinal(self._native.output_style).value

    @property
    def include_paths(self) -> List[str]:
        """The list of paths to include."""
        return split_include_paths(self._native.include_paths)

    @property
    def image_path(self) -> str:
        """The path to find images."""
        return self._native.image_path

    @property
    def native(self) -> NativeOptions:
        """The record passed to libsass."""
        return self._native

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only; cannot delete {name!r}")

    def __reduce__(self):
        return (
            type(self),
            (self.output_style, self._native.include_paths, self._native.image_path),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return self._native == other._native

    def __hash__(self) -> int:
        return hash(
            (self._native.output_style, self._native.include_paths, self._native.image_path)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(output_style={self.output_style!r}, "
            f"include_paths={self.include_paths!r}, image_path={self.image_path!r})"
        )
