"""Tests for sassbind/context.py."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import sass

from sassbind import (
    AbstractContextError,
    BaseContext,
    CompileError,
    Context,
    FileContext,
    FolderContext,
    OptionTypeError,
    Options,
)


def test_base_context_cannot_be_instantiated():
    with pytest.raises(AbstractContextError, match="use one of sassbind.Context"):
        BaseContext()


def test_base_context_instantiation_is_type_error():
    with pytest.raises(TypeError):
        BaseContext(source="a {}")


def test_base_context_methods_raise_not_implemented():
    """Calling the abstract members directly redirects to the concrete contexts."""

    class Delegating(BaseContext):
        @property
        def options(self):
            return super().options

        def compile(self):
            return super().compile()

    ctx = Delegating()
    with pytest.raises(NotImplementedError, match="abstract interface"):
        ctx.compile()
    with pytest.raises(NotImplementedError, match="abstract interface"):
        ctx.options
    with pytest.raises(NotImplementedError):
        BaseContext.compile(object())
    with pytest.raises(NotImplementedError):
        BaseContext.options.fget(object())


def test_incomplete_subclass_cannot_be_instantiated():
    class OnlyCompile(BaseContext):
        def compile(self):
            return ""

    with pytest.raises(TypeError):
        OnlyCompile()


def test_context_compile(compressed_options):
    ctx = Context("a { b { color: red; } }", compressed_options)
    assert ctx.options is compressed_options
    assert "a b{color:red}" in ctx.compile()


def test_context_output_style_is_forwarded():
    opts = Options(output_style="expanded", include_paths=[], image_path="")
    css = Context("a { b { color: red; } }", opts).compile()
    assert "a b {\n  color: red;\n}" in css


def test_context_include_paths(tmp_path: Path):
    (tmp_path / "_vars.scss").write_text("$width: 10px;\n")
    opts = Options(output_style="compressed", include_paths=[str(tmp_path)], image_path="")
    css = Context('@import "vars";\ndiv { width: $width; }', opts).compile()
    assert "div{width:10px}" in css


def test_context_image_url(compressed_options):
    css = Context('div { background: image-url("logo.png"); }', compressed_options).compile()
    assert 'url("img/logo.png")' in css


def test_context_compile_error(compressed_options):
    ctx = Context("a { color: red;", compressed_options)
    with pytest.raises(CompileError) as excinfo:
        ctx.compile()
    assert isinstance(excinfo.value.__cause__, sass.CompileError)
    assert excinfo.value.message


def test_context_compile_error_is_logged(compressed_options, caplog):
    with caplog.at_level("WARNING", logger="sassbind"):
        with pytest.raises(CompileError):
            Context("a { color: red;", compressed_options).compile()
    assert "libsass failed to compile <string>" in caplog.text


def test_context_argument_types(compressed_options):
    with pytest.raises(OptionTypeError, match="source"):
        Context(b"a {}", compressed_options)
    with pytest.raises(OptionTypeError, match="options"):
        Context("a {}", {"output_style": "nested"})


def test_context_forwards_native_options():
    with patch.object(sass, "compile", return_value="css") as mock_compile:
        opts = Options(output_style="compact", include_paths="/a:/b", image_path="img")
        assert Context("a {}", opts).compile() == "css"
    kwargs = mock_compile.call_args.kwargs
    assert kwargs["string"] == "a {}"
    assert kwargs["output_style"] == "compact"
    assert kwargs["include_paths"] == ["/a", "/b"]
    assert kwargs["custom_functions"]["image-url"]("x.png") == 'url("img/x.png")'


def test_file_context_compile(scss_tree: Path, compressed_options):
    ctx = FileContext(scss_tree / "main.scss", compressed_options)
    assert ctx.filename == scss_tree / "main.scss"
    assert "a b{color:red}" in ctx.compile()


def test_file_context_accepts_str(scss_tree: Path, compressed_options):
    ctx = FileContext(str(scss_tree / "nested" / "page.scss"), compressed_options)
    assert "p{margin:0}" in ctx.compile()


def test_file_context_missing_file(tmp_path: Path, compressed_options):
    ctx = FileContext(tmp_path / "missing.scss", compressed_options)
    with pytest.raises(CompileError, match="does not exist"):
        ctx.compile()


def test_file_context_argument_types(compressed_options):
    with pytest.raises(OptionTypeError, match="filename"):
        FileContext(42, compressed_options)


def test_folder_context_compile(scss_tree: Path, tmp_path: Path, compressed_options):
    out = tmp_path / "out"
    ctx = FolderContext(scss_tree, out, compressed_options)
    assert ctx.compile() == str(out)
    assert "a b{color:red}" in (out / "main.css").read_text()
    assert "p{margin:0}" in (out / "nested" / "page.css").read_text()
    assert not (out / "_colors.css").exists()


def test_folder_context_missing_search_path(tmp_path: Path, compressed_options):
    ctx = FolderContext(tmp_path / "missing", tmp_path / "out", compressed_options)
    with pytest.raises(CompileError, match="does not exist"):
        ctx.compile()
    assert not (tmp_path / "out").exists()


def test_folder_context_compile_error(tmp_path: Path, compressed_options):
    src = tmp_path / "src"
    src.mkdir()
    (src / "broken.scss").write_text("a { color: red;\n")
    with pytest.raises(CompileError):
        FolderContext(src, tmp_path / "out", compressed_options).compile()


if __name__ == "__main__":
    pytest.main(sys.argv)
