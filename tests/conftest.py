from pathlib import Path

import pytest

from sassbind import Options


@pytest.fixture
def compressed_options() -> Options:
    """Options producing compressed CSS with no include paths."""
    return Options(output_style="compressed", include_paths=[], image_path="img")


@pytest.fixture
def scss_tree(tmp_path: Path) -> Path:
    """Create a small SCSS source tree with one partial and two stylesheets.

    Layout::

        src/_colors.scss
        src/main.scss
        src/nested/page.scss
    """
    src = tmp_path / "src"
    (src / "nested").mkdir(parents=True)
    (src / "_colors.scss").write_text("$primary: red;\n")
    (src / "main.scss").write_text('@import "colors";\na { b { color: $primary; } }\n')
    (src / "nested" / "page.scss").write_text("p { margin: 0; }\n")
    return src


@pytest.fixture(autouse=True)
def _clear_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of a SASSBIND_LOG_LEVEL set in the calling shell."""
    monkeypatch.delenv("SASSBIND_LOG_LEVEL", raising=False)
