"""Tests for stylesheet loading and composition."""

from __future__ import annotations

from pathlib import Path

import pytest

from wenyan import runtime_paths
from wenyan.errors import ErrorCode, WenYanError
from wenyan.themes import selection as sel
from wenyan.themes.loader import (
    MemoryStylesheetLoader,
    ResourceStylesheetLoader,
    compose_stylesheets,
    stylesheet_for,
)
from wenyan.themes.models import CustomTheme, HighlightStyle, PreviewMode, ThemeStyle


def _memory_loader() -> MemoryStylesheetLoader:
    return MemoryStylesheetLoader({
        "style.css": "/* mobile */",
        "desktop_style.css": "/* desktop */",
        "themes/lapis.css": "/* lapis */",
        "highlight/styles/monokai.min.css": "/* monokai */",
    })


def test_resource_loader_reads_relative_path(tmp_path: Path) -> None:
    (tmp_path / "themes").mkdir()
    (tmp_path / "themes" / "pie.css").write_text("h1 { color: #ff7f50; }", encoding="utf-8")

    loader = ResourceStylesheetLoader(tmp_path)
    assert loader.load("themes/pie.css") == "h1 { color: #ff7f50; }"


def test_resource_loader_missing_file(tmp_path: Path) -> None:
    loader = ResourceStylesheetLoader(tmp_path)
    with pytest.raises(WenYanError) as excinfo:
        loader.load("themes/pie.css")
    assert excinfo.value.code is ErrorCode.RESOURCE_MISSING
    assert excinfo.value.message == "Required resource is missing"


@pytest.mark.parametrize("path", ["", "/etc/passwd", "../secret.css", "themes/../../x.css"])
def test_resource_loader_rejects_escaping_paths(tmp_path: Path, path: str) -> None:
    loader = ResourceStylesheetLoader(tmp_path)
    with pytest.raises(WenYanError) as excinfo:
        loader.load(path)
    assert excinfo.value.code is ErrorCode.PATH_INVALID


def test_resource_loader_rejects_symlinked_file(tmp_path: Path) -> None:
    outside = tmp_path / "outside.css"
    outside.write_text("body { color: red; }", encoding="utf-8")
    root = tmp_path / "resources"
    root.mkdir()
    (root / "link.css").symlink_to(outside)

    with pytest.raises(WenYanError) as excinfo:
        ResourceStylesheetLoader(root).load("link.css")
    assert excinfo.value.code is ErrorCode.PATH_INVALID


def test_resource_loader_rejects_symlinked_parent_directory(tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "x.css").write_text("body { color: red; }", encoding="utf-8")
    root = tmp_path / "resources"
    root.mkdir()
    (root / "themes").symlink_to(outside, target_is_directory=True)

    with pytest.raises(WenYanError) as excinfo:
        ResourceStylesheetLoader(root).load("themes/x.css")
    assert excinfo.value.code is ErrorCode.PATH_INVALID
    assert "outside the resource root" in excinfo.value.message


def test_resource_loader_enforces_size_limit(tmp_path: Path) -> None:
    (tmp_path / "big.css").write_text("a" * 64, encoding="utf-8")
    loader = ResourceStylesheetLoader(tmp_path, max_bytes=16)
    with pytest.raises(WenYanError) as excinfo:
        loader.load("big.css")
    assert excinfo.value.code is ErrorCode.FILE_TOO_LARGE


def test_bundled_resources_cover_catalog() -> None:
    loader = ResourceStylesheetLoader(runtime_paths.resources_root())
    for path in [*ThemeStyle, *HighlightStyle, *PreviewMode]:
        assert loader.load(path.value).strip()


def test_stylesheet_for_custom_uses_record_content() -> None:
    theme = CustomTheme("abc-123", content="p { margin: 0; }")
    assert stylesheet_for(sel.custom(theme), _memory_loader()) == "p { margin: 0; }"


def test_stylesheet_for_builtin_uses_loader() -> None:
    assert stylesheet_for(sel.builtin(ThemeStyle.LAPIS), _memory_loader()) == "/* lapis */"


def test_compose_stylesheets_orders_layers() -> None:
    bundle = compose_stylesheets(
        sel.builtin(ThemeStyle.LAPIS),
        HighlightStyle.MONOKAI,
        PreviewMode.DESKTOP,
        _memory_loader(),
    )
    assert bundle.base == "/* desktop */"
    assert bundle.theme == "/* lapis */"
    assert bundle.highlight == "/* monokai */"
    assert bundle.combined() == "/* desktop */\n\n/* lapis */\n\n/* monokai */"


def test_memory_loader_missing_resource() -> None:
    with pytest.raises(WenYanError) as excinfo:
        compose_stylesheets(
            sel.builtin(ThemeStyle.PIE),
            HighlightStyle.MONOKAI,
            PreviewMode.MOBILE,
            _memory_loader(),
        )
    assert excinfo.value.code is ErrorCode.RESOURCE_MISSING
    assert excinfo.value.details == {"resource": "themes/pie.css"}
