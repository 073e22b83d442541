"""Stylesheet loading for bundled resources and custom themes."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Mapping, Protocol

from wenyan.errors import ErrorCode, WenYanError
from wenyan.themes.constants import MAX_STYLESHEET_BYTES
from wenyan.themes.models import (
    BuiltinSelection,
    CustomSelection,
    HighlightStyle,
    PreviewMode,
    StylesheetBundle,
    ThemeSelection,
)


class StylesheetLoader(Protocol):
    """Anything that can turn a resource path into stylesheet text."""

    def load(self, path: str) -> str: ...


class ResourceStylesheetLoader:
    """Reads stylesheets from a resource directory on disk."""

    def __init__(self, root: Path, *, max_bytes: int = MAX_STYLESHEET_BYTES) -> None:
        self._root = root
        self._max_bytes = max_bytes

    @property
    def root(self) -> Path:
        return self._root

    def load(self, path: str) -> str:
        resource = self._resolve(path)
        if resource.is_symlink():
            raise WenYanError(
                ErrorCode.PATH_INVALID,
                message=f"Resource cannot be a symlink: {path}",
                path=resource,
            )
        # A symlinked parent directory can still point outside the root.
        if not resource.resolve().is_relative_to(self._root.resolve()):
            raise WenYanError(
                ErrorCode.PATH_INVALID,
                message=f"Resource is outside the resource root: {path}",
                path=resource,
            )
        if not resource.is_file():
            raise WenYanError(ErrorCode.RESOURCE_MISSING, path=resource)
        return read_text_limited(resource, max_bytes=self._max_bytes)

    def _resolve(self, path: str) -> Path:
        relative = PurePosixPath(path)
        if not path or relative.is_absolute() or ".." in relative.parts:
            raise WenYanError(
                ErrorCode.PATH_INVALID,
                message=f"Invalid resource path: {path!r}",
            )
        return self._root.joinpath(*relative.parts)


class MemoryStylesheetLoader:
    """Serves stylesheets from an in-memory mapping."""

    def __init__(self, stylesheets: Mapping[str, str]) -> None:
        self._stylesheets = dict(stylesheets)

    def load(self, path: str) -> str:
        try:
            return self._stylesheets[path]
        except KeyError:
            raise WenYanError(ErrorCode.RESOURCE_MISSING, details={"resource": path}) from None


def stylesheet_for(selection: ThemeSelection, loader: StylesheetLoader) -> str:
    """Return the theme stylesheet text for ``selection``."""
    if isinstance(selection, BuiltinSelection):
        return loader.load(selection.style.value)
    if isinstance(selection, CustomSelection):
        return selection.theme.content
    raise TypeError(f"Expected a theme selection, got {type(selection).__name__}")


def compose_stylesheets(
    selection: ThemeSelection,
    highlight: HighlightStyle,
    preview_mode: PreviewMode,
    loader: StylesheetLoader,
) -> StylesheetBundle:
    """Load the base, theme and highlight stylesheets for a render."""
    return StylesheetBundle(
        base=loader.load(PreviewMode(preview_mode).value),
        theme=stylesheet_for(selection, loader),
        highlight=loader.load(HighlightStyle(highlight).value),
    )


def read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise WenYanError(ErrorCode.RESOURCE_UNREADABLE, path=path, details={"original": str(exc)}) from exc
    if size > max_bytes:
        raise WenYanError(
            ErrorCode.FILE_TOO_LARGE,
            path=path,
            details={"size": size, "limit": max_bytes},
        )
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WenYanError(ErrorCode.RESOURCE_UNREADABLE, path=path, details={"original": str(exc)}) from exc
