"""Uniform identity, naming and equality for built-in and custom theme selections."""

from __future__ import annotations

from typing import Iterable

from wenyan.themes import catalog
from wenyan.themes.constants import CUSTOM_ID_PREFIX
from wenyan.themes.models import (
    BuiltinSelection,
    CustomSelection,
    CustomTheme,
    ThemeSelection,
    ThemeStyle,
)


def builtin(style: ThemeStyle) -> BuiltinSelection:
    return BuiltinSelection(ThemeStyle(style))


def custom(theme: CustomTheme) -> CustomSelection:
    return CustomSelection(theme)


def equals(a: ThemeSelection, b: ThemeSelection) -> bool:
    """Return True when both selections refer to the same theme.

    A built-in selection never equals a custom one. Custom selections match on
    the record identity only, ignoring name and content.
    """
    if isinstance(a, BuiltinSelection):
        return isinstance(b, BuiltinSelection) and a.style is b.style
    if isinstance(a, CustomSelection):
        return isinstance(b, CustomSelection) and a.theme.theme_id == b.theme.theme_id
    raise _not_a_selection(a)


def display_name(selection: ThemeSelection) -> str:
    if isinstance(selection, BuiltinSelection):
        return catalog.metadata(selection.style).name
    if isinstance(selection, CustomSelection):
        return selection.theme.name or ""
    raise _not_a_selection(selection)


def author(selection: ThemeSelection) -> str:
    if isinstance(selection, BuiltinSelection):
        return catalog.metadata(selection.style).author
    if isinstance(selection, CustomSelection):
        return ""
    raise _not_a_selection(selection)


def stable_id(selection: ThemeSelection) -> str:
    """Return the persistent key for ``selection``.

    Built-in themes use their stylesheet path; custom themes are namespaced
    under ``custom/`` so the two kinds never collide.
    """
    if isinstance(selection, BuiltinSelection):
        return selection.style.value
    if isinstance(selection, CustomSelection):
        return f"{CUSTOM_ID_PREFIX}{selection.theme.theme_id}"
    raise _not_a_selection(selection)


def resolve_stable_id(value: str, custom_themes: Iterable[CustomTheme] = ()) -> ThemeSelection | None:
    """Turn a persisted stable id back into a selection.

    Returns None for unknown built-in paths and for custom ids with no live record.
    """
    if not value:
        return None
    if value.startswith(CUSTOM_ID_PREFIX):
        theme_id = value[len(CUSTOM_ID_PREFIX):]
        for theme in custom_themes:
            if theme.theme_id == theme_id:
                return CustomSelection(theme)
        return None
    try:
        return BuiltinSelection(ThemeStyle(value))
    except ValueError:
        return None


def _not_a_selection(value: object) -> TypeError:
    return TypeError(f"Expected a theme selection, got {type(value).__name__}")
