"""Theme catalog, selection and storage exports."""

from wenyan.themes.models import (
    BuiltinSelection,
    CustomSelection,
    CustomTheme,
    HighlightStyle,
    Platform,
    PreviewMode,
    StylesheetBundle,
    ThemeMetadata,
    ThemeSelection,
    ThemeStyle,
)
from wenyan.themes.service import ThemeService
from wenyan.themes.store import CustomThemeStore

__all__ = [
    "BuiltinSelection",
    "CustomSelection",
    "CustomTheme",
    "CustomThemeStore",
    "HighlightStyle",
    "Platform",
    "PreviewMode",
    "StylesheetBundle",
    "ThemeMetadata",
    "ThemeSelection",
    "ThemeService",
    "ThemeStyle",
]
