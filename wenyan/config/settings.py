"""Application settings via QSettings."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

from wenyan.errors import ErrorCode, WenYanError
from wenyan.themes.models import HighlightStyle, Platform, PreviewMode, ThemeStyle

DEFAULT_PLATFORM = Platform.GZH
DEFAULT_THEME_ID = ThemeStyle.GZH_DEFAULT.value
DEFAULT_HIGHLIGHT_STYLE = HighlightStyle.GITHUB
DEFAULT_PREVIEW_MODE = PreviewMode.MOBILE


class AppSettings:
    """Wraps QSettings for persistent app configuration.

    Pass ``path`` to keep settings in a standalone INI file instead of the
    platform's native store.
    """

    def __init__(self, path: Path | None = None) -> None:
        if path is None:
            self._qs = QSettings("WenYan", "WenYan")
        else:
            self._qs = QSettings(str(path), QSettings.Format.IniFormat)

    def sync(self) -> None:
        """Flush pending changes to storage, raising if they could not be written."""
        self._qs.sync()
        if self._qs.status() == QSettings.Status.AccessError:
            raise WenYanError(
                ErrorCode.CONFIG_PERMISSION_DENIED,
                path=Path(self._qs.fileName()),
            )

    # -- platform --

    @property
    def platform(self) -> Platform:
        raw = self._qs.value("ui/platform", DEFAULT_PLATFORM.value, type=str)
        try:
            return Platform((raw or "").strip().lower())
        except ValueError:
            return DEFAULT_PLATFORM

    @platform.setter
    def platform(self, value: Platform) -> None:
        self._qs.setValue("ui/platform", Platform(value).value)

    # -- theme --

    @property
    def theme_id(self) -> str:
        raw = self._qs.value("ui/theme_id", DEFAULT_THEME_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_THEME_ID

    @theme_id.setter
    def theme_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_THEME_ID
        self._qs.setValue("ui/theme_id", cleaned)

    @property
    def theme_last_known_good_id(self) -> str:
        raw = self._qs.value("ui/theme_last_known_good_id", DEFAULT_THEME_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_THEME_ID

    @theme_last_known_good_id.setter
    def theme_last_known_good_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_THEME_ID
        self._qs.setValue("ui/theme_last_known_good_id", cleaned)

    # -- code highlight --

    @property
    def highlight_style(self) -> HighlightStyle:
        raw = self._qs.value("ui/highlight_style", DEFAULT_HIGHLIGHT_STYLE.value, type=str)
        try:
            return HighlightStyle((raw or "").strip())
        except ValueError:
            return DEFAULT_HIGHLIGHT_STYLE

    @highlight_style.setter
    def highlight_style(self, value: HighlightStyle) -> None:
        self._qs.setValue("ui/highlight_style", HighlightStyle(value).value)

    # -- preview mode --

    @property
    def preview_mode(self) -> PreviewMode:
        raw = self._qs.value("ui/preview_mode", DEFAULT_PREVIEW_MODE.name.lower(), type=str)
        try:
            return PreviewMode[(raw or "").strip().upper()]
        except KeyError:
            return DEFAULT_PREVIEW_MODE

    @preview_mode.setter
    def preview_mode(self, value: PreviewMode) -> None:
        self._qs.setValue("ui/preview_mode", PreviewMode(value).name.lower())

    # -- custom themes --

    @property
    def custom_themes_dir(self) -> Path:
        raw = self._qs.value("themes/custom_dir", "", type=str)
        value = (raw or "").strip()
        path = Path(value) if value else self.app_data_dir / "themes"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @custom_themes_dir.setter
    def custom_themes_dir(self, value: Path | None) -> None:
        self._qs.setValue("themes/custom_dir", str(value) if value else "")

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        import os
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "wenyan"
