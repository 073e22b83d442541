"""Runtime theme selection and persistence service."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from wenyan.errors import ErrorCode, WenYanError
from wenyan.themes import catalog, selection as sel
from wenyan.themes.loader import StylesheetLoader, compose_stylesheets
from wenyan.themes.models import (
    BuiltinSelection,
    CustomSelection,
    HighlightStyle,
    Platform,
    PreviewMode,
    StylesheetBundle,
    ThemeSelection,
)
from wenyan.themes.store import CustomThemeStore

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Track the active platform, theme and styles, and persist them."""

    theme_changed = Signal(str)
    platform_changed = Signal(str)

    def __init__(self, settings, store: CustomThemeStore, loader: StylesheetLoader) -> None:
        super().__init__()
        self._settings = settings
        self._store = store
        self._loader = loader
        self._platform = settings.platform
        self._selection: ThemeSelection = sel.builtin(catalog.default_theme(self._platform))

    @property
    def platform(self) -> Platform:
        return self._platform

    @property
    def selection(self) -> ThemeSelection:
        return self._selection

    @property
    def highlight_style(self) -> HighlightStyle:
        return self._settings.highlight_style

    @property
    def preview_mode(self) -> PreviewMode:
        return self._settings.preview_mode

    @property
    def store(self) -> CustomThemeStore:
        return self._store

    def reload_custom_themes(self) -> list[str]:
        self._store.reload()
        return self._store.load_errors()

    def available_themes(self, platform: Platform | None = None) -> list[ThemeSelection]:
        platform = self._platform if platform is None else Platform(platform)
        builtins: list[ThemeSelection] = [sel.builtin(style) for style in catalog.themes_for(platform)]
        customs: list[ThemeSelection] = [sel.custom(theme) for theme in self._store.list_themes()]
        return builtins + customs

    def set_platform(self, platform: Platform) -> None:
        platform = Platform(platform)
        if platform is self._platform:
            return
        self._switch_platform(platform)
        if not self._is_available(self._selection):
            self.select(sel.builtin(catalog.default_theme(platform)))

    def select(self, selection: ThemeSelection, *, persist: bool = True) -> tuple[bool, str]:
        if not isinstance(selection, (BuiltinSelection, CustomSelection)):
            raise TypeError(f"Expected a theme selection, got {type(selection).__name__}")
        if not self._is_available(selection):
            return False, f"Theme not available for {self._platform.value}: {sel.stable_id(selection)}"

        theme_id = sel.stable_id(selection)
        self._selection = selection
        if persist:
            self._settings.theme_id = theme_id
        self._settings.theme_last_known_good_id = theme_id
        self.theme_changed.emit(theme_id)
        return True, f"Selected theme: {sel.display_name(selection) or theme_id}"

    def select_by_id(
        self,
        theme_id: str,
        *,
        platform: Platform | None = None,
        persist: bool = True,
    ) -> tuple[bool, str]:
        """Select a theme by stable id, switching to ``platform`` first if given.

        Nothing is changed when the id is unknown or not offered on the target
        platform.
        """
        target = self._platform if platform is None else Platform(platform)
        selection = self._resolve(theme_id, target)
        if selection is None:
            return False, f"Theme not found for {target.value}: {theme_id}"
        if target is not self._platform:
            self._switch_platform(target)
        return self.select(selection, persist=persist)

    def set_highlight_style(self, style: HighlightStyle) -> None:
        self._settings.highlight_style = HighlightStyle(style)

    def set_preview_mode(self, mode: PreviewMode) -> None:
        self._settings.preview_mode = PreviewMode(mode)

    def apply_startup_selection(self) -> tuple[bool, str]:
        requested = self._settings.theme_id
        fallback = self._settings.theme_last_known_good_id
        candidates = [requested, fallback]
        seen: set[str] = set()

        for candidate in candidates:
            if not candidate or candidate in seen:
                continue
            seen.add(candidate)
            ok, message = self.select_by_id(candidate, persist=True)
            if ok:
                return True, message
            logger.warning("could not restore theme %s: %s", candidate, message)

        default = sel.builtin(catalog.default_theme(self._platform))
        self.select(default, persist=True)
        return False, "No saved theme could be restored; using the platform default."

    def delete_custom_theme(self, theme_id: str) -> None:
        self._store.delete_theme(theme_id)
        current = self._selection
        if isinstance(current, CustomSelection) and current.theme.theme_id == theme_id:
            self.select(sel.builtin(catalog.default_theme(self._platform)))

    def current_stylesheets(self) -> StylesheetBundle:
        return self.preview_stylesheets()

    def preview_stylesheets(
        self,
        *,
        platform: Platform | None = None,
        theme_id: str | None = None,
        highlight: HighlightStyle | None = None,
        preview_mode: PreviewMode | None = None,
    ) -> StylesheetBundle:
        """Compose stylesheets for the given overrides without touching saved state.

        Unset arguments fall back to the active platform, selection, highlight
        style and preview mode.
        """
        target = self._platform if platform is None else Platform(platform)
        if theme_id is not None:
            selection = self._resolve(theme_id, target)
            if selection is None:
                raise WenYanError(
                    ErrorCode.THEME_NOT_FOUND,
                    message=f"Theme not found for {target.value}: {theme_id}",
                )
        elif self._is_available(self._selection, target):
            selection = self._selection
        else:
            selection = sel.builtin(catalog.default_theme(target))

        if isinstance(selection, CustomSelection):
            # The record may have been edited since it was selected.
            latest = self._store.get_theme(selection.theme.theme_id)
            if latest is not None:
                selection = sel.custom(latest)
        try:
            return compose_stylesheets(
                selection,
                self.highlight_style if highlight is None else HighlightStyle(highlight),
                self.preview_mode if preview_mode is None else PreviewMode(preview_mode),
                self._loader,
            )
        except WenYanError:
            logger.exception("failed to load stylesheets for %s", sel.stable_id(selection))
            raise

    def _switch_platform(self, platform: Platform) -> None:
        self._platform = platform
        self._settings.platform = platform
        self.platform_changed.emit(platform.value)

    def _resolve(self, theme_id: str, platform: Platform) -> ThemeSelection | None:
        selection = sel.resolve_stable_id(theme_id, self._store.list_themes())
        if selection is None or not self._is_available(selection, platform):
            return None
        return selection

    def _is_available(self, selection: ThemeSelection, platform: Platform | None = None) -> bool:
        if isinstance(selection, BuiltinSelection):
            return selection.style in catalog.themes_for(platform or self._platform)
        return self._store.get_theme(selection.theme.theme_id) is not None
