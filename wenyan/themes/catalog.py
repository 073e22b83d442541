"""Static catalog of platforms and the built-in themes they support."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from wenyan.themes.models import Platform, ThemeMetadata, ThemeStyle

_DEFAULT_NAME = "默认"

THEME_METADATA: Mapping[ThemeStyle, ThemeMetadata] = MappingProxyType({
    ThemeStyle.GZH_DEFAULT: ThemeMetadata(_DEFAULT_NAME, ""),
    ThemeStyle.TOUTIAO_DEFAULT: ThemeMetadata(_DEFAULT_NAME, ""),
    ThemeStyle.ZHIHU_DEFAULT: ThemeMetadata(_DEFAULT_NAME, ""),
    ThemeStyle.JUEJIN_DEFAULT: ThemeMetadata(_DEFAULT_NAME, ""),
    ThemeStyle.MEDIUM_DEFAULT: ThemeMetadata(_DEFAULT_NAME, ""),
    ThemeStyle.ORANGE_HEART: ThemeMetadata("Orange Heart", "evgo2017"),
    ThemeStyle.RAINBOW: ThemeMetadata("Rainbow", "thezbm"),
    ThemeStyle.LAPIS: ThemeMetadata("Lapis", "YiNN"),
    ThemeStyle.PIE: ThemeMetadata("Pie", "kevinzhao2233"),
    ThemeStyle.MAIZE: ThemeMetadata("Maize", "BEATREE"),
    ThemeStyle.PURPLE: ThemeMetadata("Purple", "hliu202"),
})

# First entry of each tuple is the platform default.
PLATFORM_THEMES: Mapping[Platform, tuple[ThemeStyle, ...]] = MappingProxyType({
    Platform.GZH: (
        ThemeStyle.GZH_DEFAULT,
        ThemeStyle.ORANGE_HEART,
        ThemeStyle.RAINBOW,
        ThemeStyle.LAPIS,
        ThemeStyle.PIE,
        ThemeStyle.MAIZE,
        ThemeStyle.PURPLE,
    ),
    Platform.TOUTIAO: (ThemeStyle.TOUTIAO_DEFAULT,),
    Platform.ZHIHU: (ThemeStyle.ZHIHU_DEFAULT,),
    Platform.JUEJIN: (ThemeStyle.JUEJIN_DEFAULT,),
    Platform.MEDIUM: (ThemeStyle.MEDIUM_DEFAULT,),
})


def list_platforms() -> tuple[Platform, ...]:
    return tuple(Platform)


def themes_for(platform: Platform) -> tuple[ThemeStyle, ...]:
    """Return the built-in themes offered for ``platform``, in display order."""
    return PLATFORM_THEMES[Platform(platform)]


def default_theme(platform: Platform) -> ThemeStyle:
    return themes_for(platform)[0]


def metadata(style: ThemeStyle) -> ThemeMetadata:
    return THEME_METADATA[ThemeStyle(style)]


def platforms_for_theme(style: ThemeStyle) -> tuple[Platform, ...]:
    """Return every platform whose theme list contains ``style``."""
    style = ThemeStyle(style)
    return tuple(platform for platform, styles in PLATFORM_THEMES.items() if style in styles)
