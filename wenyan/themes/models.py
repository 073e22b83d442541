"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class Platform(str, Enum):
    """Publishing destinations, in menu order."""

    GZH = "gzh"
    TOUTIAO = "toutiao"
    ZHIHU = "zhihu"
    JUEJIN = "juejin"
    MEDIUM = "medium"


class ThemeStyle(str, Enum):
    """Built-in themes. The value is the bundled stylesheet path."""

    GZH_DEFAULT = "themes/gzh_default.css"
    TOUTIAO_DEFAULT = "themes/toutiao_default.css"
    ZHIHU_DEFAULT = "themes/zhihu_default.css"
    JUEJIN_DEFAULT = "themes/juejin_default.css"
    MEDIUM_DEFAULT = "themes/medium_default.css"
    ORANGE_HEART = "themes/orangeheart.css"
    RAINBOW = "themes/rainbow.css"
    LAPIS = "themes/lapis.css"
    PIE = "themes/pie.css"
    MAIZE = "themes/maize.css"
    PURPLE = "themes/purple.css"


class HighlightStyle(str, Enum):
    """Code block highlight stylesheets."""

    IDEA = "highlight/styles/idea.min.css"
    MONOKAI = "highlight/styles/monokai.min.css"
    GITHUB = "highlight/styles/github.min.css"


class PreviewMode(str, Enum):
    """Preview viewport. The value is the base stylesheet for that layout."""

    MOBILE = "style.css"
    DESKTOP = "desktop_style.css"


class ThemeType(str, Enum):
    BUILTIN = "builtin"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class ThemeMetadata:
    """Display metadata for a built-in theme."""

    name: str
    author: str


@dataclass(frozen=True, slots=True)
class CustomTheme:
    """A user-authored theme record.

    Records compare and hash by ``theme_id`` alone, so a renamed or edited
    theme is still the same theme.
    """

    theme_id: str
    name: str | None = field(default=None, compare=False)
    content: str = field(default="", compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class BuiltinSelection:
    """A selection of one of the bundled themes."""

    kind: ClassVar[ThemeType] = ThemeType.BUILTIN

    style: ThemeStyle


@dataclass(frozen=True, slots=True)
class CustomSelection:
    """A selection of a user-authored theme."""

    kind: ClassVar[ThemeType] = ThemeType.CUSTOM

    theme: CustomTheme


ThemeSelection = Union[BuiltinSelection, CustomSelection]


@dataclass(frozen=True, slots=True)
class StylesheetBundle:
    """The stylesheets a renderer stacks to display a document."""

    base: str
    theme: str
    highlight: str

    def combined(self) -> str:
        return "\n\n".join(part for part in (self.base, self.theme, self.highlight) if part)
