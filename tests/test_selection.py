"""Tests for theme selection identity, naming and equality."""

from __future__ import annotations

from itertools import product

import pytest

from wenyan.themes import selection as sel
from wenyan.themes.models import CustomTheme, ThemeStyle, ThemeType


def test_builtin_equality_follows_style() -> None:
    for a, b in product(ThemeStyle, repeat=2):
        assert sel.equals(sel.builtin(a), sel.builtin(b)) is (a is b)


def test_custom_equality_ignores_name_and_content() -> None:
    first = CustomTheme("abc-123", name="Mine", content="h1 { color: red; }")
    renamed = CustomTheme("abc-123", name="Renamed", content="")
    other = CustomTheme("def-456", name="Mine", content="h1 { color: red; }")

    assert sel.equals(sel.custom(first), sel.custom(renamed))
    assert sel.custom(first) == sel.custom(renamed)
    assert not sel.equals(sel.custom(first), sel.custom(other))


def test_builtin_never_equals_custom() -> None:
    theme = CustomTheme("themes-gzh-default", name="默认")
    for style in ThemeStyle:
        assert not sel.equals(sel.builtin(style), sel.custom(theme))
        assert not sel.equals(sel.custom(theme), sel.builtin(style))
        assert sel.builtin(style) != sel.custom(theme)


def test_selection_kinds() -> None:
    assert sel.builtin(ThemeStyle.PIE).kind is ThemeType.BUILTIN
    assert sel.custom(CustomTheme("x")).kind is ThemeType.CUSTOM


def test_zhihu_default_selection() -> None:
    choice = sel.builtin(ThemeStyle.ZHIHU_DEFAULT)
    assert sel.display_name(choice) == "默认"
    assert sel.author(choice) == ""
    assert sel.stable_id(choice) == "themes/zhihu_default.css"


def test_unnamed_custom_selection() -> None:
    choice = sel.custom(CustomTheme("abc-123"))
    assert sel.display_name(choice) == ""
    assert sel.author(choice) == ""
    assert sel.stable_id(choice) == "custom/abc-123"


def test_custom_author_is_always_empty() -> None:
    assert sel.author(sel.custom(CustomTheme("a", name="Someone's theme"))) == ""


def test_builtin_author_comes_from_catalog() -> None:
    assert sel.author(sel.builtin(ThemeStyle.MAIZE)) == "BEATREE"
    assert sel.display_name(sel.builtin(ThemeStyle.MAIZE)) == "Maize"


def test_stable_ids_are_unique_across_kinds() -> None:
    customs = [CustomTheme("abc-123"), CustomTheme("themes"), CustomTheme("gzh-default")]
    ids = [sel.stable_id(sel.builtin(style)) for style in ThemeStyle]
    ids += [sel.stable_id(sel.custom(theme)) for theme in customs]
    assert len(ids) == len(set(ids))


def test_resolve_stable_id_round_trip() -> None:
    mine = CustomTheme("abc-123", name="Mine")
    assert sel.resolve_stable_id("themes/lapis.css") == sel.builtin(ThemeStyle.LAPIS)
    resolved = sel.resolve_stable_id("custom/abc-123", [mine])
    assert resolved == sel.custom(mine)
    assert sel.display_name(resolved) == "Mine"


def test_resolve_stable_id_unknown_values() -> None:
    assert sel.resolve_stable_id("") is None
    assert sel.resolve_stable_id("themes/missing.css") is None
    assert sel.resolve_stable_id("custom/gone", [CustomTheme("abc-123")]) is None


@pytest.mark.parametrize("accessor", [sel.display_name, sel.author, sel.stable_id])
def test_accessors_reject_non_selections(accessor) -> None:
    with pytest.raises(TypeError):
        accessor(ThemeStyle.PIE)


def test_equals_rejects_non_selection() -> None:
    with pytest.raises(TypeError):
        sel.equals("themes/pie.css", sel.builtin(ThemeStyle.PIE))


def test_selections_are_hashable() -> None:
    choices = {
        sel.builtin(ThemeStyle.PIE),
        sel.builtin(ThemeStyle.PIE),
        sel.custom(CustomTheme("a", name="one")),
        sel.custom(CustomTheme("a", name="two")),
    }
    assert len(choices) == 2
