from dataclasses import fields

import pytest

from gitlogue.colors import Color, Theme
from gitlogue.palettes_a_to_m import (
    ayu_dark,
    catppuccin,
    dracula,
    everforest,
    github_dark,
    gruvbox,
    material,
    monokai,
)


def test_every_colour_is_opaque_rgb():
    themes = [
        ayu_dark(),
        catppuccin(),
        dracula(),
        everforest(),
        github_dark(),
        gruvbox(),
        material(),
        monokai(),
    ]
    for theme in themes:
        for field in fields(Theme):
            color = getattr(theme, field.name)
            assert isinstance(color, Color)
            assert not color.is_reset(), field.name


@pytest.mark.parametrize(
    "factory, expected",
    [
        (ayu_dark, Color(15, 20, 25)),
        (catppuccin, Color(30, 30, 46)),
        (dracula, Color(40, 42, 54)),
        (everforest, Color(45, 52, 46)),
        (github_dark, Color(22, 27, 34)),
        (gruvbox, Color(40, 40, 40)),
        (material, Color(38, 50, 56)),
        (monokai, Color(39, 40, 34)),
    ],
)
def test_palette_is_stable_between_calls(factory, expected):
    first = factory()
    second = factory()
    assert first.background_right == expected
    assert second.background_right == expected


def test_stats_colours_match_tree_change_colours():
    themes = [
        ayu_dark(),
        catppuccin(),
        dracula(),
        everforest(),
        github_dark(),
        gruvbox(),
        material(),
        monokai(),
    ]
    for theme in themes:
        assert theme.file_tree_stats_added == theme.file_tree_added
        assert theme.file_tree_stats_deleted == theme.file_tree_deleted


def test_terminal_cursor_matches_editor_cursor_char():
    themes = [
        ayu_dark(),
        catppuccin(),
        dracula(),
        everforest(),
        github_dark(),
        gruvbox(),
        material(),
        monokai(),
    ]
    for theme in themes:
        assert theme.terminal_cursor_bg == theme.editor_cursor_char_bg
        assert theme.terminal_cursor_fg == theme.editor_cursor_char_fg
        assert theme.terminal_cursor_fg == theme.background_right


def test_transparent_variant_keeps_syntax_colours():
    themes = [
        ayu_dark(),
        catppuccin(),
        dracula(),
        everforest(),
        github_dark(),
        gruvbox(),
        material(),
        monokai(),
    ]
    for theme in themes:
        clear = theme.with_transparent_background()
        assert clear.background_left.is_reset()
        assert clear.background_right.is_reset()
        assert clear.syntax_keyword == theme.syntax_keyword
        assert clear.syntax_comment == theme.syntax_comment


def test_palettes_are_distinct():
    themes = [
        ayu_dark(),
        catppuccin(),
        dracula(),
        everforest(),
        github_dark(),
        gruvbox(),
        material(),
        monokai(),
    ]
    backgrounds = {theme.background_right for theme in themes}
    assert len(backgrounds) == len(themes)


def test_pinned_values_from_schemes():
    assert dracula().background_right == Color(40, 42, 54)
    assert ayu_dark().background_left == Color(10, 14, 20)
    assert monokai().syntax_keyword == Color(249, 38, 114)
    assert github_dark().status_hash == Color(219, 171, 9)


def test_material_uses_one_background_for_both_sides():
    theme = material()
    assert theme.background_left == theme.background_right == Color(38, 50, 56)