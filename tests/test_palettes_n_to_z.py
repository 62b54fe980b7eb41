from dataclasses import fields

import pytest

from gitlogue.colors import Color, Theme
from gitlogue.palettes_n_to_z import (
    night_owl,
    nord,
    one_dark,
    rose_pine,
    solarized_dark,
    solarized_light,
    tokyo_night,
)


def test_every_colour_is_concrete_rgb():
    themes = [
        night_owl(),
        nord(),
        one_dark(),
        rose_pine(),
        solarized_dark(),
        solarized_light(),
        tokyo_night(),
    ]
    for theme in themes:
        colours = [getattr(theme, f.name) for f in fields(Theme)]
        assert all(isinstance(c, Color) and not c.is_reset() for c in colours)


@pytest.mark.parametrize(
    "factory, expected",
    [
        (night_owl, (1, 22, 39)),
        (nord, (46, 52, 64)),
        (one_dark, (40, 44, 52)),
        (rose_pine, (35, 33, 54)),
        (solarized_dark, (0, 43, 54)),
        (solarized_light, (253, 246, 227)),
        (tokyo_night, (26, 27, 38)),
    ],
)
def test_factory_is_deterministic(factory, expected):
    first = factory()
    second = factory()
    assert first.background_right.rgb == expected
    assert second.background_right.rgb == expected


def test_palettes_are_pairwise_distinct():
    themes = [
        night_owl(),
        nord(),
        one_dark(),
        rose_pine(),
        solarized_dark(),
        solarized_light(),
        tokyo_night(),
    ]
    for i, first in enumerate(themes):
        for second in themes[i + 1:]:
            assert first != second


def test_transparent_background_keeps_other_colours():
    themes = [
        night_owl(),
        nord(),
        one_dark(),
        rose_pine(),
        solarized_dark(),
        solarized_light(),
        tokyo_night(),
    ]
    for theme in themes:
        clear = theme.with_transparent_background()
        assert clear.background_left.is_reset()
        assert clear.background_right.is_reset()
        assert clear.syntax_keyword == theme.syntax_keyword
        assert clear.separator == theme.separator


def test_night_owl_uses_one_background_for_both_columns():
    theme = night_owl()
    assert theme.background_left == theme.background_right


def test_solarized_variants_share_accents():
    dark, light = solarized_dark(), solarized_light()
    for name in ("syntax_keyword", "syntax_string", "file_tree_added", "syntax_label"):
        assert getattr(dark, name) == getattr(light, name)


def test_solarized_light_background_is_brighter_than_dark():
    dark, light = solarized_dark(), solarized_light()
    assert sum(light.background_right.rgb) > sum(dark.background_right.rgb)


def test_cursor_foreground_matches_editor_background():
    for theme in (nord(), one_dark(), tokyo_night(), solarized_dark()):
        assert theme.editor_cursor_char_fg == theme.background_right


def test_pinned_values():
    assert tokyo_night().syntax_keyword.rgb == (187, 154, 247)
    assert nord().background_right.rgb == (46, 52, 64)