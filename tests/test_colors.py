from dataclasses import FrozenInstanceError, fields

import pytest

from gitlogue.colors import Color, Theme


def _theme(color=Color(10, 20, 30)):
    return Theme(**{f.name: color for f in fields(Theme)})


def test_reset_color_is_reset():
    assert Color.RESET.is_reset()
    assert Color() == Color.RESET
    assert Color.RESET.rgb is None


def test_rgb_color_is_not_reset():
    color = Color(10, 14, 20)
    assert not color.is_reset()
    assert color.rgb == (10, 14, 20)


def test_colors_compare_by_value():
    assert Color(1, 2, 3) == Color(1, 2, 3)
    assert Color(1, 2, 3) != Color(3, 2, 1)
    assert len({Color(1, 2, 3), Color(1, 2, 3)}) == 1


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_out_of_range_channel_rejected(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_partial_channels_rejected():
    with pytest.raises(ValueError):
        Color(1, 2)


def test_non_int_channel_rejected():
    with pytest.raises(TypeError):
        Color(1.5, 2, 3)


def test_color_is_immutable():
    color = Color(1, 2, 3)
    with pytest.raises(FrozenInstanceError):
        color.r = 5
    assert color.rgb == (1, 2, 3)


def test_str_formats_hex_and_reset():
    assert str(Color(255, 0, 16)) == "#ff0010"
    assert str(Color.RESET) == "reset"


def test_transparent_background_clears_only_backgrounds():
    theme = _theme()
    clear = theme.with_transparent_background()
    assert clear.background_left.is_reset()
    assert clear.background_right.is_reset()
    for field in fields(Theme):
        if field.name.startswith("background_"):
            continue
        assert getattr(clear, field.name) == getattr(theme, field.name)


def test_transparent_background_leaves_original_untouched():
    theme = _theme()
    theme.with_transparent_background()
    assert not theme.background_left.is_reset()
    assert not theme.background_right.is_reset()


def test_theme_rejects_non_color_field():
    values = {f.name: Color(1, 2, 3) for f in fields(Theme)}
    values["separator"] = (1, 2, 3)
    with pytest.raises(TypeError):
        Theme(**values)


def test_theme_requires_every_field():
    values = {f.name: Color(1, 2, 3) for f in fields(Theme)}
    del values["syntax_label"]
    with pytest.raises(TypeError):
        Theme(**values)