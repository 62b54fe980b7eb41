import pytest

from gitlogue.buffer import Block, Buffer, Line, Padding, Rect, Span, Style
from gitlogue.colors import Color
from gitlogue.selectable_paragraph import SelectableParagraph, blend, wrap_line

RED = Color(200, 10, 10)
BLUE = Color(10, 10, 200)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def plain(*texts):
    return [Line([Span(text)]) for text in texts]


def rows(buf):
    return [buf.row_text(y) for y in range(buf.area.y, buf.area.bottom)]


def texts(lines):
    return ["".join(span.text for span in line.spans) for line in lines]


def test_blend_full_opacity_is_foreground():
    assert blend(RED, 1.0, BLUE) == RED


def test_blend_zero_opacity_is_background():
    assert blend(RED, 0.0, BLUE) == BLUE


def test_blend_half():
    assert blend(Color(200, 100, 0), 0.5, BLACK) == Color(100, 50, 0)


def test_blend_reset_colours_pass_foreground_through():
    assert blend(RED, 0.3, Color.RESET) == RED
    assert blend(Color.RESET, 0.3, BLUE) == Color.RESET


@pytest.mark.parametrize("opacity", [0.25, 0.5, 0.75])
def test_blend_channels_lie_between(opacity):
    mixed = blend(RED, opacity, BLUE)
    for front, back, got in zip(RED.rgb, BLUE.rgb, mixed.rgb):
        assert min(front, back) <= got <= max(front, back)


def test_dim_opacity_without_selection():
    para = SelectableParagraph(plain("a"), dim_max_distance=3)
    assert para.dim_opacity(5) == 1.0


def test_dim_opacity_without_dimming():
    para = SelectableParagraph(plain("a"), selected_line=0)
    assert para.dim_opacity(5) == 1.0


def test_dim_opacity_centre_is_full():
    para = SelectableParagraph(plain("a"), selected_line=4, dim_max_distance=3)
    assert para.dim_opacity(4) == 1.0


def test_dim_opacity_reaches_minimum():
    para = SelectableParagraph(
        plain("a"), selected_line=4, dim_max_distance=3, dim_min_opacity=0.6
    )
    assert para.dim_opacity(7) == pytest.approx(0.6)
    assert para.dim_opacity(20) == pytest.approx(0.6)
    assert para.dim_opacity(1) == pytest.approx(0.6)


def test_dim_opacity_decreases_with_distance():
    para = SelectableParagraph(plain("a"), selected_line=0, dim_max_distance=5)
    values = [para.dim_opacity(i) for i in range(7)]
    assert values == sorted(values, reverse=True)
    assert values[1] < values[0]


def test_wrap_zero_width_returns_line():
    line = Line([Span("abcdef")])
    assert wrap_line(line, 0, 5) == [line]


def test_wrap_line_that_fits():
    assert wrap_line(Line([Span("abc")]), 5, 5) == [Line([Span("abc")])]


def test_wrap_uses_first_then_continuation_width():
    result = wrap_line(Line([Span("abcdefgh")]), 3, 5)
    assert result == [Line([Span("abc")]), Line([Span("defgh")])]


def test_wrap_keeps_span_styles():
    red, blue = Style(fg=RED), Style(fg=BLUE)
    result = wrap_line(Line([Span("abc", red), Span("def", blue)]), 4, 4)
    assert result == [
        Line([Span("abc", red), Span("d", blue)]),
        Line([Span("ef", blue)]),
    ]


def test_wrap_moves_wide_char_whole():
    assert texts(wrap_line(Line([Span("a日")]), 2, 2)) == ["a", "日"]


def test_wrap_empty_line():
    assert wrap_line(Line([]), 4, 4) == [Line([])]


def test_wrap_preserves_text_and_respects_widths():
    text = "the quick brown fox jumps over the lazy dog"
    result = wrap_line(Line([Span(text)]), 7, 11)
    assert "".join(texts(result)) == text
    assert result[0].width() <= 7
    assert all(line.width() <= 11 for line in result[1:])


def test_render_lines_top_down():
    buf = Buffer(Rect(0, 0, 6, 3))
    SelectableParagraph(plain("ab", "cd")).render(buf.area, buf)
    assert rows(buf) == ["ab    ", "cd    ", "      "]


def test_render_left_padding_shifts_content():
    buf = Buffer(Rect(0, 0, 6, 1))
    SelectableParagraph(plain("ab"), padding=Padding(left=2)).render(buf.area, buf)
    assert buf.row_text(0).startswith("  ab")


def test_render_top_padding_skips_rows():
    buf = Buffer(Rect(0, 0, 4, 3))
    SelectableParagraph(plain("ab"), padding=Padding(top=1)).render(buf.area, buf)
    assert buf.row_text(0) == "    "
    assert buf.row_text(1).startswith("ab")


def test_render_wrapped_continuation_uses_full_width():
    buf = Buffer(Rect(0, 0, 5, 2))
    SelectableParagraph(plain("abcdefg"), padding=Padding(left=2)).render(buf.area, buf)
    assert rows(buf) == ["  abc", "defg "]


def test_render_keeps_selected_line_centred():
    buf = Buffer(Rect(0, 0, 4, 3))
    lines = plain(*(f"l{i}" for i in range(10)))
    SelectableParagraph(lines, selected_line=5).render(buf.area, buf)
    assert buf.row_text(1).strip() == "l5"


def test_render_scroll_clamped_at_end():
    buf = Buffer(Rect(0, 0, 4, 3))
    lines = plain(*(f"l{i}" for i in range(10)))
    SelectableParagraph(lines, selected_line=9).render(buf.area, buf)
    assert buf.row_text(2).strip() == "l9"


def test_render_no_scroll_when_everything_fits():
    buf = Buffer(Rect(0, 0, 4, 3))
    SelectableParagraph(plain("l0", "l1"), selected_line=1).render(buf.area, buf)
    assert buf.row_text(0).strip() == "l0"


def test_render_selected_row_is_filled():
    buf = Buffer(Rect(0, 0, 5, 2))
    SelectableParagraph(
        plain("ab", "cd"), selected_line=0, selected_style=Style(bg=BLUE)
    ).render(buf.area, buf)
    assert all(buf.cell(x, 0).bg == BLUE for x in range(5))
    assert all(buf.cell(x, 1).bg is None for x in range(5))


def test_render_span_background_takes_priority():
    buf = Buffer(Rect(0, 0, 5, 1))
    lines = [Line([Span("ab", Style(bg=RED))])]
    SelectableParagraph(
        lines, selected_line=0, selected_style=Style(bg=BLUE)
    ).render(buf.area, buf)
    assert buf.cell(0, 0).bg == RED
    assert buf.cell(3, 0).bg == BLUE


def test_render_dims_lines_away_from_selection():
    buf = Buffer(Rect(0, 0, 4, 3))
    lines = [Line([Span(t, Style(fg=WHITE))]) for t in ("a", "b", "c")]
    para = SelectableParagraph(
        lines,
        selected_line=0,
        background_style=Style(bg=BLACK),
        selected_style=Style(bg=BLACK),
        dim_max_distance=2,
        dim_min_opacity=0.5,
    )
    para.render(buf.area, buf)
    assert buf.cell(0, 0).fg == WHITE
    assert buf.cell(0, 2).fg == blend(WHITE, para.dim_opacity(2), BLACK)
    assert buf.cell(0, 2).fg.r < WHITE.r


def test_render_inside_block():
    buf = Buffer(Rect(0, 0, 6, 3))
    SelectableParagraph(plain("ab"), block=Block(borders=True)).render(buf.area, buf)
    assert buf.row_text(1)[1:3] == "ab"
    assert buf.row_text(0)[0] == "┌"


def test_render_into_empty_area_draws_nothing():
    buf = Buffer(Rect(0, 0, 3, 1))
    SelectableParagraph(plain("abc")).render(Rect(0, 0, 0, 0), buf)
    assert buf.row_text(0) == "   "