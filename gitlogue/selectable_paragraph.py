"""A paragraph that wraps at character boundaries and highlights one line."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from wcwidth import wcwidth

from .buffer import Block, Buffer, Line, Padding, Rect, Span, Style
from .colors import Color


def blend(foreground: Color, opacity: float, background: Color) -> Color:
    """Mix ``foreground`` over ``background``; non-RGB colours come back unchanged."""
    if foreground.is_reset() or background.is_reset():
        return foreground

    def mix(front: int, back: int) -> int:
        value = front * opacity + back * (1.0 - opacity)
        if value != value:  # NaN
            return 0
        return min(255, max(0, int(value)))

    return Color(
        mix(foreground.r, background.r),
        mix(foreground.g, background.g),
        mix(foreground.b, background.b),
    )


def wrap_line(line: Line, first_line_width: int, continuation_width: int) -> List[Line]:
    """Break ``line`` into lines no wider than the given widths, keeping span styles."""
    if first_line_width == 0:
        return [line]

    wrapped: List[Line] = []
    current: List[Span] = []
    width = 0
    limit = first_line_width

    for span in line.spans:
        pending: List[str] = []
        for ch in span.text:
            ch_width = max(wcwidth(ch), 0)
            if width + ch_width > limit and width > 0:
                if pending:
                    current.append(replace(span, text="".join(pending)))
                    pending = []
                wrapped.append(Line(current))
                current = []
                width = 0
                limit = continuation_width
            pending.append(ch)
            width += ch_width
        if pending:
            current.append(replace(span, text="".join(pending)))

    if current:
        wrapped.append(Line(current))
    return wrapped or [Line([])]


_Row = Tuple[int, Line, bool, bool]


@dataclass
class SelectableParagraph:
    """Lines of text with one selected line kept centred and the others dimmed."""

    lines: List[Line] = field(default_factory=list)
    block: Optional[Block] = None
    selected_line: Optional[int] = None
    selected_style: Style = Style()
    background_style: Style = Style()
    padding: Padding = Padding()
    dim_max_distance: Optional[int] = None
    dim_min_opacity: float = 0.6

    def dim_opacity(self, line_index: int) -> float:
        """Opacity of a line: 1.0 at the selection, fading to the minimum with distance."""
        if self.selected_line is None or self.dim_max_distance is None:
            return 1.0
        distance = abs(line_index - self.selected_line)
        if distance == 0:
            return 1.0
        if self.dim_max_distance == 0:
            return self.dim_min_opacity
        fraction = min(distance, self.dim_max_distance) / self.dim_max_distance
        return 1.0 - fraction * (1.0 - self.dim_min_opacity)

    def _scroll_offset(self, rows: List[_Row], height: int) -> int:
        if self.selected_line is None or len(rows) <= height:
            return 0
        selected_row = next(
            (n for n, row in enumerate(rows) if row[0] == self.selected_line), 0
        )
        offset = max(selected_row - height // 2, 0)
        return min(offset, len(rows) - height)

    @staticmethod
    def _fill(buf: Buffer, origin: int, start: int, stop: int, y: int, style: Style) -> None:
        for x in range(start, stop):
            cell = buf.cell(origin + x, y)
            if cell is not None:
                cell.set_style(style)

    def _draw(
        self,
        buf: Buffer,
        origin: int,
        y: int,
        line: Line,
        is_selected: bool,
        opacity: float,
        bg_color: Color,
    ) -> int:
        x_pos = 0
        for span in line.spans:
            style = span.style
            if is_selected:
                if span.style.bg is None:
                    style = replace(style, bg=self.selected_style.bg)
                if span.style.fg is None:
                    style = replace(style, fg=self.selected_style.fg)
            if style.fg is not None:
                style = replace(style, fg=blend(style.fg, opacity, bg_color))
            buf.set_string(origin + x_pos, y, span.text, style)
            x_pos += span.width()
        return x_pos

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the paragraph into ``area`` of ``buf``."""
        if self.block is not None:
            inner = self.block.inner(area)
            self.block.render(area, buf)
            area = inner
        if area.width == 0 or area.height == 0:
            return

        pad = self.padding
        inner = Rect(
            area.x,
            area.y + pad.top,
            area.width,
            max(area.height - pad.top - pad.bottom, 0),
        )
        if inner.width == 0 or inner.height == 0:
            return

        first_width = max(inner.width - pad.left, 0)
        continuation_width = inner.width
        no_wrap_width = max(inner.width - pad.left - pad.right, 0)
        height = inner.height

        rows: List[_Row] = []
        for index, line in enumerate(self.lines):
            wrapped = wrap_line(line, first_width, continuation_width)
            has_wrap = len(wrapped) > 1
            rows.extend(
                (index, piece, n == 0, has_wrap) for n, piece in enumerate(wrapped)
            )

        offset = self._scroll_offset(rows, height)
        for y, (index, line, is_first, has_wrap) in enumerate(rows[offset:offset + height]):
            is_selected = self.selected_line == index
            opacity = self.dim_opacity(index)
            fill = self.selected_style if is_selected else self.background_style
            bg_color = fill.bg if fill.bg is not None else Color.RESET
            row_y = inner.y + y

            if is_first and not has_wrap:
                if pad.left + pad.right > inner.width:
                    continue
                self._fill(buf, inner.x, 0, pad.left, row_y, fill)
                content_x = inner.x + pad.left
                used = self._draw(buf, content_x, row_y, line, is_selected, opacity, bg_color)
                self._fill(buf, content_x, used, no_wrap_width, row_y, fill)
                self._fill(buf, content_x + no_wrap_width, 0, pad.right, row_y, fill)
            elif is_first:
                if pad.left > inner.width:
                    continue
                self._fill(buf, inner.x, 0, pad.left, row_y, fill)
                content_x = inner.x + pad.left
                used = self._draw(buf, content_x, row_y, line, is_selected, opacity, bg_color)
                self._fill(buf, content_x, used, continuation_width - pad.left, row_y, fill)
            else:
                used = self._draw(buf, inner.x, row_y, line, is_selected, opacity, bg_color)
                self._fill(buf, inner.x, used, continuation_width, row_y, fill)