"""A grid of styled terminal cells and the primitives drawn onto it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from wcwidth import wcwidth

from .colors import Color


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def _text_width(text: str) -> int:
    return sum(_char_width(ch) for ch in text)


def _truncate(text: str, width: int) -> str:
    kept = []
    used = 0
    for ch in text:
        w = _char_width(ch)
        if used + w > width:
            break
        kept.append(ch)
        used += w
    return "".join(kept)


@dataclass(frozen=True)
class Style:
    """Foreground and background colours; None leaves the existing colour alone."""

    fg: Optional[Color] = None
    bg: Optional[Color] = None

    def patch(self, other: "Style") -> "Style":
        """This style with every colour that ``other`` sets taken from ``other``."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
        )


@dataclass(frozen=True)
class Span:
    """A run of text drawn in one style."""

    text: str
    style: Style = Style()

    def width(self) -> int:
        """Number of terminal columns the text takes."""
        return _text_width(self.text)


@dataclass(frozen=True)
class Line:
    """One line of text made of styled spans."""

    spans: List[Span] = field(default_factory=list)

    def width(self) -> int:
        """Number of terminal columns the whole line takes."""
        return sum(span.width() for span in self.spans)


@dataclass(frozen=True)
class Padding:
    """Blank columns and rows kept free inside an area."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass
class Cell:
    """One terminal cell: the symbol shown and its colours."""

    symbol: str = " "
    fg: Optional[Color] = None
    bg: Optional[Color] = None

    def set_style(self, style: Style) -> None:
        """Take the colours ``style`` sets, keeping the others."""
        if style.fg is not None:
            self.fg = style.fg
        if style.bg is not None:
            self.bg = style.bg


class Buffer:
    """The cells of a screen area, addressed by absolute coordinates."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._rows = [[Cell() for _ in range(area.width)] for _ in range(area.height)]

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """The cell at (x, y), or None when it lies outside the buffer."""
        area = self.area
        if area.x <= x < area.right and area.y <= y < area.bottom:
            return self._rows[y - area.y][x - area.x]
        return None

    def set_string(self, x: int, y: int, text: str, style: Style) -> int:
        """Write ``text`` from (x, y), clipped at the buffer's right edge; return the next column."""
        if not self.area.y <= y < self.area.bottom:
            return x
        last: Optional[Cell] = None
        for ch in text:
            w = wcwidth(ch)
            if w < 0:
                continue
            if w == 0:
                if last is not None:
                    last.symbol += ch
                continue
            if x + w > self.area.right:
                break
            target = self.cell(x, y)
            if target is not None:
                target.symbol = ch
                target.set_style(style)
                for offset in range(1, w):
                    hidden = self.cell(x + offset, y)
                    if hidden is not None:
                        hidden.symbol = ""
                        hidden.set_style(style)
            last = target
            x += w
        return x

    def row_text(self, y: int) -> str:
        """The symbols of row ``y`` joined together."""
        if not self.area.y <= y < self.area.bottom:
            raise IndexError(f"row {y} is outside the buffer")
        return "".join(cell.symbol for cell in self._rows[y - self.area.y])


@dataclass(frozen=True)
class Block:
    """A frame around an area, with an optional title, padding and fill style."""

    borders: bool = False
    title: Optional[str] = None
    padding: Padding = Padding()
    style: Style = Style()

    def inner(self, area: Rect) -> Rect:
        """The part of ``area`` left for content inside borders and padding."""
        x, y, width, height = area.x, area.y, area.width, area.height
        if self.borders:
            x += 1
            y += 1
            width = max(width - 2, 0)
            height = max(height - 2, 0)
        elif self.title:
            y += 1
            height = max(height - 1, 0)
        pad = self.padding
        return Rect(
            x + pad.left,
            y + pad.top,
            max(width - pad.left - pad.right, 0),
            max(height - pad.top - pad.bottom, 0),
        )

    def render(self, area: Rect, buf: Buffer) -> None:
        """Fill ``area`` with the block's style and draw its frame and title."""
        for y in range(area.y, area.bottom):
            for x in range(area.x, area.right):
                cell = buf.cell(x, y)
                if cell is not None:
                    cell.set_style(self.style)
        if area.width == 0 or area.height == 0:
            return

        def put(x: int, y: int, symbol: str) -> None:
            cell = buf.cell(x, y)
            if cell is not None:
                cell.symbol = symbol

        if self.borders:
            left, right = area.x, area.right - 1
            top, bottom = area.y, area.bottom - 1
            for x in range(left, right + 1):
                put(x, top, "─")
                put(x, bottom, "─")
            for y in range(top, bottom + 1):
                put(left, y, "│")
                put(right, y, "│")
            put(left, top, "┌")
            put(right, top, "┐")
            put(left, bottom, "└")
            put(right, bottom, "┘")

        if self.title:
            if self.borders:
                start, room = area.x + 1, max(area.width - 2, 0)
            else:
                start, room = area.x, area.width
            buf.set_string(start, area.y, _truncate(self.title, room), self.style)