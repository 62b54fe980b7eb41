"""Colour values and the theme record used to paint every pane."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import ClassVar, Optional, Tuple


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB colour, or the terminal's own default when all channels are None."""

    r: Optional[int] = None
    g: Optional[int] = None
    b: Optional[int] = None

    RESET: ClassVar["Color"]

    def __post_init__(self) -> None:
        channels = (self.r, self.g, self.b)
        if all(c is None for c in channels):
            return
        if any(c is None for c in channels):
            raise ValueError("an RGB colour needs all three channels")
        for channel in channels:
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise TypeError(f"colour channel must be an int, got {channel!r}")
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0..255: {channel}")

    def is_reset(self) -> bool:
        """True when this colour defers to the terminal's default."""
        return self.r is None

    @property
    def rgb(self) -> Optional[Tuple[int, int, int]]:
        """The (r, g, b) triple, or None for the terminal default."""
        if self.is_reset():
            return None
        return (self.r, self.g, self.b)  # type: ignore[return-value]

    def __str__(self) -> str:
        if self.is_reset():
            return "reset"
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Color.RESET = Color()


@dataclass(frozen=True)
class Theme:
    """Every colour the screensaver draws with."""

    # Background colours
    background_left: Color
    background_right: Color

    # Editor
    editor_line_number: Color
    editor_line_number_cursor: Color
    editor_separator: Color
    editor_cursor_char_bg: Color
    editor_cursor_char_fg: Color
    editor_cursor_line_bg: Color

    # File tree
    file_tree_added: Color
    file_tree_deleted: Color
    file_tree_modified: Color
    file_tree_renamed: Color
    file_tree_directory: Color
    file_tree_current_file_bg: Color
    file_tree_current_file_fg: Color
    file_tree_default: Color
    file_tree_stats_added: Color
    file_tree_stats_deleted: Color

    # Terminal
    terminal_command: Color
    terminal_output: Color
    terminal_cursor_bg: Color
    terminal_cursor_fg: Color

    # Status bar
    status_hash: Color
    status_author: Color
    status_date: Color
    status_message: Color
    status_no_commit: Color

    # Separators
    separator: Color

    # Syntax highlighting
    syntax_keyword: Color
    syntax_type: Color
    syntax_function: Color
    syntax_variable: Color
    syntax_string: Color
    syntax_number: Color
    syntax_comment: Color
    syntax_operator: Color
    syntax_punctuation: Color
    syntax_constant: Color
    syntax_parameter: Color
    syntax_property: Color
    syntax_label: Color

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, Color):
                raise TypeError(f"{field.name} must be a Color, got {value!r}")

    def with_transparent_background(self) -> "Theme":
        """A copy whose background colours defer to the terminal."""
        return replace(self, background_left=Color.RESET, background_right=Color.RESET)