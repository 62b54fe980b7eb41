"""Built-in colour schemes, night-owl through tokyo-night."""

from __future__ import annotations

from .colors import Color as C
from .colors import Theme


def night_owl() -> Theme:
    """Night Owl inspired colour scheme."""
    return Theme(
        background_left=C(1, 22, 39),
        background_right=C(1, 22, 39),
        editor_line_number=C(78, 121, 147),
        editor_line_number_cursor=C(122, 162, 247),
        editor_separator=C(1, 76, 134),
        editor_cursor_char_bg=C(122, 162, 247),
        editor_cursor_char_fg=C(1, 22, 39),
        editor_cursor_line_bg=C(1, 41, 72),
        file_tree_added=C(173, 219, 103),
        file_tree_deleted=C(239, 83, 80),
        file_tree_modified=C(255, 213, 128),
        file_tree_renamed=C(122, 162, 247),
        file_tree_directory=C(130, 170, 255),
        file_tree_current_file_bg=C(1, 41, 72),
        file_tree_current_file_fg=C(214, 222, 235),
        file_tree_default=C(214, 222, 235),
        file_tree_stats_added=C(173, 219, 103),
        file_tree_stats_deleted=C(239, 83, 80),
        terminal_command=C(214, 222, 235),
        terminal_output=C(78, 121, 147),
        terminal_cursor_bg=C(122, 162, 247),
        terminal_cursor_fg=C(1, 22, 39),
        status_hash=C(255, 203, 107),
        status_author=C(173, 219, 103),
        status_date=C(122, 162, 247),
        status_message=C(214, 222, 235),
        status_no_commit=C(78, 121, 147),
        separator=C(1, 76, 134),
        syntax_keyword=C(199, 146, 234),
        syntax_type=C(255, 203, 107),
        syntax_function=C(130, 170, 255),
        syntax_variable=C(214, 222, 235),
        syntax_string=C(173, 219, 103),
        syntax_number=C(247, 140, 108),
        syntax_comment=C(78, 121, 147),
        syntax_operator=C(199, 146, 234),
        syntax_punctuation=C(127, 132, 142),
        syntax_constant=C(128, 203, 196),
        syntax_parameter=C(255, 203, 107),
        syntax_property=C(122, 162, 247),
        syntax_label=C(255, 88, 116),
    )


def nord() -> Theme:
    """Nord inspired colour scheme."""
    return Theme(
        background_left=C(36, 42, 56),
        background_right=C(46, 52, 64),
        editor_line_number=C(76, 86, 106),
        editor_line_number_cursor=C(136, 192, 208),
        editor_separator=C(76, 86, 106),
        editor_cursor_char_bg=C(136, 192, 208),
        editor_cursor_char_fg=C(46, 52, 64),
        editor_cursor_line_bg=C(59, 66, 82),
        file_tree_added=C(163, 190, 140),
        file_tree_deleted=C(191, 97, 106),
        file_tree_modified=C(235, 203, 139),
        file_tree_renamed=C(129, 161, 193),
        file_tree_directory=C(136, 192, 208),
        file_tree_current_file_bg=C(59, 66, 82),
        file_tree_current_file_fg=C(236, 239, 244),
        file_tree_default=C(216, 222, 233),
        file_tree_stats_added=C(163, 190, 140),
        file_tree_stats_deleted=C(191, 97, 106),
        terminal_command=C(236, 239, 244),
        terminal_output=C(76, 86, 106),
        terminal_cursor_bg=C(136, 192, 208),
        terminal_cursor_fg=C(46, 52, 64),
        status_hash=C(235, 203, 139),
        status_author=C(163, 190, 140),
        status_date=C(129, 161, 193),
        status_message=C(236, 239, 244),
        status_no_commit=C(76, 86, 106),
        separator=C(76, 86, 106),
        syntax_keyword=C(180, 142, 173),
        syntax_type=C(136, 192, 208),
        syntax_function=C(136, 192, 208),
        syntax_variable=C(236, 239, 244),
        syntax_string=C(163, 190, 140),
        syntax_number=C(180, 142, 173),
        syntax_comment=C(76, 86, 106),
        syntax_operator=C(136, 192, 208),
        syntax_punctuation=C(216, 222, 233),
        syntax_constant=C(180, 142, 173),
        syntax_parameter=C(235, 203, 139),
        syntax_property=C(163, 190, 140),
        syntax_label=C(180, 142, 173),
    )


def one_dark() -> Theme:
    """One Dark inspired colour scheme."""
    return Theme(
        background_left=C(33, 37, 43),
        background_right=C(40, 44, 52),
        editor_line_number=C(92, 99, 112),
        editor_line_number_cursor=C(97, 175, 239),
        editor_separator=C(92, 99, 112),
        editor_cursor_char_bg=C(97, 175, 239),
        editor_cursor_char_fg=C(40, 44, 52),
        editor_cursor_line_bg=C(47, 52, 61),
        file_tree_added=C(152, 195, 121),
        file_tree_deleted=C(224, 108, 117),
        file_tree_modified=C(209, 154, 102),
        file_tree_renamed=C(97, 175, 239),
        file_tree_directory=C(97, 175, 239),
        file_tree_current_file_bg=C(47, 52, 61),
        file_tree_current_file_fg=C(220, 223, 228),
        file_tree_default=C(171, 178, 191),
        file_tree_stats_added=C(152, 195, 121),
        file_tree_stats_deleted=C(224, 108, 117),
        terminal_command=C(220, 223, 228),
        terminal_output=C(92, 99, 112),
        terminal_cursor_bg=C(97, 175, 239),
        terminal_cursor_fg=C(40, 44, 52),
        status_hash=C(229, 192, 123),
        status_author=C(152, 195, 121),
        status_date=C(97, 175, 239),
        status_message=C(220, 223, 228),
        status_no_commit=C(92, 99, 112),
        separator=C(92, 99, 112),
        syntax_keyword=C(198, 120, 221),
        syntax_type=C(229, 192, 123),
        syntax_function=C(97, 175, 239),
        syntax_variable=C(220, 223, 228),
        syntax_string=C(152, 195, 121),
        syntax_number=C(209, 154, 102),
        syntax_comment=C(92, 99, 112),
        syntax_operator=C(198, 120, 221),
        syntax_punctuation=C(171, 178, 191),
        syntax_constant=C(209, 154, 102),
        syntax_parameter=C(229, 192, 123),
        syntax_property=C(152, 195, 121),
        syntax_label=C(198, 120, 221),
    )


def rose_pine() -> Theme:
    """Rose Pine inspired colour scheme."""
    return Theme(
        background_left=C(25, 23, 36),
        background_right=C(35, 33, 54),
        editor_line_number=C(110, 106, 134),
        editor_line_number_cursor=C(156, 207, 216),
        editor_separator=C(110, 106, 134),
        editor_cursor_char_bg=C(235, 188, 186),
        editor_cursor_char_fg=C(35, 33, 54),
        editor_cursor_line_bg=C(42, 39, 63),
        file_tree_added=C(156, 207, 216),
        file_tree_deleted=C(235, 111, 146),
        file_tree_modified=C(246, 193, 119),
        file_tree_renamed=C(196, 167, 231),
        file_tree_directory=C(196, 167, 231),
        file_tree_current_file_bg=C(42, 39, 63),
        file_tree_current_file_fg=C(224, 222, 244),
        file_tree_default=C(224, 222, 244),
        file_tree_stats_added=C(156, 207, 216),
        file_tree_stats_deleted=C(235, 111, 146),
        terminal_command=C(224, 222, 244),
        terminal_output=C(110, 106, 134),
        terminal_cursor_bg=C(235, 188, 186),
        terminal_cursor_fg=C(35, 33, 54),
        status_hash=C(246, 193, 119),
        status_author=C(156, 207, 216),
        status_date=C(196, 167, 231),
        status_message=C(224, 222, 244),
        status_no_commit=C(110, 106, 134),
        separator=C(110, 106, 134),
        syntax_keyword=C(196, 167, 231),
        syntax_type=C(246, 193, 119),
        syntax_function=C(156, 207, 216),
        syntax_variable=C(224, 222, 244),
        syntax_string=C(246, 193, 119),
        syntax_number=C(234, 154, 151),
        syntax_comment=C(110, 106, 134),
        syntax_operator=C(235, 111, 146),
        syntax_punctuation=C(144, 140, 170),
        syntax_constant=C(235, 188, 186),
        syntax_parameter=C(246, 193, 119),
        syntax_property=C(156, 207, 216),
        syntax_label=C(196, 167, 231),
    )


def solarized_dark() -> Theme:
    """Solarized Dark colour scheme."""
    return Theme(
        background_left=C(0, 36, 41),
        background_right=C(0, 43, 54),
        editor_line_number=C(88, 110, 117),
        editor_line_number_cursor=C(38, 139, 210),
        editor_separator=C(88, 110, 117),
        editor_cursor_char_bg=C(38, 139, 210),
        editor_cursor_char_fg=C(0, 43, 54),
        editor_cursor_line_bg=C(7, 54, 66),
        file_tree_added=C(133, 153, 0),
        file_tree_deleted=C(220, 50, 47),
        file_tree_modified=C(181, 137, 0),
        file_tree_renamed=C(38, 139, 210),
        file_tree_directory=C(42, 161, 152),
        file_tree_current_file_bg=C(7, 54, 66),
        file_tree_current_file_fg=C(238, 232, 213),
        file_tree_default=C(131, 148, 150),
        file_tree_stats_added=C(133, 153, 0),
        file_tree_stats_deleted=C(220, 50, 47),
        terminal_command=C(238, 232, 213),
        terminal_output=C(88, 110, 117),
        terminal_cursor_bg=C(38, 139, 210),
        terminal_cursor_fg=C(0, 43, 54),
        status_hash=C(181, 137, 0),
        status_author=C(133, 153, 0),
        status_date=C(38, 139, 210),
        status_message=C(238, 232, 213),
        status_no_commit=C(88, 110, 117),
        separator=C(88, 110, 117),
        syntax_keyword=C(203, 75, 22),
        syntax_type=C(181, 137, 0),
        syntax_function=C(38, 139, 210),
        syntax_variable=C(131, 148, 150),
        syntax_string=C(42, 161, 152),
        syntax_number=C(108, 113, 196),
        syntax_comment=C(88, 110, 117),
        syntax_operator=C(203, 75, 22),
        syntax_punctuation=C(131, 148, 150),
        syntax_constant=C(108, 113, 196),
        syntax_parameter=C(181, 137, 0),
        syntax_property=C(42, 161, 152),
        syntax_label=C(211, 54, 130),
    )


def solarized_light() -> Theme:
    """Solarized Light colour scheme."""
    return Theme(
        background_left=C(250, 245, 225),
        background_right=C(253, 246, 227),
        editor_line_number=C(147, 161, 161),
        editor_line_number_cursor=C(38, 139, 210),
        editor_separator=C(147, 161, 161),
        editor_cursor_char_bg=C(38, 139, 210),
        editor_cursor_char_fg=C(253, 246, 227),
        editor_cursor_line_bg=C(238, 232, 213),
        file_tree_added=C(133, 153, 0),
        file_tree_deleted=C(220, 50, 47),
        file_tree_modified=C(181, 137, 0),
        file_tree_renamed=C(38, 139, 210),
        file_tree_directory=C(42, 161, 152),
        file_tree_current_file_bg=C(238, 232, 213),
        file_tree_current_file_fg=C(7, 54, 66),
        file_tree_default=C(101, 123, 131),
        file_tree_stats_added=C(133, 153, 0),
        file_tree_stats_deleted=C(220, 50, 47),
        terminal_command=C(7, 54, 66),
        terminal_output=C(147, 161, 161),
        terminal_cursor_bg=C(38, 139, 210),
        terminal_cursor_fg=C(253, 246, 227),
        status_hash=C(181, 137, 0),
        status_author=C(133, 153, 0),
        status_date=C(38, 139, 210),
        status_message=C(7, 54, 66),
        status_no_commit=C(147, 161, 161),
        separator=C(147, 161, 161),
        syntax_keyword=C(203, 75, 22),
        syntax_type=C(181, 137, 0),
        syntax_function=C(38, 139, 210),
        syntax_variable=C(101, 123, 131),
        syntax_string=C(42, 161, 152),
        syntax_number=C(108, 113, 196),
        syntax_comment=C(147, 161, 161),
        syntax_operator=C(203, 75, 22),
        syntax_punctuation=C(101, 123, 131),
        syntax_constant=C(108, 113, 196),
        syntax_parameter=C(181, 137, 0),
        syntax_property=C(42, 161, 152),
        syntax_label=C(211, 54, 130),
    )


def tokyo_night() -> Theme:
    """Tokyo Night inspired colour scheme."""
    return Theme(
        background_left=C(30, 34, 54),
        background_right=C(26, 27, 38),
        editor_line_number=C(86, 95, 137),
        editor_line_number_cursor=C(125, 207, 255),
        editor_separator=C(86, 95, 137),
        editor_cursor_char_bg=C(122, 162, 247),
        editor_cursor_char_fg=C(26, 27, 38),
        editor_cursor_line_bg=C(42, 47, 68),
        file_tree_added=C(158, 206, 106),
        file_tree_deleted=C(247, 118, 142),
        file_tree_modified=C(255, 158, 100),
        file_tree_renamed=C(122, 162, 247),
        file_tree_directory=C(122, 162, 247),
        file_tree_current_file_bg=C(42, 47, 68),
        file_tree_current_file_fg=C(192, 202, 245),
        file_tree_default=C(192, 202, 245),
        file_tree_stats_added=C(158, 206, 106),
        file_tree_stats_deleted=C(247, 118, 142),
        terminal_command=C(192, 202, 245),
        terminal_output=C(86, 95, 137),
        terminal_cursor_bg=C(122, 162, 247),
        terminal_cursor_fg=C(26, 27, 38),
        status_hash=C(255, 213, 128),
        status_author=C(158, 206, 106),
        status_date=C(122, 162, 247),
        status_message=C(192, 202, 245),
        status_no_commit=C(86, 95, 137),
        separator=C(86, 95, 137),
        syntax_keyword=C(187, 154, 247),
        syntax_type=C(125, 207, 255),
        syntax_function=C(122, 162, 247),
        syntax_variable=C(192, 202, 245),
        syntax_string=C(158, 206, 106),
        syntax_number=C(255, 158, 100),
        syntax_comment=C(86, 95, 137),
        syntax_operator=C(125, 207, 255),
        syntax_punctuation=C(140, 148, 184),
        syntax_constant=C(255, 158, 100),
        syntax_parameter=C(255, 213, 128),
        syntax_property=C(158, 206, 106),
        syntax_label=C(187, 154, 247),
    )